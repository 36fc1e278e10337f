"""
CPS::Client::Request::Search - Search family requests

search, search-delete, alternatives and list-words all revolve around a
query, given either as a string or as a query object.
"""

from typing import Any, Optional

from CPS.Client.Command import Command
from CPS.Client.Tools import isObject, isString

from . import Request


class SearchRequest(Request):
    """
    Search request.

    Args:
        query: Query string, or a template mapping for object-driven construction
        offset: Number of results to skip
        docs: Number of documents to return
        list: Listing policy
    """

    COMMAND = Command.SEARCH

    def __init__(self, query: Any, offset: Any = None, docs: Any = None,
                 list: Optional[dict] = None, **params: Any) -> None:
        if isObject(query):
            super().__init__(query, **params)
            return

        super().__init__(self.COMMAND, **params)
        self.setQuery(query)
        self.setOffset(offset)
        self.setDocs(docs)
        if list:
            self.setList(list)


class SQLSearchRequest(SearchRequest):
    """SQL search request, the query string is sent as the 'sql' parameter."""

    def __init__(self, query: Any, **params: Any) -> None:
        if isObject(query):
            super().__init__(query, **params)
            return

        Request.__init__(self, self.COMMAND, **params)
        if isString(query):
            self.setParam('sql', query)
        else:
            self._ignore('SQLSearchRequest', query)


class SearchDeleteRequest(Request):
    """Delete every document matching the query."""

    COMMAND = Command.SEARCH_DELETE

    def __init__(self, query: Any, **params: Any) -> None:
        if isObject(query):
            super().__init__(query, **params)
            return

        super().__init__(self.COMMAND, **params)
        self.setQuery(query)


class AlternativesRequest(Request):
    """
    Alternatives request, spelling suggestions for the query terms.

    Args:
        query: Query string or object
        cr: Minimum ratio between the occurrence of the alternative and the
            occurrence of the search term
        idif: Limit on how much the alternative may differ from the search term
        h: Limit on the overall estimate of the quality of the alternative
    """

    COMMAND = Command.ALTERNATIVES

    def __init__(self, query: Any, cr: Any = None, idif: Any = None,
                 h: Any = None, **params: Any) -> None:
        super().__init__(self.COMMAND, **params)
        self.setQuery(query)
        self.setCr(cr)
        self.setIdif(idif)
        self.setH(h)


class ListWordsRequest(Request):
    COMMAND = Command.LIST_WORDS

    def __init__(self, query: Any, **params: Any) -> None:
        super().__init__(self.COMMAND, **params)
        self.setQuery(query)
