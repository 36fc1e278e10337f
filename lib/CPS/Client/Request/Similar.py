"""
CPS::Client::Request::Similar - Similarity search requests

Both requests extract keywords from a source (a stored document or a chunk
of text) and search for documents matching enough of them.
"""

from typing import Any

from CPS.Client.Command import Command
from CPS.Client.Tools import isNumber, isObject, isString

from . import Request


class _SimilarRequest(Request):
    COMMAND = Command.SIMILAR

    # Parameter naming the keyword source
    SOURCE = ''

    def __init__(self, source: Any, length: Any = None, quota: Any = None,
                 offset: Any = None, docs: Any = None, query: Any = None,
                 **params: Any) -> None:
        if isObject(source):
            super().__init__(source, **params)
            return

        super().__init__(self.COMMAND, **params)
        if isString(source):
            self.setParam(self.SOURCE, source)
        if isNumber(length):
            self.setParam('len', length)
        if isNumber(quota):
            self.setParam('quota', quota)
        self.setOffset(offset)
        self.setDocs(docs)
        self.setQuery(query)


class SimilarDocumentsRequest(_SimilarRequest):
    """
    Search documents similar to a stored one.

    Args:
        id: ID of the source document
        length: Number of keywords to extract from the source
        quota: Minimum number of keywords matching in the destination
        offset: Number of results to skip
        docs: Number of documents to retrieve
        query: Optional query all found documents have to match
    """

    SOURCE = 'id'


class SimilarTextRequest(_SimilarRequest):
    """
    Search documents similar to a chunk of text.

    Same arguments as SimilarDocumentsRequest, with the text replacing the
    source document ID.
    """

    SOURCE = 'text'
