"""
CPS::Client::Request::Lookup - Requests addressing documents by identifier

The identifiers go to the 'id' unknown parameter, as a single string or a
list of strings.
"""

from typing import Any, Optional

from CPS.Client.Command import Command

from . import Request


class RetrieveRequest(Request):
    COMMAND = Command.RETRIEVE

    def __init__(self, ids: Any, **params: Any) -> None:
        super().__init__(self.COMMAND, **params)
        self.documentIds = ids


class LookupRequest(Request):
    """
    Lookup request.

    Args:
        ids: Identifiers of the documents to look up
        list: Listing policy
    """

    COMMAND = Command.LOOKUP

    def __init__(self, ids: Any, list: Optional[dict] = None, **params: Any) -> None:
        super().__init__(self.COMMAND, **params)
        self.documentIds = ids
        self.setList(list)


class ShowHistoryRequest(Request):
    """
    Show history request.

    Args:
        ids: Documents to show the history of
        return_docs: Also return the historical document contents
    """

    COMMAND = Command.SHOW_HISTORY

    def __init__(self, ids: Any, return_docs: Any = False, **params: Any) -> None:
        super().__init__(self.COMMAND, **params)
        self.documentIds = ids
        if return_docs:
            self.setParam('return_doc', 'yes')
