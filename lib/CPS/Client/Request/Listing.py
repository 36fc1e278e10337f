"""
CPS::Client::Request::Listing - Paging over the first or last documents

list-last, list-first, retrieve-last and retrieve-first share offset/docs
paging; only the list-* commands take a listing policy.
"""

from typing import Any, Optional

from CPS.Client.Command import Command

from . import Request


class ListLastRetrieveFirstRequest(Request):
    """
    Shared base of the paging requests.

    Args:
        command: Command type
        offset: Document offset to return from
        docs: Document count to return
        list: Listing policy
    """

    def __init__(self, command: str, offset: Any = None, docs: Any = None,
                 list: Optional[dict] = None, **params: Any) -> None:
        super().__init__(command, **params)
        self.setOffset(offset)
        self.setDocs(docs)
        if list:
            self.setList(list)


class ListLastRequest(ListLastRetrieveFirstRequest):
    COMMAND = Command.LIST_LAST

    def __init__(self, list: Optional[dict] = None, offset: Any = None,
                 docs: Any = None, **params: Any) -> None:
        super().__init__(self.COMMAND, offset, docs, list, **params)


class ListFirstRequest(ListLastRetrieveFirstRequest):
    COMMAND = Command.LIST_FIRST

    def __init__(self, list: Optional[dict] = None, offset: Any = None,
                 docs: Any = None, **params: Any) -> None:
        super().__init__(self.COMMAND, offset, docs, list, **params)


class RetrieveLastRequest(ListLastRetrieveFirstRequest):
    COMMAND = Command.RETRIEVE_LAST

    def __init__(self, offset: Any = None, docs: Any = None, **params: Any) -> None:
        super().__init__(self.COMMAND, offset, docs, **params)


class RetrieveFirstRequest(ListLastRetrieveFirstRequest):
    COMMAND = Command.RETRIEVE_FIRST

    def __init__(self, offset: Any = None, docs: Any = None, **params: Any) -> None:
        super().__init__(self.COMMAND, offset, docs, **params)
