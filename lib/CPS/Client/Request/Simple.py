"""
CPS::Client::Request::Simple - Requests made of their command only

Plus list-facets, which only takes facet paths.
"""

from typing import Any

from CPS.Client.Command import Command

from . import Request


class _SimpleRequest(Request):
    def __init__(self, **params: Any) -> None:
        super().__init__(self.COMMAND, **params)


class StatusRequest(_SimpleRequest):
    COMMAND = Command.STATUS


class ListPathsRequest(_SimpleRequest):
    COMMAND = Command.LIST_PATHS


class BeginTransactionRequest(_SimpleRequest):
    COMMAND = Command.BEGIN_TRANSACTION


class CommitTransactionRequest(_SimpleRequest):
    COMMAND = Command.COMMIT_TRANSACTION


class RollbackTransactionRequest(_SimpleRequest):
    COMMAND = Command.ROLLBACK_TRANSACTION


class ListFacetsRequest(Request):
    """
    List facet terms.

    Args:
        paths: A single facet path or a list of paths to list the terms from
    """

    COMMAND = Command.LIST_FACETS

    def __init__(self, paths: Any = None, **params: Any) -> None:
        super().__init__(self.COMMAND, **params)
        self.setPath(paths)
