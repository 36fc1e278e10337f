"""
CPS::Client::Request::Modify - Document modification requests

The documents travel untouched in the 'document' unknown parameter: XML
strings, document mappings, or lists of either.
"""

from typing import Any

from CPS.Client.Command import Command

from . import Request


class ModifyRequest(Request):
    """
    Modify request.

    Args:
        command: Command type (insert, update, replace, partial-replace)
        documents: Documents to modify
    """

    def __init__(self, command: str, documents: Any, **params: Any) -> None:
        super().__init__(command, **params)
        self.documentPayloads = documents


class InsertRequest(ModifyRequest):
    COMMAND = Command.INSERT

    def __init__(self, documents: Any, **params: Any) -> None:
        super().__init__(self.COMMAND, documents, **params)


class UpdateRequest(ModifyRequest):
    COMMAND = Command.UPDATE

    def __init__(self, documents: Any, **params: Any) -> None:
        super().__init__(self.COMMAND, documents, **params)


class ReplaceRequest(ModifyRequest):
    COMMAND = Command.REPLACE

    def __init__(self, documents: Any, **params: Any) -> None:
        super().__init__(self.COMMAND, documents, **params)


class PartialReplaceRequest(ModifyRequest):
    """Replace only the fields present in the given documents."""

    COMMAND = Command.PARTIAL_REPLACE

    def __init__(self, documents: Any, **params: Any) -> None:
        super().__init__(self.COMMAND, documents, **params)


class DeleteRequest(ModifyRequest):
    """
    Delete request.

    Args:
        ids: Identifier or list of identifiers of the documents to delete
    """

    COMMAND = Command.DELETE

    def __init__(self, ids: Any, **params: Any) -> None:
        Request.__init__(self, self.COMMAND, **params)
        self.documentIds = ids
