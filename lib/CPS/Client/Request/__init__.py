"""
CPS::Client::Request - Base class for client requests

A request is a command name plus a bag of well-known parameters and a bag of
"unknown" parameters (document identifiers and payloads) which are flattened
onto the wire with their leading underscore stripped.

Setters validate their value and silently ignore anything of the wrong type,
the server stays the only place where a request is rejected.
"""

from typing import Any, Dict, Mapping, Optional, Union

from CPS.Client.Command import Command
from CPS.Client.Tools import (
    isArray,
    isNumber,
    isObject,
    isScalar,
    isString,
    isStringList,
)
from CPS.Client.XML import XML

# Wire tag of each unknown parameter
UNKNOWN_PARAM_TAGS = {
    '_id': 'id',
    '_document': 'document',
}

# Unknown parameters whose string values may be XML fragments
RAW_TAGS = ['document']


def wireTag(key: str) -> str:
    """Return the wire tag of an unknown parameter key."""
    if key in UNKNOWN_PARAM_TAGS:
        return UNKNOWN_PARAM_TAGS[key]
    return key[1:] if key.startswith('_') else key


class Request:
    """Base request builder."""

    # Default command of the variant, used for object-driven construction
    COMMAND: Optional[str] = None

    def __init__(self, command: Union[str, Mapping[str, Any]], **params: Any) -> None:
        """
        Initialize the request.

        Args:
            command: Command name, or a template mapping carrying the request
                fields and optionally its own 'command'
            **params: Parameters including:
                - logger: Logger instance
        """
        self.logger = params.get('logger')
        self.params: Dict[str, Any] = {}
        self.unknownParams: Dict[str, Any] = {}

        template: Optional[Mapping[str, Any]] = None
        if isObject(command):
            template = command
            command = template.get('command') or self.COMMAND

        if not command or not isString(command):
            raise ValueError("no command for request")

        self._command = str(command)
        if not Command.isKnown(self._command) and self.logger:
            self.logger.debug(f"request: passing through unsupported command '{self._command}'")

        if template is not None:
            self._applyTemplate(template)

    @classmethod
    def fromTemplate(cls, template: Mapping[str, Any], **params: Any) -> 'Request':
        """
        Build a request of this class from a template mapping.

        Positional construction of the variant is skipped entirely, the
        template carries every field. Its 'command' wins over the class
        default.
        """
        request = cls.__new__(cls)
        Request.__init__(request, dict(template), **params)
        return request

    @property
    def command(self) -> str:
        return self._command

    def _applyTemplate(self, template: Mapping[str, Any]) -> None:
        setters = {
            'query': self.setQuery,
            'offset': self.setOffset,
            'docs': self.setDocs,
            'list': self.setList,
            'path': self.setPath,
            'cr': self.setCr,
            'idif': self.setIdif,
            'h': self.setH,
        }
        for key, value in template.items():
            if not isString(key):
                self._ignore('template', key)
                continue
            if key == 'command':
                continue
            if key in setters:
                setters[key](value)
            elif key.startswith('_'):
                self._setUnknown(key, value)
            else:
                self.setParam(key, value)

    def _ignore(self, setter: str, value: Any) -> None:
        if self.logger:
            self.logger.debug2(f"request: {setter} ignoring value {value!r}")

    # A wire tag lives in one bag only, unknown parameters win
    def _setKnown(self, name: str, value: Any) -> None:
        if any(wireTag(key) == name for key in self.unknownParams):
            self._ignore(f'param {name!r} held by unknown parameters,', value)
            return
        self.params[name] = value

    def _setUnknown(self, key: str, value: Any) -> None:
        self.params.pop(wireTag(key), None)
        self.unknownParams[key] = value

    # Typed setters
    def setQuery(self, query: Any) -> None:
        if isString(query) or isObject(query):
            self._setKnown('query', query)
        else:
            self._ignore('setQuery', query)

    def setOffset(self, offset: Any) -> None:
        self._setNumber('setOffset', 'offset', offset)

    def setDocs(self, docs: Any) -> None:
        self._setNumber('setDocs', 'docs', docs)

    def setList(self, policy: Any) -> None:
        """Set the listing policy, passed through verbatim."""
        if policy and isObject(policy):
            self._setKnown('list', policy)
        else:
            self._ignore('setList', policy)

    def setParam(self, name: Any, value: Any) -> None:
        if isString(name) and name and (isScalar(value) or isStringList(value)):
            self._setKnown(name, value)
        else:
            self._ignore(f'setParam({name!r})', value)

    def setPath(self, path: Any) -> None:
        if isString(path) or isStringList(path):
            self._setKnown('path', path)
        else:
            self._ignore('setPath', path)

    def setCr(self, cr: Any) -> None:
        self._setNumber('setCr', 'cr', cr)

    def setIdif(self, idif: Any) -> None:
        self._setNumber('setIdif', 'idif', idif)

    def setH(self, h: Any) -> None:
        self._setNumber('setH', 'h', h)

    def _setNumber(self, setter: str, name: str, value: Any) -> None:
        if isNumber(value):
            self._setKnown(name, value)
        else:
            self._ignore(setter, value)

    # Named accessors over the unknown parameters
    @property
    def documentIds(self) -> Any:
        return self.unknownParams.get('_id')

    @documentIds.setter
    def documentIds(self, ids: Any) -> None:
        if isString(ids) or isArray(ids):
            self._setUnknown('_id', ids)
        else:
            self._ignore('documentIds', ids)

    @property
    def documentPayloads(self) -> Any:
        return self.unknownParams.get('_document')

    @documentPayloads.setter
    def documentPayloads(self, documents: Any) -> None:
        if isString(documents) or isObject(documents) or isArray(documents):
            self._setUnknown('_document', documents)
        else:
            self._ignore('documentPayloads', documents)

    # Serialization
    def dumpAsHash(self) -> Dict[str, Any]:
        """
        Get the structure handed to the XML writer.

        Returns:
            Single-key dict: the command mapped to its parameters, followed by
            the unknown parameters under their wire tag
        """
        content: Dict[str, Any] = dict(self.params)
        for key, value in self.unknownParams.items():
            content[wireTag(key)] = value
        return {self._command: content}

    def getContent(self) -> str:
        """Generate XML content for the request."""
        return XML(raw_tags=RAW_TAGS).write(self.dumpAsHash())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(command={self._command!r}, "
            f"params={self.params!r}, unknownParams={self.unknownParams!r})"
        )


# Convenience exports
from .Search import (  # noqa: E402
    SearchRequest,
    SQLSearchRequest,
    SearchDeleteRequest,
    AlternativesRequest,
    ListWordsRequest,
)
from .Modify import (  # noqa: E402
    ModifyRequest,
    InsertRequest,
    UpdateRequest,
    ReplaceRequest,
    PartialReplaceRequest,
    DeleteRequest,
)
from .Listing import (  # noqa: E402
    ListLastRetrieveFirstRequest,
    ListLastRequest,
    ListFirstRequest,
    RetrieveLastRequest,
    RetrieveFirstRequest,
)
from .Lookup import (  # noqa: E402
    RetrieveRequest,
    LookupRequest,
    ShowHistoryRequest,
)
from .Similar import SimilarDocumentsRequest, SimilarTextRequest  # noqa: E402
from .Simple import (  # noqa: E402
    StatusRequest,
    ListPathsRequest,
    ListFacetsRequest,
    BeginTransactionRequest,
    CommitTransactionRequest,
    RollbackTransactionRequest,
)

__all__ = [
    "Request",
    "UNKNOWN_PARAM_TAGS",
    "wireTag",
    "SearchRequest",
    "SQLSearchRequest",
    "SearchDeleteRequest",
    "AlternativesRequest",
    "ListWordsRequest",
    "ModifyRequest",
    "InsertRequest",
    "UpdateRequest",
    "ReplaceRequest",
    "PartialReplaceRequest",
    "DeleteRequest",
    "ListLastRetrieveFirstRequest",
    "ListLastRequest",
    "ListFirstRequest",
    "RetrieveLastRequest",
    "RetrieveFirstRequest",
    "RetrieveRequest",
    "LookupRequest",
    "ShowHistoryRequest",
    "SimilarDocumentsRequest",
    "SimilarTextRequest",
    "StatusRequest",
    "ListPathsRequest",
    "ListFacetsRequest",
    "BeginTransactionRequest",
    "CommitTransactionRequest",
    "RollbackTransactionRequest",
]
