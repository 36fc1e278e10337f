"""
CPS Client Command - the commands understood by the server

Each request carries exactly one of these names, it becomes the root element
of the XML document sent on the wire.
"""

from enum import Enum


class Command(str, Enum):
    """Command names as they appear on the wire."""

    SEARCH = 'search'
    INSERT = 'insert'
    UPDATE = 'update'
    REPLACE = 'replace'
    PARTIAL_REPLACE = 'partial-replace'
    DELETE = 'delete'
    ALTERNATIVES = 'alternatives'
    LIST_WORDS = 'list-words'
    STATUS = 'status'
    RETRIEVE = 'retrieve'
    LOOKUP = 'lookup'
    LIST_LAST = 'list-last'
    LIST_FIRST = 'list-first'
    RETRIEVE_LAST = 'retrieve-last'
    RETRIEVE_FIRST = 'retrieve-first'
    SEARCH_DELETE = 'search-delete'
    LIST_PATHS = 'list-paths'
    LIST_FACETS = 'list-facets'
    SIMILAR = 'similar'
    SHOW_HISTORY = 'show-history'
    BEGIN_TRANSACTION = 'begin-transaction'
    COMMIT_TRANSACTION = 'commit-transaction'
    ROLLBACK_TRANSACTION = 'rollback-transaction'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def isKnown(cls, name: str) -> bool:
        return name in cls._value2member_map_


__all__ = ['Command']
