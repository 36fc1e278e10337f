"""
CPS Client Tools

Generic helpers shared by the request classes: the loose type checks used to
validate caller input before it lands in a request parameter bag.
"""

import re
from collections.abc import Mapping
from numbers import Real
from typing import Any


def empty(value: Any) -> bool:
    """Check if value is empty (None, blank string or empty collection)."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    if isinstance(value, (list, tuple, dict)) and len(value) == 0:
        return True
    return False


def isString(value: Any) -> bool:
    return isinstance(value, str)


def isNumber(value: Any) -> bool:
    """
    Check if value is a real number.

    Booleans are rejected even though Python treats them as integers.
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def isObject(value: Any) -> bool:
    """Check if value is a mapping (a query object, a listing policy...)."""
    return isinstance(value, Mapping)


def isArray(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def isStringList(value: Any) -> bool:
    """Check if value is a list whose items are all strings."""
    return isArray(value) and all(isinstance(item, str) for item in value)


def isScalar(value: Any) -> bool:
    return isString(value) or isNumber(value)


def split_list(value: Any) -> list:
    """
    Split a comma separated option value into a list.

    Args:
        value: String like "a,b,,c", a list, or None

    Returns:
        List of non-empty stripped values
    """
    if isinstance(value, str):
        return [v.strip() for v in re.split(r',+', value) if v.strip()]
    if isinstance(value, (list, tuple)):
        return list(value)
    return []
