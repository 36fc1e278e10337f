"""
CPS Client XML Package

Lightweight XML writer turning the JSON-like structure produced by a request
into the document sent to the server.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union
import xml.etree.ElementTree as ET


JsonLike = Union[Dict[str, Any], List[Any], str, int, float, bool, None]

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


class XML:
    """Minimal XML writer.

    Features:
    - Serialize dict/list structure into XML
    - Lists under a key become repeated elements
    - Strings under a raw tag are embedded as elements when they are XML
    """

    def __init__(
        self,
        *,
        raw_tags: Optional[List[str]] = None,
        declaration: bool = True,
    ) -> None:
        self.raw_tags = set(raw_tags or [])
        self.declaration = declaration

    def write(self, obj: Dict[str, Any]) -> str:
        """Serialize a JSON-like object into an XML string."""
        if not isinstance(obj, dict) or len(obj) != 1:
            raise ValueError("Top-level XML object must be a single-key dict")

        root_tag, root_value = next(iter(obj.items()))
        root_elem = ET.Element(root_tag)
        self._obj_to_element(root_elem, root_value)
        content = ET.tostring(root_elem, encoding="unicode")
        return XML_DECLARATION + content if self.declaration else content

    # Internal helpers
    def _obj_to_element(self, parent: ET.Element, value: JsonLike, raw: bool = False) -> None:
        if isinstance(value, Mapping):
            for key, child_val in value.items():
                child_raw = key in self.raw_tags
                if isinstance(child_val, (list, tuple)):
                    for item in child_val:
                        child = ET.SubElement(parent, key)
                        self._obj_to_element(child, item, raw=child_raw)
                else:
                    child = ET.SubElement(parent, key)
                    self._obj_to_element(child, child_val, raw=child_raw)
        elif isinstance(value, (list, tuple)):
            # Anonymous array, not typical for our usage
            for item in value:
                child = ET.SubElement(parent, "item")
                self._obj_to_element(child, item)
        elif raw and isinstance(value, str) and self._embed(parent, value):
            return
        elif isinstance(value, bool):
            parent.text = "yes" if value else "no"
        else:
            parent.text = "" if value is None else str(value)

    @staticmethod
    def _embed(parent: ET.Element, value: str) -> bool:
        """Append value as a child element if it is a well-formed fragment."""
        if not value.lstrip().startswith('<'):
            return False
        try:
            parent.append(ET.fromstring(value))
        except ET.ParseError:
            return False
        return True


__all__ = ["XML", "XML_DECLARATION"]
