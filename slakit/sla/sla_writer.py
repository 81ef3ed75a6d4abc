"""SLA document serializer.

Renders a :class:`Document` tree back to SLA markup:

    - ``<?xml version="1.0" encoding="UTF-8"?>`` declaration first
    - one element per line, indented by ``config.indent`` per level
    - attributes in the order they are stored on each element
    - escaping according to :mod:`slakit.sla.escaping`

Output parses back (with :class:`SLAParser`) into a tree equal to the input.

Usage:
    >>> writer = SLAWriter()
    >>> writer.write_file(doc, Path("out.sla"))
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from ..config import DEFAULT_CONFIG, SLAConfig
from ..core.document import Document, DocumentContent
from ..core.element import Element
from ..errors import DocumentSerializeError
from .escaping import escape_attribute, escape_text
from .sla_utils import write_sla_bytes

logger = logging.getLogger(__name__)

_NAME_PART = r"[A-Za-z_][\w.\-]*"
# Unprefixed or prefixed ("xml:lang", "xmlns:foo") element and attribute names
_XML_NAME = re.compile(rf"^{_NAME_PART}(?::{_NAME_PART})?$")


class SLAWriter:
    """
    Serializer for SLA documents.

    Args:
        config: Writer settings (``indent`` and ``encoding``)
    """

    def __init__(self, config: Optional[SLAConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def to_bytes(self, document: Document) -> bytes:
        """
        Serialize a document.

        Args:
            document: Document to render

        Returns:
            Encoded SLA markup

        Raises:
            DocumentSerializeError: If the tree holds something that can't be
                written (missing or repeated DOCUMENT, non-element child,
                non-string attribute value, invalid name or character)
        """
        if not isinstance(document, Document):
            raise DocumentSerializeError(
                f"Expected a Document, got {type(document).__name__}"
            )
        content_count = len(document.find_all(DocumentContent))
        if content_count != 1:
            raise DocumentSerializeError(
                f"Expected one <{DocumentContent.TAG}>, found {content_count}"
            )

        encoding = self.config.encoding
        lines = [f'<?xml version="1.0" encoding="{encoding.upper()}"?>']
        self._write_element(document, 0, lines)
        markup = "\n".join(lines) + "\n"
        return markup.encode(encoding, errors="xmlcharrefreplace")

    def write_file(self, document: Document, path: Union[str, Path]) -> None:
        """
        Serialize a document to disk.

        Nothing is written if serialization fails. Write failures may leave
        a partial file.

        Raises:
            DocumentSerializeError: If the document can't be rendered
            DocumentIOError: If the file can't be written
        """
        data = self.to_bytes(document)
        page_object_count = len(document.page_objects)
        write_sla_bytes(data, path)
        logger.info(f"Saved {path} ({len(data)} bytes, {page_object_count} page objects)")

    def _write_element(self, element: Element, level: int, lines: List[str]) -> None:
        indent = self.config.indent * level
        start = self._start_tag(element)

        if not element.children:
            if element.text is None:
                lines.append(f"{indent}<{start}/>")
            else:
                lines.append(f"{indent}<{start}>{escape_text(element.text)}</{element.tag}>")
            return

        if element.text is not None or any(
            isinstance(child, Element) and child.tail is not None for child in element.children
        ):
            # Mixed content: indentation would become part of the text
            lines.append(indent + self._compact(element))
            return

        lines.append(f"{indent}<{start}>")
        for child in element.children:
            self._check_child(element, child)
            self._write_element(child, level + 1, lines)
        lines.append(f"{indent}</{element.tag}>")

    def _compact(self, element: Element) -> str:
        """Render an element and its subtree on a single line."""
        start = self._start_tag(element)
        if not element.children and element.text is None:
            return f"<{start}/>"

        parts = [f"<{start}>"]
        if element.text is not None:
            parts.append(escape_text(element.text))
        for child in element.children:
            self._check_child(element, child)
            parts.append(self._compact(child))
            if child.tail is not None:
                parts.append(escape_text(child.tail))
        parts.append(f"</{element.tag}>")
        return "".join(parts)

    def _start_tag(self, element: Element) -> str:
        self._check_name(element.tag)
        parts = [element.tag]
        for name, value in element.attributes.items():
            self._check_name(name)
            if not isinstance(value, str):
                raise DocumentSerializeError(
                    f"Attribute {element.tag}/@{name} must be a string, "
                    f"got {type(value).__name__}"
                )
            parts.append(f'{name}="{escape_attribute(value)}"')
        return " ".join(parts)

    @staticmethod
    def _check_name(name: str) -> None:
        if not isinstance(name, str) or not _XML_NAME.match(name):
            raise DocumentSerializeError(f"Invalid XML name: {name!r}")

    @staticmethod
    def _check_child(parent: Element, child: object) -> None:
        if not isinstance(child, Element):
            raise DocumentSerializeError(
                f"<{parent.tag}> holds a {type(child).__name__}, not an element"
            )


def save(document: Document, path: Union[str, Path], config: Optional[SLAConfig] = None) -> None:
    """
    Save a document as an SLA file.

    Example:
        >>> save(doc, "flyer-edited.sla")
    """
    SLAWriter(config).write_file(document, path)


def dumps(document: Document, config: Optional[SLAConfig] = None) -> bytes:
    """Serialize a document to SLA bytes."""
    return SLAWriter(config).to_bytes(document)
