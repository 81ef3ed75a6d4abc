"""SLA document parser.

Turns the bytes of a Scribus ``.sla`` file into a :class:`Document` tree.

Parsing rules:
    - Every attribute is captured verbatim as text, no type coercion.
    - Known child tags become their element class; unknown tags become
      :class:`RawElement` nodes (or are dropped with ``keep_unknown=False``).
    - Attributes the schema doesn't declare are kept alongside the declared
      ones (or dropped with ``keep_unknown=False``).
    - Namespaced names keep the prefix they were written with
      (``xml:lang``, ``foo:bar``); ``xmlns`` declarations are kept as
      attributes of the element that declares them.
    - Whitespace-only character data between child elements is indentation
      and is discarded, unless the element holds mixed content (text or
      text after a child). Leaf elements keep their text as-is.
    - Comments and processing instructions are not kept.

Usage:
    >>> parser = SLAParser()
    >>> doc = parser.parse_file(Path("flyer.sla"))
    >>> print(f"Found {len(doc.page_objects)} page objects")
"""

import io
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..config import DEFAULT_CONFIG, SLAConfig
from ..core.document import Document, DocumentContent
from ..core.element import Element, RawElement
from ..errors import DocumentParseError
from .sla_utils import read_sla_bytes

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# (prefix, uri) bindings in scope, innermost last; "" is the default namespace
Scope = List[Tuple[str, str]]


class SLAParser:
    """
    Parser for SLA files.

    Args:
        config: Parser settings (``keep_unknown`` is the one that matters here)
    """

    def __init__(self, config: Optional[SLAConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def parse_file(self, path: Union[str, Path]) -> Document:
        """
        Parse an SLA file.

        Args:
            path: Path to the .sla file

        Returns:
            Parsed Document

        Raises:
            DocumentIOError: If the file can't be opened or read
            DocumentParseError: If the content isn't a valid SLA document
        """
        data = read_sla_bytes(path)
        document = self.parse_bytes(data)
        logger.info(
            f"Loaded {path}: SLA {document.version}, "
            f"{len(document.page_objects)} page objects"
        )
        return document

    def parse_bytes(self, data: bytes) -> Document:
        """
        Parse SLA markup held in memory.

        Args:
            data: Raw file contents

        Returns:
            Parsed Document

        Raises:
            DocumentParseError: If the markup is malformed, the root element
                is not ``SCRIBUSUTF8NEW``, or there isn't exactly one
                ``DOCUMENT`` element
        """
        try:
            document = self._build(data)
        except ET.ParseError as e:
            raise DocumentParseError(f"unmarshal failed: {e}") from e

        content_count = len(document.find_all(DocumentContent))
        if content_count != 1:
            raise DocumentParseError(
                f"unmarshal failed: expected one <{DocumentContent.TAG}>, found {content_count}"
            )

        logger.debug(f"Parsed SLA tree with {sum(1 for _ in document.iter())} elements")
        return document

    def _build(self, data: bytes) -> Document:
        """
        Convert the markup into model elements in a single pass.

        Elements are created on their start tag, when attributes and the
        namespace bindings in scope are known. Text and the tails of their
        children are filled in on the end tag, once they are complete.
        """
        scope: Scope = []
        declared_counts: List[int] = []
        pending: Scope = []
        stack: List[Optional[Element]] = []
        built: Dict[ET.Element, Element] = {}
        document: Optional[Element] = None

        events = ET.iterparse(io.BytesIO(data), events=("start-ns", "start", "end"))
        for event, node in events:
            if event == "start-ns":
                pending.append(node)
                continue

            if event == "start":
                scope.extend(pending)
                declared_counts.append(len(pending))
                element = self._start_element(node, stack, pending, scope)
                pending = []
                if element is not None:
                    built[node] = element
                if document is None:
                    document = element
                stack.append(element)
                continue

            element = stack.pop()
            if element is not None:
                self._finish_element(node, element, built)
            del scope[len(scope) - declared_counts.pop():]

        return document

    def _start_element(
        self, node: ET.Element, stack: List[Optional[Element]], declared: Scope, scope: Scope
    ) -> Optional[Element]:
        """Create the element for a start tag and attach it to its parent."""
        tag = _qualify(node.tag, scope, attribute=False)

        if not stack:
            if tag != Document.TAG:
                raise DocumentParseError(
                    f"unmarshal failed: expected root <{Document.TAG}>, found <{tag}>"
                )
            parent = None
            element_type = Document
        else:
            parent = stack[-1]
            if parent is None:
                return None
            element_type = parent.child_class(tag)
            if element_type is None and not self.config.keep_unknown:
                logger.debug(f"Dropping undeclared <{tag}> in <{parent.tag}>")
                return None

        if element_type is None:
            element: Element = RawElement(name=tag)
        else:
            element = element_type()

        keep_all = self.config.keep_unknown or element_type is None
        names = [("xmlns:" + prefix if prefix else "xmlns", uri) for prefix, uri in declared]
        names += [(_qualify(name, scope, attribute=True), value) for name, value in node.attrib.items()]
        for name, value in names:
            if keep_all or name in element.ATTRIBUTES:
                element.attributes[name] = value

        if parent is not None:
            parent.children.append(element)
        return element

    @staticmethod
    def _finish_element(node: ET.Element, element: Element, built: Dict[ET.Element, Element]) -> None:
        """Fill in text and child tails once the end tag has been read."""
        children = list(node)
        if not children:
            element.text = node.text
            return

        mixed = _has_content(node.text) or any(_has_content(child.tail) for child in children)
        if mixed:
            element.text = node.text
        for child in children:
            child_element = built.get(child)
            if mixed and child_element is not None:
                child_element.tail = child.tail


def _has_content(text: Optional[str]) -> bool:
    return text is not None and bool(text.strip())


def _qualify(name: str, scope: Scope, attribute: bool) -> str:
    """
    Turn ElementTree's ``{uri}local`` form back into ``prefix:local``.

    Unprefixed attributes never belong to the default namespace, so only
    named prefixes are considered for them.

    Raises:
        DocumentParseError: If no prefix in scope is bound to the namespace
    """
    if not name.startswith("{"):
        return name

    uri, local = name[1:].split("}", 1)
    if uri == XML_NAMESPACE:
        return f"xml:{local}"
    for prefix, bound in reversed(scope):
        if bound == uri and (prefix or not attribute):
            return f"{prefix}:{local}" if prefix else local
    raise DocumentParseError(f"unmarshal failed: no prefix in scope for namespace {uri}")


def load(path: Union[str, Path], config: Optional[SLAConfig] = None) -> Document:
    """
    Load an SLA file.

    Example:
        >>> doc = load("flyer.sla")
    """
    return SLAParser(config).parse_file(path)


def loads(data: bytes, config: Optional[SLAConfig] = None) -> Document:
    """Parse SLA markup from bytes."""
    return SLAParser(config).parse_bytes(data)
