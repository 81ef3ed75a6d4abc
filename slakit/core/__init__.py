"""
slakit core - SLA document model.

The tree mirrors the markup: generic mapping nodes typed by element kind.
"""

from .element import Element, RawElement, format_value
from .page_object import (
    DefaultStyle,
    PageObject,
    ParagraphMarker,
    Story,
    TextRun,
    Trail,
)
from .document import (
    CellStyle,
    CharacterStyle,
    CheckProfile,
    Color,
    Document,
    DocumentContent,
    Layer,
    LpiSetting,
    MasterPage,
    Page,
    PageSet,
    ParagraphStyle,
    PdfSettings,
    Printer,
    Section,
    TableBorderLine,
    TableStyle,
)

__all__ = [
    # Base
    "Element",
    "RawElement",
    "format_value",
    # Page objects
    "PageObject",
    "Story",
    "DefaultStyle",
    "TextRun",
    "ParagraphMarker",
    "Trail",
    # Document
    "Document",
    "DocumentContent",
    "CheckProfile",
    "Color",
    "ParagraphStyle",
    "CharacterStyle",
    "TableStyle",
    "TableBorderLine",
    "CellStyle",
    "Layer",
    "Printer",
    "PdfSettings",
    "LpiSetting",
    "PageSet",
    "Section",
    "MasterPage",
    "Page",
]
