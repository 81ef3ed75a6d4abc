"""SLA file boundary and page-object editing.

Components:
- sla_utils.py: file reading/writing, version sniffing, ItemID lookup
- escaping.py: text and attribute escaping policy for output
- sla_parser.py: SLA bytes -> Document
- sla_writer.py: Document -> SLA bytes
- sla_modifier.py: duplicate / set_text / move / set_image / set_bullets
- sla_validator.py: ItemID, text-flow chain, color and page checks

Usage:
    from slakit.sla import load, save, duplicate, move

    doc = load("flyer.sla")
    duplicate(doc, 0)
    move(doc, 1, 100, 200)
    save(doc, "flyer-edited.sla")
"""

from .escaping import check_xml_chars, escape_attribute, escape_text
from .sla_utils import find_page_object_index, read_sla_bytes, sniff_sla_version, write_sla_bytes
from .sla_parser import SLAParser, load, loads
from .sla_writer import SLAWriter, dumps, save
from .sla_modifier import (
    NO_LINK,
    SLAModifier,
    duplicate,
    move,
    set_bullets,
    set_image,
    set_text,
)
from .sla_validator import SLAValidator, ValidationResult, quick_validate, text_chain

__all__ = [
    # Escaping
    "escape_text",
    "escape_attribute",
    "check_xml_chars",
    # Utilities
    "read_sla_bytes",
    "write_sla_bytes",
    "sniff_sla_version",
    "find_page_object_index",
    # Load / save
    "SLAParser",
    "SLAWriter",
    "load",
    "loads",
    "save",
    "dumps",
    # Editing
    "SLAModifier",
    "NO_LINK",
    "duplicate",
    "set_text",
    "move",
    "set_image",
    "set_bullets",
    # Validation
    "SLAValidator",
    "ValidationResult",
    "quick_validate",
    "text_chain",
]
