"""
slakit - read, edit and write Scribus SLA documents.

The document is loaded into a tree that mirrors the file, edited by
page-object index, and written back without losing anything the library
doesn't understand.

Example:
    >>> import slakit
    >>> doc = slakit.load("flyer.sla")
    >>> slakit.set_text(doc, 0, "Summer Sale")
    >>> slakit.save(doc, "flyer-edited.sla")
"""

from .config import DEFAULT_CONFIG, SLAConfig
from .core import Document, DocumentContent, PageObject, Story, TextRun
from .errors import (
    DocumentIOError,
    DocumentParseError,
    DocumentSerializeError,
    DuplicateColorError,
    IndexFault,
    SLAError,
    TypeMismatchError,
)
from .sla import (
    SLAModifier,
    SLAParser,
    SLAValidator,
    SLAWriter,
    ValidationResult,
    dumps,
    duplicate,
    load,
    loads,
    move,
    save,
    set_bullets,
    set_image,
    set_text,
    text_chain,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Config
    "SLAConfig",
    "DEFAULT_CONFIG",
    # Model
    "Document",
    "DocumentContent",
    "PageObject",
    "Story",
    "TextRun",
    # Errors
    "SLAError",
    "DocumentIOError",
    "DocumentParseError",
    "DocumentSerializeError",
    "TypeMismatchError",
    "IndexFault",
    "DuplicateColorError",
    # Operations
    "load",
    "loads",
    "save",
    "dumps",
    "duplicate",
    "set_text",
    "move",
    "set_image",
    "set_bullets",
    "text_chain",
    "SLAParser",
    "SLAWriter",
    "SLAModifier",
    "SLAValidator",
    "ValidationResult",
]
