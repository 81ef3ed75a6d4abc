"""Exception taxonomy for slakit.

Every error raised by the library derives from :class:`SLAError`, and also
from the closest built-in exception so callers that only know the standard
hierarchy (``OSError``, ``IndexError``, ...) still catch them.

Error Kinds:
    - DocumentIOError: open/read/write failure on the filesystem boundary
    - DocumentParseError: input bytes are not a well-formed SLA document
    - DocumentSerializeError: in-memory tree cannot be rendered as SLA
    - TypeMismatchError: mutation requested on the wrong kind of page object
    - IndexFault: page-object index out of range
    - DuplicateColorError: color swatch name already defined
"""


class SLAError(Exception):
    """Base class for all slakit errors."""

    pass


class DocumentIOError(SLAError, OSError):
    """Raised when an SLA file cannot be opened, read or written."""

    pass


class DocumentParseError(SLAError, ValueError):
    """Raised when input does not conform to the SLA document structure."""

    pass


class DocumentSerializeError(SLAError, ValueError):
    """Raised when a document tree cannot be rendered as SLA markup."""

    pass


class TypeMismatchError(SLAError, TypeError):
    """Raised when an operation targets a page object of the wrong kind."""

    pass


class IndexFault(SLAError, IndexError):
    """Raised when a page-object (or text run) index is out of range."""

    pass


class DuplicateColorError(SLAError, ValueError):
    """Raised when a color swatch with the same name already exists."""

    pass
