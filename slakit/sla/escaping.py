"""Text escaping policy for SLA output.

SLA is plain XML 1.0, so only a handful of characters need care. The policy
differs between character data and attribute values:

    Character   Text content   Attribute value
    ---------   ------------   ---------------
    &           &amp;          &amp;
    <           &lt;           &lt;
    >           &gt;           &gt;
    "           (literal)      &quot;
    newline     (literal)      &#10;
    CR          &#13;          &#13;
    tab         (literal)      &#9;

Newlines, carriage returns and tabs must be character references inside
attribute values: a conforming reader normalises literal ones to spaces,
which would silently change ``CH`` text. In character data newlines and tabs
are written as-is, so the output never contains ``&#xA;``-style artifacts;
carriage returns stay references because readers fold them into newlines.

Characters XML 1.0 cannot represent at all (C0 controls other than tab, LF
and CR, lone surrogates, U+FFFE/U+FFFF) are rejected rather than dropped.
"""

import re

from ..errors import DocumentSerializeError

_TEXT_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\r": "&#13;",
}

_ATTRIBUTE_ESCAPES = {
    **_TEXT_ESCAPES,
    '"': "&quot;",
    "\n": "&#10;",
    "\t": "&#9;",
}

_TEXT_PATTERN = re.compile("[&<>\r]")
_ATTRIBUTE_PATTERN = re.compile('[&<>"\n\r\t]')
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def check_xml_chars(value: str) -> None:
    """
    Ensure a string only holds characters XML 1.0 can carry.

    Raises:
        DocumentSerializeError: On the first invalid character
    """
    match = _INVALID_XML_CHARS.search(value)
    if match:
        raise DocumentSerializeError(
            f"Character U+{ord(match.group()):04X} at offset {match.start()} "
            f"cannot be written to XML"
        )


def escape_text(value: str) -> str:
    """
    Escape character data.

    Example:
        >>> escape_text("a < b\\nc")
        'a &lt; b\\nc'
    """
    check_xml_chars(value)
    return _TEXT_PATTERN.sub(lambda m: _TEXT_ESCAPES[m.group()], value)


def escape_attribute(value: str) -> str:
    """
    Escape an attribute value for use inside double quotes.

    Example:
        >>> escape_attribute('Line 1\\n"Line 2"')
        'Line 1&#10;&quot;Line 2&quot;'
    """
    check_xml_chars(value)
    return _ATTRIBUTE_PATTERN.sub(lambda m: _ATTRIBUTE_ESCAPES[m.group()], value)
