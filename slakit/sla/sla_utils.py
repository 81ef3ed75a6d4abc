"""SLA file helpers: reading, writing and small lookups.

SLA files are single XML documents (no archive container), UTF-8 encoded:

    <?xml version="1.0" encoding="UTF-8"?>
    <SCRIBUSUTF8NEW Version="1.5.8">
     <DOCUMENT ANZPAGES="1" PAGEWIDTH="595.275590551181" ...>
      ...
      <PAGEOBJECT XPOS="..." YPOS="..." ItemID="..." PTYPE="4" ...>
       <StoryText>...</StoryText>
      </PAGEOBJECT>
     </DOCUMENT>
    </SCRIBUSUTF8NEW>

File handles are opened for a single read or write and always released
before returning.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from ..core.document import Document
from ..errors import DocumentIOError

PathLike = Union[str, Path]


def read_sla_bytes(path: PathLike) -> bytes:
    """
    Read a whole SLA file into memory.

    Args:
        path: SLA file path

    Returns:
        File contents

    Raises:
        DocumentIOError: If the file doesn't exist or can't be read
    """
    path = Path(path)
    try:
        with path.open("rb") as handle:
            return handle.read()
    except OSError as e:
        raise DocumentIOError(e.errno, f"Cannot read SLA file: {e.strerror}", str(path)) from e


def write_sla_bytes(data: bytes, path: PathLike) -> None:
    """
    Write serialized SLA bytes to disk.

    The parent directory is created if needed. The write is not atomic: a
    failure part-way may leave a truncated file behind.

    Args:
        data: Serialized document
        path: Output path

    Raises:
        DocumentIOError: If the file can't be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as handle:
            handle.write(data)
    except OSError as e:
        raise DocumentIOError(e.errno, f"Cannot write SLA file: {e.strerror}", str(path)) from e


def sniff_sla_version(path: PathLike) -> Optional[str]:
    """
    Return the ``Version`` attribute of an SLA file without parsing it all.

    Only the root start tag is read.

    Args:
        path: File to inspect

    Returns:
        Version string, or None if the file isn't an SLA document

    Example:
        >>> sniff_sla_version(Path("flyer.sla"))
        '1.5.8'
    """
    try:
        with Path(path).open("rb") as handle:
            for _event, element in ET.iterparse(handle, events=("start",)):
                if element.tag != Document.TAG:
                    return None
                return element.get("Version", "")
    except (OSError, ET.ParseError):
        return None
    return None


def find_page_object_index(document: Document, item_id: str) -> Optional[int]:
    """
    Find the position of a page object by its ``ItemID``.

    When several objects share an id (e.g. after a plain duplicate) the first
    one wins.

    Args:
        document: Parsed document
        item_id: Value of the ItemID attribute

    Returns:
        Index into ``document.page_objects``, or None
    """
    for index, page_object in enumerate(document.page_objects):
        if page_object.item_id == item_id:
            return index
    return None
