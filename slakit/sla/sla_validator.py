"""SLA consistency checks.

Mutations leave document-wide bookkeeping to the caller. This
module finds what they may have left inconsistent, without repairing it.

Checks:
    1. ItemIDs: duplicates among page objects (warning)
    2. Text flow: NEXTITEM/BACKITEM pointing at unknown items (error)
    3. Text flow: links not mirrored by the other frame (error)
    4. Colors: swatch names defined twice (error)
    5. Pages: OwnPage beyond the last page (warning)

Text-flow links hold the ItemID of the neighbouring frame; "-1" means none.

Usage:
    >>> result = SLAValidator().validate(doc)
    >>> if not result.is_valid:
    ...     for error in result.errors:
    ...         print(f"ERROR: {error}")
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..core.document import Document
from ..errors import IndexFault
from .sla_parser import load

NO_LINK_VALUES = {None, "", "-1"}


@dataclass
class ValidationResult:
    """
    Result of SLA validation.

    Attributes:
        is_valid: True if no errors were found
        errors: List of error messages
        warnings: List of warning messages
    """

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add error message and mark as invalid."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add warning message (doesn't affect validity)."""
        self.warnings.append(message)


class SLAValidator:
    """Validates document-wide invariants of a parsed SLA document."""

    def validate(self, document: Document) -> ValidationResult:
        """
        Run all checks.

        Args:
            document: Parsed document

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult()
        self._check_item_ids(document, result)
        self._check_links(document, result)
        self._check_colors(document, result)
        self._check_own_pages(document, result)
        return result

    def _check_item_ids(self, document: Document, result: ValidationResult) -> None:
        counts = Counter(obj.item_id for obj in document.page_objects if obj.item_id)
        for item_id, count in counts.items():
            if count > 1:
                result.add_warning(f"ItemID {item_id} is used by {count} page objects")

    def _check_links(self, document: Document, result: ValidationResult) -> None:
        by_id = _index_by_item_id(document)
        page_objects = document.page_objects

        for index, obj in enumerate(page_objects):
            for link, mirror in (("NEXTITEM", "BACKITEM"), ("BACKITEM", "NEXTITEM")):
                target_id = obj.get(link)
                if target_id in NO_LINK_VALUES:
                    continue
                target_index = by_id.get(target_id)
                if target_index is None:
                    result.add_error(
                        f"Page object {index}: {link} {target_id} matches no ItemID"
                    )
                    continue
                target = page_objects[target_index]
                if target.get(mirror) != obj.item_id:
                    result.add_error(
                        f"Page object {index}: {link} {target_id} but page object "
                        f"{target_index} has {mirror} {target.get(mirror)!r}"
                    )

    def _check_colors(self, document: Document, result: ValidationResult) -> None:
        counts = Counter(color.name for color in document.content.colors)
        for name, count in counts.items():
            if count > 1:
                result.add_error(f"Color {name!r} is defined {count} times")

    def _check_own_pages(self, document: Document, result: ValidationResult) -> None:
        page_count = len(document.content.pages)
        for index, obj in enumerate(document.page_objects):
            own_page = _as_int(obj.own_page)
            if own_page is not None and own_page >= page_count:
                result.add_warning(
                    f"Page object {index}: OwnPage {own_page} but document has "
                    f"{page_count} pages"
                )


def text_chain(document: Document, index: int) -> List[int]:
    """
    Return the linked text frames the page object at ``index`` belongs to.

    Follows BACKITEM to the first frame of the chain, then NEXTITEM to the
    last. Broken links end the walk; cycles are visited once.

    Args:
        document: Parsed document
        index: Position of any frame in the chain

    Returns:
        Page-object indices in flow order (just ``[index]`` when unlinked)

    Raises:
        IndexFault: If ``index`` is out of range

    Example:
        >>> text_chain(doc, 3)
        [1, 3, 4]
    """
    page_objects = document.page_objects
    if not 0 <= index < len(page_objects):
        raise IndexFault(
            f"Page object index {index} out of range (document has {len(page_objects)})"
        )
    by_id = _index_by_item_id(document)

    head = index
    seen = {head}
    while True:
        previous = by_id.get(page_objects[head].back_item)
        if previous is None or previous in seen:
            break
        seen.add(previous)
        head = previous

    chain = [head]
    visited = {head}
    current = head
    while True:
        following = by_id.get(page_objects[current].next_item)
        if following is None or following in visited:
            break
        chain.append(following)
        visited.add(following)
        current = following
    return chain


def _index_by_item_id(document: Document) -> Dict[str, int]:
    """Map ItemID -> first page-object index carrying it."""
    by_id: Dict[str, int] = {}
    for index, obj in enumerate(document.page_objects):
        if obj.item_id not in NO_LINK_VALUES:
            by_id.setdefault(obj.item_id, index)
    return by_id


def _as_int(value: Optional[str]) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None


def quick_validate(path: Union[str, Path]) -> ValidationResult:
    """
    Load an SLA file and validate it.

    Args:
        path: SLA file path

    Returns:
        ValidationResult

    Raises:
        DocumentIOError: If the file can't be read
        DocumentParseError: If the file isn't a valid SLA document
    """
    return SLAValidator().validate(load(path))
