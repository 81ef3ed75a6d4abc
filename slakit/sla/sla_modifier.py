"""Page-object editing primitives.

All operations address page objects by their zero-based position in
``document.page_objects`` (the z-order Scribus stores them in) and change the
document in place.

Key Operations:
    1. duplicate: insert a copy of an object right after it
    2. set_text: replace the text of a text frame's first run
    3. move: set an object's position
    4. set_image: point a picture frame at another image file
    5. set_bullets: rebuild a text frame as a bullet list

What the operations do NOT do:
    - renumber ItemIDs (unless ``duplicate(..., fresh_item_id=True)``)
    - repair NEXTITEM/BACKITEM text-flow chains
    - keep OwnPage/LAYER consistent with the new geometry
Use :class:`slakit.sla.sla_validator.SLAValidator` to find such problems.

Usage:
    >>> modifier = SLAModifier(doc)
    >>> modifier.duplicate(0)
    >>> modifier.move(1, 100, 200)
    >>> modifier.set_text(1, "Copy")
"""

import logging
import uuid
from pathlib import Path
from typing import Iterable, Optional, Set, Tuple, Union

from ..config import DEFAULT_CONFIG, SLAConfig
from ..core.document import Document
from ..core.page_object import PageObject, ParagraphMarker, Story, TextRun, Trail
from ..errors import IndexFault, TypeMismatchError

logger = logging.getLogger(__name__)

Number = Union[int, float]

# NEXTITEM/BACKITEM value meaning "no link"
NO_LINK = "-1"


class SLAModifier:
    """
    Edits the page objects of a parsed SLA document.

    Args:
        document: Document to modify in place
        config: Settings deciding which PTYPE values are text/picture frames
    """

    def __init__(self, document: Document, config: Optional[SLAConfig] = None):
        self.document = document
        self.config = config or DEFAULT_CONFIG

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def duplicate(self, index: int, fresh_item_id: bool = False) -> PageObject:
        """
        Insert a copy of the page object at ``index`` right after it.

        The copy lands at ``index + 1``; objects after it shift by one. By
        default the copy is an exact value copy, ItemID and chain links
        included. With ``fresh_item_id`` the copy gets a new unique ItemID
        and its NEXTITEM/BACKITEM links are cleared, so it doesn't claim a
        place in the original's text-flow chain.

        Args:
            index: Position of the object to copy
            fresh_item_id: Give the copy its own ItemID

        Returns:
            The inserted copy

        Raises:
            IndexFault: If ``index`` is out of range

        Example:
            >>> copy = modifier.duplicate(0)
            >>> doc.page_objects[1] == doc.page_objects[0]
            True
        """
        original = self._page_object(index)
        copy = original.copy()

        if fresh_item_id:
            copy.set("ItemID", self._generate_item_id())
            for link in ("NEXTITEM", "BACKITEM"):
                if link in copy.attributes:
                    copy.set(link, NO_LINK)

        self.document.content.insert_after(original, copy)
        logger.debug(f"Duplicated page object {index} (ItemID {original.item_id}) -> {index + 1}")
        return copy

    def set_text(self, index: int, text: str) -> None:
        """
        Replace the content of the first text run of a text frame.

        Other runs, paragraph markers and all styling are left alone.

        Args:
            index: Position of the text frame
            text: New content of the first run

        Raises:
            IndexFault: If ``index`` is out of range or the frame has no runs
            TypeMismatchError: If the object is not a text frame
        """
        page_object = self._page_object(index)
        self._require_kind(page_object, index, self.config.text_frame_types, "text frame")
        first_run = self._first_run(page_object, index)

        first_run.content = text
        logger.debug(f"Set text of page object {index} ({len(text)} chars)")

    def move(self, index: int, x: Number, y: Number) -> None:
        """
        Set the position of a page object.

        Only XPOS and YPOS change. Integral values are written without a
        decimal part ("100", not "100.0").

        Args:
            index: Position of the object
            x: New XPOS
            y: New YPOS

        Raises:
            IndexFault: If ``index`` is out of range
        """
        page_object = self._page_object(index)
        page_object.set("XPOS", x)
        page_object.set("YPOS", y)
        logger.debug(f"Moved page object {index} to ({page_object.x}, {page_object.y})")

    def set_image(self, index: int, path: Union[str, Path]) -> None:
        """
        Point a picture frame at another image file.

        Geometry and scaling are left alone; callers wanting the frame to fit
        the new image must adjust them separately.

        Args:
            index: Position of the picture frame
            path: New image file reference (stored as given)

        Raises:
            IndexFault: If ``index`` is out of range
            TypeMismatchError: If the object is not a picture frame
        """
        page_object = self._page_object(index)
        self._require_kind(page_object, index, self.config.picture_frame_types, "picture frame")

        page_object.set("PFILE", str(path))
        logger.debug(f"Set image of page object {index} to {path}")

    def set_bullets(self, index: int, items: Iterable[str]) -> None:
        """
        Rebuild a text frame as a bullet list, one paragraph per item.

        The first text run is the template for every item's run. The first
        paragraph marker carrying a bullet is the template for every
        paragraph end; without one, a plain bullet marker is used. The
        story's DefaultStyle and trail are kept; every other item is
        replaced.

        Args:
            index: Position of the text frame
            items: Text of each bullet point

        Raises:
            IndexFault: If ``index`` is out of range or the frame has no runs
            TypeMismatchError: If the object is not a text frame

        Example:
            >>> modifier.set_bullets(2, ["one", "two", "three"])
        """
        page_object = self._page_object(index)
        self._require_kind(page_object, index, self.config.text_frame_types, "text frame")
        run_template = self._first_run(page_object, index)
        story = page_object.story

        marker_template = next(
            (marker for marker in story.paragraph_markers if marker.has_bullet), None
        )
        if marker_template is None:
            marker_template = ParagraphMarker(attributes={"Bullet": "1", "BulletStr": "•"})

        children = []
        if story.default_style is not None:
            children.append(story.default_style)
        count = 0
        for item in items:
            run = run_template.copy()
            run.content = item
            children.append(run)
            children.append(marker_template.copy())
            count += 1
        trail = story.find(Trail)
        if trail is not None:
            children.append(trail)

        story.children = children
        logger.debug(f"Set {count} bullet points on page object {index}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _page_object(self, index: int) -> PageObject:
        page_objects = self.document.page_objects
        if not isinstance(index, int) or isinstance(index, bool):
            raise IndexFault(f"Page object index must be an integer, got {index!r}")
        if not 0 <= index < len(page_objects):
            raise IndexFault(
                f"Page object index {index} out of range (document has {len(page_objects)})"
            )
        return page_objects[index]

    @staticmethod
    def _require_kind(
        page_object: PageObject, index: int, ptypes: Tuple[str, ...], kind: str
    ) -> None:
        if page_object.ptype not in ptypes:
            raise TypeMismatchError(
                f"Page object {index} is not a {kind} "
                f"(PTYPE {page_object.ptype!r}, expected one of {', '.join(ptypes)})"
            )

    @staticmethod
    def _first_run(page_object: PageObject, index: int) -> TextRun:
        story: Optional[Story] = page_object.story
        runs = story.runs if story is not None else []
        if not runs:
            raise IndexFault(f"Text frame {index} has no text runs")
        return runs[0]

    def _generate_item_id(self) -> str:
        """
        Generate an ItemID not used anywhere in the document.

        Scribus ItemIDs are unsigned integers; a random 9-digit number is
        drawn until it doesn't collide.
        """
        existing = self._get_all_item_ids()
        item_id = str(uuid.uuid4().int % 900_000_000 + 100_000_000)
        while item_id in existing:
            item_id = str(uuid.uuid4().int % 900_000_000 + 100_000_000)
        return item_id

    def _get_all_item_ids(self) -> Set[str]:
        ids = set()
        for element in self.document.content.iter():
            if isinstance(element, PageObject) and element.item_id:
                ids.add(element.item_id)
        return ids


def duplicate(
    document: Document, index: int, fresh_item_id: bool = False, config: Optional[SLAConfig] = None
) -> PageObject:
    return SLAModifier(document, config).duplicate(index, fresh_item_id=fresh_item_id)


def set_text(document: Document, index: int, text: str, config: Optional[SLAConfig] = None) -> None:
    SLAModifier(document, config).set_text(index, text)


def move(document: Document, index: int, x: Number, y: Number) -> None:
    SLAModifier(document).move(index, x, y)


def set_image(
    document: Document, index: int, path: Union[str, Path], config: Optional[SLAConfig] = None
) -> None:
    SLAModifier(document, config).set_image(index, path)


def set_bullets(
    document: Document, index: int, items: Iterable[str], config: Optional[SLAConfig] = None
) -> None:
    SLAModifier(document, config).set_bullets(index, items)
