"""Page objects and their stories.

A ``PAGEOBJECT`` is one placeable item on a page: text frame, image frame,
shape, line... All kinds share one element class and are told apart by the
``PTYPE`` attribute. Text frames own a ``StoryText`` child holding the text
as an ordered mix of runs (``ITEXT``) and paragraph markers (``para``):

    <StoryText>
     <DefaultStyle PARENT="Default Paragraph Style"/>
     <ITEXT CPARENT="Default Character Style" CH="one"/>
     <para Bullet="1" BulletStr="■"/>
     <ITEXT CPARENT="Default Character Style" CH="two"/>
     <trail/>
    </StoryText>

A ``para`` closes the paragraph made of the runs before it; ``trail`` carries
the formatting of the last, unterminated paragraph.
"""

from __future__ import annotations

from typing import List, Optional

from .element import Element

# Character-level formatting shared by character styles and text runs
CHARACTER_FORMAT_ATTRIBUTES = (
    "FONT",
    "FONTSIZE",
    "FEATURES",
    "FCOLOR",
    "FSHADE",
    "SCOLOR",
    "BGCOLOR",
    "BGSHADE",
    "SSHADE",
    "TXTSHX",
    "TXTSHY",
    "TXTOUT",
    "TXTULP",
    "TXTULW",
    "TXTSTP",
    "TXTSTW",
    "SCALEH",
    "SCALEV",
    "BASEO",
    "KERN",
    "LANGUAGE",
)

# Paragraph-level formatting carried by para/trail markers
PARAGRAPH_FORMAT_ATTRIBUTES = (
    "PARENT",
    "ALIGN",
    "LINESPMode",
    "LINESP",
    "INDENT",
    "RMARGIN",
    "FIRST",
    "VOR",
    "NACH",
    "ParagraphEffectCharStyle",
    "ParagraphEffectOffset",
    "ParagraphEffectIndent",
    "DROP",
    "DROPLIN",
    "DROPDIST",
    "Bullet",
    "BulletStr",
    "Numeration",
    "NumerationFormat",
    "NumerationName",
    "NumerationLevel",
    "NumerationPrefix",
    "NumerationSuffix",
    "NumerationStart",
    "NumerationHigher",
)


class DefaultStyle(Element):
    """Paragraph and character style the story falls back to."""

    TAG = "DefaultStyle"
    ATTRIBUTES = ("PARENT", "CPARENT")


class TextRun(Element):
    """A run of characters sharing one character style (``ITEXT``)."""

    TAG = "ITEXT"
    ATTRIBUTES = ("CPARENT",) + CHARACTER_FORMAT_ATTRIBUTES + ("CH",)

    @property
    def content(self) -> str:
        return self.get("CH", "")

    @content.setter
    def content(self, value: str) -> None:
        self.set("CH", value)


class ParagraphMarker(Element):
    """End of a paragraph, with that paragraph's formatting (``para``)."""

    TAG = "para"
    ATTRIBUTES = PARAGRAPH_FORMAT_ATTRIBUTES

    @property
    def has_bullet(self) -> bool:
        return self.get("Bullet") == "1" or bool(self.get("BulletStr"))


class Trail(Element):
    """Formatting of the final paragraph, which has no ``para`` marker."""

    TAG = "trail"
    ATTRIBUTES = PARAGRAPH_FORMAT_ATTRIBUTES


class Story(Element):
    """
    Text content of a text frame (``StoryText``).

    ``children`` keeps every item in document order, including inline items
    such as ``tab`` or ``breakline`` that are stored as raw elements.
    """

    TAG = "StoryText"
    CHILD_TYPES = (DefaultStyle, TextRun, ParagraphMarker, Trail)

    @property
    def default_style(self) -> Optional[DefaultStyle]:
        return self.find(DefaultStyle)

    @property
    def runs(self) -> List[TextRun]:
        return self.find_all(TextRun)

    @property
    def paragraph_markers(self) -> List[ParagraphMarker]:
        return self.find_all(ParagraphMarker)

    @property
    def trail(self) -> Optional[Trail]:
        return self.find(Trail)

    def plain_text(self) -> str:
        """
        Return the story as plain text.

        Runs are concatenated; every paragraph marker becomes a newline.

        Example:
            >>> story.plain_text()
            'one\\ntwo'
        """
        parts = []
        for item in self.children:
            if isinstance(item, TextRun):
                parts.append(item.content)
            elif isinstance(item, ParagraphMarker):
                parts.append("\n")
        return "".join(parts)


class PageObject(Element):
    """
    One placeable item on a page (``PAGEOBJECT``).

    Geometry, identity and link fields are exposed as properties; every
    other attribute is reachable through :meth:`get` / :meth:`set`.
    """

    TAG = "PAGEOBJECT"
    ATTRIBUTES = (
        "XPOS",
        "YPOS",
        "OwnPage",
        "ItemID",
        "PTYPE",
        "WIDTH",
        "HEIGHT",
        "FRTYPE",
        "CLIPEDIT",
        "PWIDTH",
        "PLINEART",
        "ROT",
        "ANNAME",
        "PCOLOR",
        "PCOLOR2",
        "SHADE",
        "SHADE2",
        "TXTFILL",
        "TXTSTROKE",
        "LOCALSCX",
        "LOCALSCY",
        "LOCALX",
        "LOCALY",
        "LOCALROT",
        "PICART",
        "SCALETYPE",
        "RATIO",
        "Pagenumber",
        "PFILE",
        "IRENDER",
        "EMBEDDED",
        "path",
        "copath",
        "gXpos",
        "gYpos",
        "gWidth",
        "gHeight",
        "LAYER",
        "NEXTITEM",
        "BACKITEM",
        "PRFILE",
        "COLUMNS",
        "COLGAP",
        "AUTOTEXT",
        "EXTRA",
        "TEXTRA",
        "BEXTRA",
        "REXTRA",
        "VAlign",
        "FLOP",
        "PLTSHOW",
        "BASEOF",
        "textPathType",
        "textPathFlipped",
        "PSTYLE",
    )

    @property
    def x(self) -> Optional[str]:
        return self.get("XPOS")

    @property
    def y(self) -> Optional[str]:
        return self.get("YPOS")

    @property
    def width(self) -> Optional[str]:
        return self.get("WIDTH")

    @property
    def height(self) -> Optional[str]:
        return self.get("HEIGHT")

    @property
    def own_page(self) -> Optional[str]:
        return self.get("OwnPage")

    @property
    def item_id(self) -> Optional[str]:
        return self.get("ItemID")

    @property
    def ptype(self) -> Optional[str]:
        return self.get("PTYPE")

    @property
    def layer(self) -> Optional[str]:
        return self.get("LAYER")

    @property
    def next_item(self) -> Optional[str]:
        return self.get("NEXTITEM")

    @property
    def back_item(self) -> Optional[str]:
        return self.get("BACKITEM")

    @property
    def image_file(self) -> Optional[str]:
        return self.get("PFILE")

    @property
    def story(self) -> Optional[Story]:
        return self.find(Story)


# Group items (PTYPE 12) nest their members as PAGEOBJECT children
PageObject.CHILD_TYPES = (Story, PageObject)
