"""Document-level elements of a Scribus SLA file.

The root ``SCRIBUSUTF8NEW`` element holds a single ``DOCUMENT`` which in turn
holds every piece of document state: page geometry and defaults as
attributes, plus child elements for preflight profiles, colors, styles,
layers, print/PDF settings, page sets, sections, master pages, pages and
finally the page objects.

Attribute tables below follow the order Scribus 1.5 writes them in. Values
are never interpreted here; see :mod:`slakit.sla.sla_modifier` for the few
operations that change them.

References:
    - https://wiki.scribus.net/canvas/File_Format_Specification_for_Scribus_1.5
"""

from __future__ import annotations

from typing import List, Optional

from ..errors import DocumentParseError, DuplicateColorError
from .element import Element
from .page_object import CHARACTER_FORMAT_ATTRIBUTES, PageObject


# ============================================================================
# PREFLIGHT, COLORS, STYLES
# ============================================================================


class CheckProfile(Element):
    """Named set of preflight rules (not executed by this library)."""

    TAG = "CheckProfile"
    ATTRIBUTES = (
        "Name", "ignoreErrors", "autoCheck", "checkGlyphs", "checkOrphans",
        "checkOverflow", "checkPictures", "checkPartFilledImageFrames",
        "checkResolution", "checkTransparency", "minResolution", "maxResolution",
        "checkAnnotations", "checkRasterPDF", "checkForGIF", "ignoreOffLayers",
        "checkNotCMYKOrSpot", "checkDeviceColorsAndOutputIntent",
        "checkFontNotEmbedded", "checkFontIsOpenType",
        "checkAppliedMasterDifferentSide", "checkEmptyTextFrames",
    )


class Color(Element):
    """Color swatch. ``NAME`` is unique within a document."""

    TAG = "COLOR"
    ATTRIBUTES = ("NAME", "SPACE", "CMYK", "RGB", "C", "M", "Y", "K", "R", "G", "B",
                  "Spot", "Register")

    @property
    def name(self) -> Optional[str]:
        return self.get("NAME")


class Hyphenation(Element):
    """Hyphenation exceptions and ignore list (``HYPHEN``)."""

    TAG = "HYPHEN"


class ParagraphStyle(Element):
    TAG = "STYLE"
    ATTRIBUTES = (
        "NAME", "DefaultStyle", "PARENT", "ALIGN", "LINESPMode", "LINESP",
        "INDENT", "RMARGIN", "FIRST", "VOR", "NACH", "ParagraphEffectOffset",
        "DROP", "DROPLIN", "Bullet", "Numeration", "BCOLOR", "BSHADE",
    )

    @property
    def name(self) -> Optional[str]:
        return self.get("NAME")


class CharacterStyle(Element):
    TAG = "CHARSTYLE"
    ATTRIBUTES = ("CNAME", "DefaultStyle", "CPARENT") + CHARACTER_FORMAT_ATTRIBUTES

    @property
    def name(self) -> Optional[str]:
        return self.get("CNAME")


class TableBorderLine(Element):
    TAG = "TableBorderLine"
    ATTRIBUTES = ("Width", "PenStyle", "Color", "Shade")


class TableBorderLeft(Element):
    TAG = "TableBorderLeft"
    CHILD_TYPES = (TableBorderLine,)


class TableBorderRight(Element):
    TAG = "TableBorderRight"
    CHILD_TYPES = (TableBorderLine,)


class TableBorderTop(Element):
    TAG = "TableBorderTop"
    CHILD_TYPES = (TableBorderLine,)


class TableBorderBottom(Element):
    TAG = "TableBorderBottom"
    CHILD_TYPES = (TableBorderLine,)


BORDER_SIDES = (TableBorderLeft, TableBorderRight, TableBorderTop, TableBorderBottom)


class TableStyle(Element):
    TAG = "TableStyle"
    ATTRIBUTES = ("NAME", "DefaultStyle", "FillColor", "FillShade")
    CHILD_TYPES = BORDER_SIDES


class CellStyle(Element):
    TAG = "CellStyle"
    ATTRIBUTES = (
        "NAME", "DefaultStyle", "FillColor", "FillShade",
        "LeftPadding", "RightPadding", "TopPadding", "BottomPadding",
    )
    CHILD_TYPES = BORDER_SIDES


# ============================================================================
# LAYERS, OUTPUT SETTINGS
# ============================================================================


class Layer(Element):
    """Visibility/printing group; ``SICHTBAR`` = visible, ``DRUCKEN`` = printable."""

    TAG = "LAYERS"
    ATTRIBUTES = (
        "NUMMER", "LEVEL", "NAME", "SICHTBAR", "DRUCKEN", "EDIT", "SELECT",
        "FLOW", "TRANS", "BLEND", "OUTL", "LAYERC",
    )


class Printer(Element):
    TAG = "Printer"
    ATTRIBUTES = (
        "firstUse", "toFile", "useAltPrintCommand", "outputSeparations",
        "useSpotColors", "useColor", "mirrorH", "mirrorV", "useICC", "doGCR",
        "doClip", "setDevParam", "useDocBleeds", "cropMarks", "bleedMarks",
        "registrationMarks", "colorMarks", "includePDFMarks", "PSLevel",
        "PDLanguage", "markLength", "markOffset", "BleedTop", "BleedLeft",
        "BleedRight", "BleedBottom", "printer", "filename", "separationName",
        "printerCommand",
    )


class LpiSetting(Element):
    """Halftone screen for one color."""

    TAG = "LPI"
    ATTRIBUTES = ("Color", "Frequency", "Angle", "SpotFunction")


class PdfSettings(Element):
    """PDF export and presentation settings."""

    TAG = "PDF"
    ATTRIBUTES = (
        "firstUse", "Thumbnails", "Articles", "Bookmarks", "Compress", "CMethod",
        "Quality", "EmbedPDF", "MirrorH", "MirrorV", "Clip", "rangeSel",
        "rangeTxt", "RotateDeg", "PresentMode", "RecalcPic", "FontEmbedding",
        "Grayscale", "RGBMode", "UseProfiles", "UseProfiles2", "Binding",
        "PicRes", "Resolution", "Version", "Intent", "Intent2", "SolidP",
        "ImageP", "PrintP", "InfoString", "BTop", "BLeft", "BRight", "BBottom",
        "useDocBleeds", "cropMarks", "bleedMarks", "registrationMarks",
        "colorMarks", "docInfoMarks", "markLength", "markOffset", "ImagePr",
        "PassOwner", "PassUser", "Permissions", "Encrypt", "UseLayers", "UseLpi",
        "UseSpotColors", "doMultiFile", "displayBookmarks", "displayFullscreen",
        "displayLayers", "displayThumbs", "hideMenuBar", "hideToolBar",
        "fitWindow", "openAfterExport", "PageLayout", "openAction",
    )
    CHILD_TYPES = (LpiSetting,)

    @property
    def lpi_settings(self) -> List[LpiSetting]:
        return self.find_all(LpiSetting)


class DocItemAttributes(Element):
    TAG = "DocItemAttributes"


class TablesOfContents(Element):
    TAG = "TablesOfContents"


class NotesStyle(Element):
    TAG = "notesStyle"
    ATTRIBUTES = (
        "Name", "Start", "Endnotes", "Type", "Range", "Prefix", "Suffix",
        "AutoHeight", "AutoWidth", "AutoRemove", "AutoWeld", "SuperNote",
        "SuperMaster", "MarksStyle", "NotesStyle",
    )


class NotesStyles(Element):
    TAG = "NotesStyles"
    CHILD_TYPES = (NotesStyle,)


class NotesFrames(Element):
    TAG = "NotesFrames"


# ============================================================================
# PAGE SETS, SECTIONS, PAGES
# ============================================================================


class PageName(Element):
    TAG = "PageNames"
    ATTRIBUTES = ("Name",)


class PageSet(Element):
    """Page arrangement (single page, facing pages...)."""

    TAG = "Set"
    ATTRIBUTES = ("Name", "FirstPage", "Rows", "Columns")
    CHILD_TYPES = (PageName,)


class PageSets(Element):
    TAG = "PageSets"
    CHILD_TYPES = (PageSet,)


class Section(Element):
    """Page numbering section."""

    TAG = "Section"
    ATTRIBUTES = (
        "Number", "Name", "From", "To", "Type", "Start", "Reversed", "Active",
        "FillChar", "FieldWidth",
    )


class Sections(Element):
    TAG = "Sections"
    CHILD_TYPES = (Section,)


PAGE_ATTRIBUTES = (
    "PAGEXPOS", "PAGEYPOS", "PAGEWIDTH", "PAGEHEIGHT",
    "BORDERLEFT", "BORDERRIGHT", "BORDERTOP", "BORDERBOTTOM",
    "NUM", "NAM", "MNAM", "Size", "Orientation", "LEFT", "PRESET",
    "VerticalGuides", "HorizontalGuides",
    "AGhorizontalAutoGap", "AGverticalAutoGap",
    "AGhorizontalAutoCount", "AGverticalAutoCount",
    "AGhorizontalAutoRefer", "AGverticalAutoRefer", "AGSelection",
    "pageEffectDuration", "pageViewDuration", "effectType", "Dm", "M", "Di",
)


class MasterPage(Element):
    """Template page; ``NAM`` is its name, referenced by pages' ``MNAM``."""

    TAG = "MASTERPAGE"
    ATTRIBUTES = PAGE_ATTRIBUTES


class Page(Element):
    TAG = "PAGE"
    ATTRIBUTES = PAGE_ATTRIBUTES


# ============================================================================
# DOCUMENT
# ============================================================================


class DocumentContent(Element):
    """
    The ``DOCUMENT`` element: all document state.

    Page objects are kept among the other children in file order; the
    ``page_objects`` property returns them as a list, and mutations go
    through :class:`slakit.sla.sla_modifier.SLAModifier` so the position of
    each object inside ``children`` stays consistent.
    """

    TAG = "DOCUMENT"
    ATTRIBUTES = (
        # Page geometry
        "ANZPAGES", "PAGEWIDTH", "PAGEHEIGHT", "BORDERLEFT", "BORDERRIGHT",
        "BORDERTOP", "BORDERBOTTOM", "PRESET", "BleedTop", "BleedLeft",
        "BleedRight", "BleedBottom", "ORIENTATION", "PAGESIZE", "FIRSTNUM",
        "BOOK", "AUTOSPALTEN", "ABSTSPALTEN", "UNITS",
        # Typographic defaults
        "DFONT", "DSIZE", "DCOL", "DGAP", "TabFill", "TabWidth",
        # Metadata
        "AUTHOR", "COMMENTS", "KEYWORDS", "PUBLISHER", "DOCDATE", "DOCTYPE",
        "DOCFORMAT", "DOCIDENT", "DOCSOURCE", "DOCLANGINFO", "DOCRELATION",
        "DOCCOVER", "DOCRIGHTS", "DOCCONTRIB", "TITLE", "SUBJECT",
        # Superscript, subscript, small caps, baseline grid
        "VHOCH", "VHOCHSC", "VTIEF", "VTIEFSC", "VKAPIT", "BASEGRID", "BASEO",
        "AUTOL", "UnderlinePos", "UnderlineWidth", "StrikeThruPos",
        "StrikeThruWidth", "GROUPC",
        # Color management
        "HCMS", "DPSo", "DPSFo", "DPuse", "DPgam", "DPbla", "DPPr", "DPIn",
        "DPInCMYK", "DPIn2", "DPIn3", "DISc", "DIIm",
        # Active layer, hyphenation
        "ALAYER", "LANGUAGE", "MINWORDLEN", "HYCOUNT", "AUTOMATIC", "AUTOCHECK",
        # Guides, grid, display
        "GUIDELOCK", "SnapToGuides", "SnapToGrid", "SnapToElement", "MINGRID",
        "MAJGRID", "SHOWGRID", "SHOWGUIDES", "showcolborders", "previewMode",
        "SHOWFRAME", "SHOWControl", "SHOWLAYERM", "SHOWMARGIN", "SHOWBASE",
        "SHOWPICT", "SHOWLINK", "rulerMode", "showrulers", "showBleed",
        "rulerXoffset", "rulerYoffset", "GuideRad", "GRAB",
        # Shape tool defaults
        "POLYC", "POLYF", "POLYR", "POLYIR", "POLYCUR", "POLYOCUR", "POLYS",
        "arcStartAngle", "arcSweepAngle", "spiralStartAngle", "spiralEndAngle",
        "spiralFactor",
        # Autosave, scratch space
        "AutoSave", "AutoSaveTime", "ScratchBottom", "ScratchLeft",
        "ScratchRight", "ScratchTop", "GapHorizontal", "GapVertical",
        # Line, text and image tool defaults
        "StartArrow", "EndArrow", "PEN", "BRUSH", "PENLINE", "PENTEXT",
        "StrokeText", "TextBackGround", "TextLineColor", "TextBackGroundShade",
        "TextLineShade", "TextPenShade", "TextStrokeShade", "STIL", "STILLINE",
        "WIDTH", "WIDTHLINE", "PENSHADE", "LINESHADE", "BRUSHSHADE", "CPICT",
        "PICTSHADE", "CSPICT", "PICTSSHADE", "PICTSCX", "PICTSCY", "PSCALE",
        "PASPECT", "EmbeddedPath", "HalfRes", "dispX", "dispY", "constrain",
        # Guide and page colors
        "MINORC", "MAJORC", "GuideC", "BaseC", "renderStack", "GridType",
        "PAGEC", "MARGC", "RANDF", "currentProfile",
        # Calligraphic pen
        "calligraphicPenFillColor", "calligraphicPenLineColor",
        "calligraphicPenFillColorShade", "calligraphicPenLineColorShade",
        "calligraphicPenLineWidth", "calligraphicPenAngle",
        "calligraphicPenWidth", "calligraphicPenStyle",
    )
    CHILD_TYPES = (
        CheckProfile,
        Color,
        Hyphenation,
        ParagraphStyle,
        CharacterStyle,
        TableStyle,
        CellStyle,
        Layer,
        Printer,
        PdfSettings,
        DocItemAttributes,
        TablesOfContents,
        NotesStyles,
        NotesFrames,
        PageSets,
        Sections,
        MasterPage,
        Page,
        PageObject,
    )

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------
    @property
    def check_profiles(self) -> List[CheckProfile]:
        return self.find_all(CheckProfile)

    @property
    def colors(self) -> List[Color]:
        return self.find_all(Color)

    @property
    def paragraph_styles(self) -> List[ParagraphStyle]:
        return self.find_all(ParagraphStyle)

    @property
    def character_styles(self) -> List[CharacterStyle]:
        return self.find_all(CharacterStyle)

    @property
    def layers(self) -> List[Layer]:
        return self.find_all(Layer)

    @property
    def master_pages(self) -> List[MasterPage]:
        return self.find_all(MasterPage)

    @property
    def pages(self) -> List[Page]:
        return self.find_all(Page)

    @property
    def page_objects(self) -> List[PageObject]:
        """Page objects in z-order; the index used by all mutations."""
        return self.find_all(PageObject)

    # ------------------------------------------------------------------
    # Single settings blocks (first occurrence, None when absent)
    # ------------------------------------------------------------------
    @property
    def paragraph_style(self) -> Optional[ParagraphStyle]:
        return self.find(ParagraphStyle)

    @property
    def character_style(self) -> Optional[CharacterStyle]:
        return self.find(CharacterStyle)

    @property
    def table_style(self) -> Optional[TableStyle]:
        return self.find(TableStyle)

    @property
    def cell_style(self) -> Optional[CellStyle]:
        return self.find(CellStyle)

    @property
    def printer(self) -> Optional[Printer]:
        return self.find(Printer)

    @property
    def pdf(self) -> Optional[PdfSettings]:
        return self.find(PdfSettings)

    @property
    def notes_styles(self) -> Optional[NotesStyles]:
        return self.find(NotesStyles)

    @property
    def page_sets(self) -> Optional[PageSets]:
        return self.find(PageSets)

    @property
    def sections(self) -> Optional[Sections]:
        return self.find(Sections)

    @property
    def master_page(self) -> Optional[MasterPage]:
        return self.find(MasterPage)

    @property
    def page(self) -> Optional[Page]:
        return self.find(Page)

    # ------------------------------------------------------------------
    # Colors
    # ------------------------------------------------------------------
    def color(self, name: str) -> Optional[Color]:
        """Look up a color swatch by name."""
        for color in self.colors:
            if color.name == name:
                return color
        return None

    def add_color(self, name: str, cmyk: str, register: bool = False) -> Color:
        """
        Define a new CMYK color swatch.

        The swatch is inserted after the last existing color, or at the top
        of the document when there is none.

        Args:
            name: Swatch name, unique in the document
            cmyk: Hex CMYK value as Scribus stores it (e.g. "#ff000000")
            register: True for a registration color

        Returns:
            The new Color element

        Raises:
            DuplicateColorError: If a swatch with this name exists

        Example:
            >>> content.add_color("Brand Red", "#00ffff00")
        """
        if self.color(name) is not None:
            raise DuplicateColorError(f"Color already defined: {name}")

        color = Color(attributes={"NAME": name, "SPACE": "CMYK", "CMYK": cmyk})
        if register:
            color.set("Register", "1")

        existing = self.colors
        if existing:
            self.insert_after(existing[-1], color)
        else:
            self.children.insert(0, color)
        return color


class Document(Element):
    """
    Root of an SLA file (``SCRIBUSUTF8NEW``).

    Usage:
        >>> doc = load(Path("flyer.sla"))
        >>> print(doc.version, len(doc.content.page_objects))
    """

    TAG = "SCRIBUSUTF8NEW"
    ATTRIBUTES = ("Version",)
    CHILD_TYPES = (DocumentContent,)

    @classmethod
    def new(cls, version: str = "1.5.8") -> "Document":
        """
        Create an empty in-memory document.

        Every declared ``DOCUMENT`` attribute is present with an empty value;
        callers fill in what they need before saving.
        """
        return cls(attributes={"Version": version}, children=[DocumentContent.blank()])

    @property
    def version(self) -> Optional[str]:
        return self.get("Version")

    @property
    def content(self) -> DocumentContent:
        content = self.find(DocumentContent)
        if content is None:
            raise DocumentParseError("Document has no DOCUMENT element")
        return content

    @property
    def page_objects(self) -> List[PageObject]:
        return self.content.page_objects
