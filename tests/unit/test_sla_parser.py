"""Unit tests for the SLA parser."""

import logging

import pytest

from slakit.config import SLAConfig
from slakit.core import Document, PageObject, RawElement, Story
from slakit.errors import DocumentIOError, DocumentParseError, SLAError
from slakit.sla import SLAParser, load, loads
from slakit.sla.sla_utils import find_page_object_index, sniff_sla_version


class TestParse:
    """Test building the document tree."""

    def test_typed_tree(self, document):
        assert isinstance(document, Document)
        assert all(isinstance(obj, PageObject) for obj in document.page_objects)
        assert isinstance(document.page_objects[0].story, Story)

    def test_attributes_verbatim(self, document):
        assert document.content.get("PAGEWIDTH") == "595.275590551181"
        assert document.content.get("FutureFlag") == "yes"

    def test_attribute_order_preserved(self, document):
        assert list(document.page_objects[1].attributes)[:4] == ["XPOS", "YPOS", "OwnPage", "ItemID"]

    def test_unknown_element_kept(self, document):
        plugin = document.content.children[-1]

        assert isinstance(plugin, RawElement)
        assert plugin.tag == "Plugin"
        assert plugin.attributes == {"name": "future"}
        assert plugin.text == "payload"

    def test_indentation_discarded(self, document):
        assert document.content.text is None
        assert document.page_objects[0].story.text is None

    def test_loads_equals_load(self, document, sample_sla_bytes):
        assert loads(sample_sla_bytes) == document

    def test_load_logs(self, sla_path, caplog):
        with caplog.at_level(logging.INFO, logger="slakit"):
            load(sla_path)
        assert "4 page objects" in caplog.text


def _wrap(body: str) -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<SCRIBUSUTF8NEW Version="1.5.8"><DOCUMENT>{body}</DOCUMENT></SCRIBUSUTF8NEW>'
    ).encode("utf-8")


class TestMarkupDetails:
    """Test namespaced names, text after children and leaf whitespace."""

    def test_xml_lang_attribute(self):
        doc = loads(_wrap('<PAGEOBJECT PTYPE="4" xml:lang="de"/>'))

        assert doc.page_objects[0].attributes == {"PTYPE": "4", "xml:lang": "de"}

    def test_prefixed_element(self):
        doc = loads(_wrap('<foo:ext xmlns:foo="urn:example" foo:mode="on"/>'))
        ext = doc.content.children[0]

        assert ext.tag == "foo:ext"
        assert ext.attributes == {"xmlns:foo": "urn:example", "foo:mode": "on"}

    def test_default_namespace_declaration(self):
        doc = loads(_wrap('<ext xmlns="urn:example"><inner/></ext>'))
        ext = doc.content.children[0]

        assert ext.tag == "ext"
        assert ext.attributes == {"xmlns": "urn:example"}
        assert ext.children[0].tag == "inner"

    def test_text_after_child(self):
        doc = loads(_wrap("<note>head<b>bold</b>tail</note>"))
        note = doc.content.children[0]

        assert note.text == "head"
        assert note.children[0].text == "bold"
        assert note.children[0].tail == "tail"

    def test_text_after_child_only(self):
        note = loads(_wrap("<note>\n <b/>tail</note>")).content.children[0]

        assert note.text == "\n "
        assert note.children[0].tail == "tail"

    def test_whitespace_leaf_kept(self):
        doc = loads(_wrap("<var> </var>"))
        assert doc.content.children[0].text == " "

    def test_comments_not_kept(self):
        doc = loads(_wrap("<!-- layout note --><var>x</var><?app hint?>"))

        assert [child.tag for child in doc.content.children] == ["var"]
        assert doc.content.children[0].tail is None


class TestKeepUnknown:
    """Test dropping undeclared markup."""

    @pytest.fixture
    def strict_document(self, sla_path):
        return SLAParser(SLAConfig(keep_unknown=False)).parse_file(sla_path)

    def test_unknown_attributes_dropped(self, strict_document):
        assert "CustomFlag" not in strict_document.page_objects[0].attributes
        assert "FutureFlag" not in strict_document.content.attributes
        assert strict_document.page_objects[0].item_id == "100000001"

    def test_unknown_elements_dropped(self, strict_document):
        tags = [child.tag for child in strict_document.content.children]
        story_tags = [item.tag for item in strict_document.page_objects[3].story.children]

        assert "Plugin" not in tags
        assert "tab" not in story_tags
        assert len(strict_document.page_objects) == 4


class TestParseErrors:
    """Test load failures."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentIOError) as exc_info:
            load(tmp_path / "missing.sla")

        assert isinstance(exc_info.value, OSError)
        assert isinstance(exc_info.value, SLAError)
        assert exc_info.value.filename == str(tmp_path / "missing.sla")

    def test_directory(self, tmp_path):
        with pytest.raises(DocumentIOError):
            load(tmp_path)

    def test_malformed(self):
        with pytest.raises(DocumentParseError, match="^unmarshal failed"):
            loads(b"<SCRIBUSUTF8NEW><DOCUMENT></SCRIBUSUTF8NEW>")

    def test_wrong_root(self):
        with pytest.raises(DocumentParseError, match="^unmarshal failed"):
            loads(b'<?xml version="1.0"?><html><DOCUMENT/></html>')

    def test_missing_document(self):
        with pytest.raises(DocumentParseError):
            loads(b'<SCRIBUSUTF8NEW Version="1.5.8"/>')

    def test_repeated_document(self):
        with pytest.raises(DocumentParseError):
            loads(b'<SCRIBUSUTF8NEW Version="1.5.8"><DOCUMENT/><DOCUMENT/></SCRIBUSUTF8NEW>')

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            loads(b"not xml")


class TestUtils:
    """Test file helpers."""

    def test_sniff_version(self, sla_path):
        assert sniff_sla_version(sla_path) == "1.5.8"

    def test_sniff_other_xml(self, tmp_path):
        path = tmp_path / "other.xml"
        path.write_text("<html/>")
        assert sniff_sla_version(path) is None

    def test_sniff_missing(self, tmp_path):
        assert sniff_sla_version(tmp_path / "missing.sla") is None

    def test_find_page_object_index(self, document):
        assert find_page_object_index(document, "100000004") == 3
        assert find_page_object_index(document, "42") is None
