"""Unit tests for the output escaping policy."""

import pytest

from slakit.errors import DocumentSerializeError
from slakit.sla.escaping import check_xml_chars, escape_attribute, escape_text


class TestEscapeText:
    """Test escaping of character data."""

    def test_markup_characters(self):
        assert escape_text("a < b & c > d") == "a &lt; b &amp; c &gt; d"

    def test_newline_and_tab_stay_literal(self):
        assert escape_text("line 1\nline 2\tend") == "line 1\nline 2\tend"

    def test_carriage_return_is_a_reference(self):
        assert escape_text("a\rb") == "a&#13;b"

    def test_quotes_stay_literal(self):
        assert escape_text('say "hi"') == 'say "hi"'

    def test_escape_lookalike_is_not_special(self):
        assert escape_text("&#10;") == "&amp;#10;"


class TestEscapeAttribute:
    """Test escaping of attribute values."""

    def test_quotes(self):
        assert escape_attribute('say "hi"') == "say &quot;hi&quot;"

    def test_whitespace_controls_are_references(self):
        assert escape_attribute("a\nb\rc\td") == "a&#10;b&#13;c&#9;d"

    def test_markup_characters(self):
        assert escape_attribute("<&>") == "&lt;&amp;&gt;"

    def test_plain_text_unchanged(self):
        assert escape_attribute("Grüße ■") == "Grüße ■"


class TestInvalidCharacters:
    """Test rejection of characters XML 1.0 cannot carry."""

    @pytest.mark.parametrize("value", ["a\x01b", "\x0b", "\x1f", "\ufffe"])
    def test_rejected(self, value):
        with pytest.raises(DocumentSerializeError):
            check_xml_chars(value)

    def test_error_names_code_point(self):
        with pytest.raises(DocumentSerializeError, match="U\\+0007"):
            escape_text("bell\x07")

    def test_attribute_rejects_too(self):
        with pytest.raises(DocumentSerializeError):
            escape_attribute("\x00")

    def test_allowed_whitespace(self):
        check_xml_chars("\t\n\r ok")
