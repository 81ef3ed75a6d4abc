"""Unit tests for the generic element node."""

import pytest

from slakit.core import Color, Element, ParagraphMarker, RawElement, Story, TextRun, format_value


class TestFormatValue:
    """Test rendering of Python values as attribute text."""

    def test_integers(self):
        assert format_value(100) == "100"
        assert format_value(-5) == "-5"

    def test_integral_float_has_no_decimal_part(self):
        assert format_value(100.0) == "100"

    def test_fractional_float(self):
        assert format_value(12.5) == "12.5"

    def test_bool(self):
        assert format_value(True) == "1"
        assert format_value(False) == "0"

    def test_string_passthrough(self):
        assert format_value("595.275590551181") == "595.275590551181"


class TestElement:
    """Test attribute access, children and equality."""

    def test_blank_declares_every_attribute(self):
        color = Color.blank()

        assert list(color.attributes) == list(Color.ATTRIBUTES)
        assert all(value == "" for value in color.attributes.values())

    def test_child_class_lookup(self):
        assert Story.child_class("ITEXT") is TextRun
        assert Story.child_class("para") is ParagraphMarker
        assert Story.child_class("tab") is None

    def test_get_set_remove(self):
        run = TextRun()
        run.set("FONTSIZE", 12.0)

        assert run.get("FONTSIZE") == "12"
        assert run.get("FONT") is None
        assert run.get("FONT", "Arial") == "Arial"

        run.remove("FONTSIZE")
        run.remove("FONTSIZE")
        assert "FONTSIZE" not in run.attributes

    def test_declared_and_extra_attributes(self):
        run = TextRun(attributes={"CH": "x", "Custom": "1"})

        assert run.declared_attributes == {"CH": "x"}
        assert run.extra_attributes == {"Custom": "1"}

    def test_equality_is_deep(self):
        a = Story(children=[TextRun(attributes={"CH": "a"})])
        b = Story(children=[TextRun(attributes={"CH": "a"})])
        c = Story(children=[TextRun(attributes={"CH": "b"})])

        assert a == b
        assert a != c

    def test_equality_depends_on_kind(self):
        attributes = {"PARENT": "Default"}
        assert ParagraphMarker(attributes=dict(attributes)) != Element(attributes=dict(attributes))

    def test_raw_elements_compare_by_tag(self):
        assert RawElement(name="tab") == RawElement(name="tab")
        assert RawElement(name="tab") != RawElement(name="breakline")
        assert RawElement(name="tab").tag == "tab"

    def test_copy_is_independent(self):
        story = Story(children=[TextRun(attributes={"CH": "a"})])
        clone = story.copy()

        clone.children[0].content = "changed"

        assert story.runs[0].content == "a"
        assert clone != story

    def test_position_of_uses_identity(self):
        first = TextRun(attributes={"CH": "same"})
        second = TextRun(attributes={"CH": "same"})
        story = Story(children=[first, second])

        assert story.position_of(first) == 0
        assert story.position_of(second) == 1

    def test_position_of_unknown_child(self):
        with pytest.raises(ValueError):
            Story().position_of(TextRun())

    def test_insert_after(self):
        first = TextRun(attributes={"CH": "1"})
        last = TextRun(attributes={"CH": "3"})
        story = Story(children=[first, last])

        story.insert_after(first, TextRun(attributes={"CH": "2"}))

        assert [run.content for run in story.runs] == ["1", "2", "3"]

    def test_find_and_find_all(self):
        marker = ParagraphMarker()
        story = Story(children=[TextRun(), marker, TextRun()])

        assert story.find(ParagraphMarker) is marker
        assert len(story.find_all(TextRun)) == 2
        assert Story().find(TextRun) is None

    def test_iter_is_depth_first(self):
        run = TextRun()
        tab = RawElement(name="tab")
        story = Story(children=[run, tab])

        assert list(story.iter()) == [story, run, tab]
