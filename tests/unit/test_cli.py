"""Tests for the slakit command line."""

import pytest
from typer.testing import CliRunner

from slakit import __version__
from slakit.cli import app
from slakit.sla import load, save


@pytest.fixture
def runner():
    return CliRunner()


class TestInfo:
    def test_lists_page_objects(self, runner, sla_path):
        result = runner.invoke(app, ["info", str(sla_path)])

        assert result.exit_code == 0
        assert "Version: 1.5.8" in result.output
        assert "Page objects: 4" in result.output
        assert "text 'Hello'" in result.output
        assert "image images/photo.jpg" in result.output
        assert "PTYPE 6" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path / "missing.sla")])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestEditCommands:
    """Test the load / edit / save commands."""

    def test_duplicate_to_output(self, runner, sla_path, tmp_path):
        output = tmp_path / "out.sla"

        result = runner.invoke(app, ["duplicate", str(sla_path), "0", "--output", str(output)])

        assert result.exit_code == 0
        assert len(load(output).page_objects) == 5
        assert len(load(sla_path).page_objects) == 4

    def test_duplicate_fresh_id(self, runner, sla_path):
        result = runner.invoke(app, ["duplicate", str(sla_path), "0", "--fresh-id"])

        assert result.exit_code == 0
        objects = load(sla_path).page_objects
        assert objects[1].item_id != objects[0].item_id

    def test_move_in_place(self, runner, sla_path):
        result = runner.invoke(app, ["move", str(sla_path), "1", "100", "200"])

        assert result.exit_code == 0
        moved = load(sla_path).page_objects[1]
        assert (moved.x, moved.y) == ("100", "200")

    def test_set_text(self, runner, sla_path):
        result = runner.invoke(app, ["set-text", str(sla_path), "0", "World"])

        assert result.exit_code == 0
        assert load(sla_path).page_objects[0].story.runs[0].content == "World"

    def test_set_image(self, runner, sla_path):
        result = runner.invoke(app, ["set-image", str(sla_path), "1", "images/beach.png"])

        assert result.exit_code == 0
        assert load(sla_path).page_objects[1].image_file == "images/beach.png"

    def test_set_bullets(self, runner, sla_path):
        result = runner.invoke(app, ["set-bullets", str(sla_path), "3", "one", "two"])

        assert result.exit_code == 0
        assert load(sla_path).page_objects[3].story.plain_text() == "one\ntwo\n"

    def test_type_mismatch(self, runner, sla_path):
        before = sla_path.read_bytes()

        result = runner.invoke(app, ["set-text", str(sla_path), "1", "World"])

        assert result.exit_code == 1
        assert "not a text frame" in result.output
        assert sla_path.read_bytes() == before

    def test_index_out_of_range(self, runner, sla_path):
        result = runner.invoke(app, ["move", str(sla_path), "9", "1", "2"])

        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_config_file(self, runner, sla_path, tmp_path):
        config = tmp_path / "slakit.yaml"
        config.write_text("text_frame_types: ['1']\n")

        result = runner.invoke(app, ["set-text", str(sla_path), "0", "World", "--config", str(config)])

        assert result.exit_code == 1
        assert "not a text frame" in result.output

    def test_invalid_config(self, runner, sla_path, tmp_path):
        config = tmp_path / "slakit.yaml"
        config.write_text("colour: red\n")

        result = runner.invoke(app, ["info", str(sla_path), "-c", str(config)])

        assert result.exit_code == 1
        assert "Invalid config" in result.output

    @pytest.mark.parametrize("setting", ["indent: 2\n", "text_frame_types: 4\n"])
    def test_mistyped_config(self, runner, sla_path, tmp_path, setting):
        config = tmp_path / "slakit.yaml"
        config.write_text(setting)

        result = runner.invoke(app, ["move", str(sla_path), "0", "1", "2", "-c", str(config)])

        assert result.exit_code == 1
        assert "Invalid config" in result.output
        assert load(sla_path).page_objects[0].x == "120"


class TestValidate:
    def test_valid(self, runner, sla_path):
        result = runner.invoke(app, ["validate", str(sla_path)])

        assert result.exit_code == 0
        assert "is valid" in result.output

    def test_broken_chain(self, runner, sla_path):
        doc = load(sla_path)
        doc.page_objects[3].set("BACKITEM", "-1")
        save(doc, sla_path)

        result = runner.invoke(app, ["validate", str(sla_path)])

        assert result.exit_code == 1
        assert "NEXTITEM" in result.output


def test_version(runner):
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
