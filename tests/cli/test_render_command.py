"""Tests for the render CLI command."""

import pytest
from typer.testing import CliRunner

from propbag.cli.main import app
from propbag.config.constants import ENV_DEFAULT_FORMAT, ENV_DROP_NULLS, ENV_PRETTY_PRINT
from propbag.tree.node import TNode


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    """Create a CLI runner with no PROPBAG_* settings in the environment."""
    for var in (ENV_DEFAULT_FORMAT, ENV_DROP_NULLS, ENV_PRETTY_PRINT):
        monkeypatch.delenv(var, raising=False)
    return CliRunner()


COMPACT_XML = (
    "<properties>"
    '<property name="Category" value="Slow" />'
    '<property name="Category" value="Integration" />'
    '<property name="Author" value="Jane" />'
    '<property name="MaxTime" value="2000" />'
    "</properties>"
)


class TestRenderCommand:
    """Test suite for the render CLI command."""

    def test_render_compact(self, runner, sample_yaml_file):
        result = runner.invoke(app, ["render", str(sample_yaml_file), "--compact"])

        assert result.exit_code == 0
        assert result.stdout.strip() == COMPACT_XML

    def test_render_pretty_by_default(self, runner, sample_json_file):
        result = runner.invoke(app, ["render", str(sample_json_file)])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert lines[0] == "<properties>"
        assert lines[1] == '  <property name="Category" value="Slow" />'
        assert TNode.from_xml(result.stdout).outer_xml == COMPACT_XML

    def test_pretty_print_disabled_by_environment(self, runner, sample_yaml_file, monkeypatch):
        monkeypatch.setenv(ENV_PRETTY_PRINT, "false")

        result = runner.invoke(app, ["render", str(sample_yaml_file)])

        assert result.exit_code == 0
        assert result.stdout.strip() == COMPACT_XML

    def test_render_to_output_file(self, runner, sample_yaml_file, tmp_path):
        output_file = tmp_path / "out" / "properties.xml"

        result = runner.invoke(app, [
            "render", str(sample_yaml_file), "--compact", "--output", str(output_file)
        ])

        assert result.exit_code == 0
        assert "written to" in result.stdout
        assert output_file.read_text(encoding="utf-8") == COMPACT_XML + "\n"

    def test_render_output_write_failure(self, runner, sample_yaml_file, tmp_path):
        """Verify an unwritable output path is reported with the path as detail."""
        # Arrange
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        output_file = blocker / "properties.xml"

        # Act
        result = runner.invoke(app, [
            "render", str(sample_yaml_file), "--output", str(output_file)
        ])

        # Assert
        assert result.exit_code == 1
        assert "Failed to render properties: Cannot write" in result.stdout
        assert f"• output: {output_file}" in result.stdout

    def test_render_rejects_nulls_with_details(self, runner, null_value_yaml_file):
        result = runner.invoke(app, ["render", str(null_value_yaml_file)])

        assert result.exit_code == 1
        assert f"• file: {null_value_yaml_file}" in result.stdout
        assert "• properties.Description: null value" in result.stdout

    def test_render_explicit_format(self, runner, sample_json_file, tmp_path):
        renamed = tmp_path / "properties.txt"
        renamed.write_text(sample_json_file.read_text(encoding="utf-8"), encoding="utf-8")

        result = runner.invoke(app, ["render", str(renamed), "--format", "json", "--compact"])

        assert result.exit_code == 0
        assert result.stdout.strip() == COMPACT_XML

    def test_render_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["render", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "Error" in result.stdout
        assert "not found" in result.stdout

    def test_render_rejects_nulls(self, runner, null_value_yaml_file):
        result = runner.invoke(app, ["render", str(null_value_yaml_file)])

        assert result.exit_code == 1
        assert "cannot be null" in result.stdout

    def test_render_drops_nulls_when_configured(self, runner, null_value_yaml_file, monkeypatch):
        monkeypatch.setenv(ENV_DROP_NULLS, "true")

        result = runner.invoke(app, ["render", str(null_value_yaml_file), "--compact"])

        assert result.exit_code == 0
        assert result.stdout.strip() == (
            "<properties>"
            '<property name="Category" value="Slow" />'
            '<property name="Author" value="Jane" />'
            "</properties>"
        )

    def test_render_escapes_control_characters(self, runner, tmp_path):
        """Verify a control character in a document still renders as parseable XML."""
        # Arrange
        source = tmp_path / "control.yaml"
        source.write_text('properties:\n  Description: "a\\x01b"\n', encoding="utf-8")

        # Act
        result = runner.invoke(app, ["render", str(source), "--compact"])

        # Assert
        assert result.exit_code == 0
        node = TNode.from_xml(result.stdout)
        assert node.first_child.attributes["value"] == "a\\u0001b"

    def test_invalid_environment_format(self, runner, sample_yaml_file, monkeypatch):
        monkeypatch.setenv(ENV_DEFAULT_FORMAT, "toml")

        result = runner.invoke(app, ["render", str(sample_yaml_file)])

        assert result.exit_code == 1
        assert "PROPBAG_DEFAULT_FORMAT" in result.stdout
