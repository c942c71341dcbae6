"""Tests for the optreg CLI."""

import logging

import pytest
from click.testing import CliRunner

from optreg.cli.main import cli

DECLARATIONS = """
options:
  - name: mode
    kind: choice
    label: Mode
    choices: {fast: "Fast", safe: "Safe"}
    default_value: safe
  - name: retries
    kind: integer
    minimum: 0
    maximum: 5
    default_value: 2
"""


@pytest.fixture
def root_level():
    """Restore the root logger level changed by the CLI group."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    root_logger.setLevel(level)


@pytest.fixture
def files(tmp_path):
    definitions = tmp_path / "options.yaml"
    definitions.write_text(DECLARATIONS)
    return tmp_path, definitions


class TestShow:
    def test_lists_options(self, files):
        _, definitions = files
        result = CliRunner().invoke(cli, ["show", str(definitions)])
        assert result.exit_code == 0
        assert "mode" in result.output
        assert "retries" in result.output
        assert "Safe" in result.output

    def test_empty_declarations(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("options: []\n")
        result = CliRunner().invoke(cli, ["show", str(path)])
        assert result.exit_code == 0
        assert "No options declared" in result.output

    def test_markup_in_filename_is_literal(self, tmp_path):
        path = tmp_path / "opts[bold].yaml"
        path.write_text(DECLARATIONS)
        result = CliRunner().invoke(cli, ["show", str(path)])
        assert result.exit_code == 0
        assert "opts[bold].yaml" in result.output

    def test_missing_file(self):
        result = CliRunner().invoke(cli, ["show", "/nonexistent/options.yaml"])
        assert result.exit_code != 0


class TestValidate:
    def test_defaults_only(self, files):
        _, definitions = files
        result = CliRunner().invoke(cli, ["validate", str(definitions)])
        assert result.exit_code == 0
        assert "Valid: 2 option(s)" in result.output
        assert "mode = 'safe'" in result.output
        assert "retries = 2" in result.output

    def test_applies_values(self, files):
        tmp_path, definitions = files
        values = tmp_path / "values.yaml"
        values.write_text("mode: fast\nretries: 4\n")
        result = CliRunner().invoke(
            cli, ["validate", str(definitions), "--values", str(values)]
        )
        assert result.exit_code == 0
        assert "mode = 'fast'" in result.output
        assert "retries = 4" in result.output

    def test_invalid_value_exits(self, files):
        tmp_path, definitions = files
        values = tmp_path / "values.yaml"
        values.write_text("retries: 9\n")
        result = CliRunner().invoke(
            cli, ["validate", str(definitions), "--values", str(values)]
        )
        assert result.exit_code == 1
        assert "above maximum" in result.output

    def test_unknown_option_exits(self, files):
        tmp_path, definitions = files
        values = tmp_path / "values.yaml"
        values.write_text("colour: red\n")
        result = CliRunner().invoke(
            cli, ["validate", str(definitions), "--values", str(values)]
        )
        assert result.exit_code == 1
        assert "Unknown option: colour" in result.output

    def test_malformed_declarations_exit(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("options:\n  - name: x\n    kind: radios\n")
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid option #0" in result.output


class TestBuiltin:
    def test_shows_login_hook(self):
        result = CliRunner().invoke(cli, ["builtin"])
        assert result.exit_code == 0
        assert "useLoginHook" in result.output
        assert "Check for upgrades on superuser login?" in result.output
        assert "1=Yes, 0=No" in result.output


class TestVersion:
    def test_version_option(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestVerbose:
    def test_verbose_enables_debug(self, files, root_level, caplog):
        _, definitions = files
        result = CliRunner().invoke(cli, ["--verbose", "validate", str(definitions)])
        assert result.exit_code == 0
        assert root_level.level == logging.DEBUG
        messages = [r.getMessage() for r in caplog.records]
        assert any("Loaded 2 option definition(s)" in m for m in messages)
        assert "Registered choice option 'mode'" in messages

    def test_default_level_is_warning(self, files, root_level):
        _, definitions = files
        result = CliRunner().invoke(cli, ["validate", str(definitions)])
        assert result.exit_code == 0
        assert root_level.level == logging.WARNING
