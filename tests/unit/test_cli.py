"""Unit tests for ttlmode.cli.main: the ttl-mode command line."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from ttlmode.cli.main import cli

_INDENTED = (
    "@prefix ex: <http://ex.org/> .\n"
    "ex:s\n"
    "  ex:p ex:o ;\n"
    "  ex:q ex:r .\n"
)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def turtle_file(tmp_path: Path, unindented_turtle: str) -> Path:
    path = tmp_path / "data.ttl"
    path.write_text(unindented_turtle, encoding="utf-8")
    return path


# ===========================================================================
# indent
# ===========================================================================


class TestIndentCommand:
    def test_in_place_rewrites_file(self, runner: CliRunner, turtle_file: Path) -> None:
        result = runner.invoke(cli, ["indent", str(turtle_file), "-w", "2", "--in-place"])
        assert result.exit_code == 0, result.output
        assert turtle_file.read_text(encoding="utf-8") == _INDENTED

    def test_check_fails_on_unindented_file(self, runner: CliRunner, turtle_file: Path) -> None:
        result = runner.invoke(cli, ["indent", str(turtle_file), "-w", "2", "--check"])
        assert result.exit_code == 1
        assert "NEEDS INDENTING" in result.output

    def test_check_passes_on_indented_file(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "ok.ttl"
        path.write_text(_INDENTED, encoding="utf-8")
        result = runner.invoke(cli, ["indent", str(path), "--indent-width", "2", "--check"])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_prints_without_modifying(self, runner: CliRunner, turtle_file: Path, unindented_turtle: str) -> None:
        result = runner.invoke(cli, ["indent", str(turtle_file), "-w", "2"])
        assert result.exit_code == 0
        assert "ex:p ex:o ;" in result.output
        assert turtle_file.read_text(encoding="utf-8") == unindented_turtle

    def test_indent_width_from_config_file(self, runner: CliRunner, turtle_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "ttl-mode.yaml"
        config.write_text("indent_width: 3\n", encoding="utf-8")
        result = runner.invoke(cli, ["indent", str(turtle_file), "--config", str(config), "--in-place"])
        assert result.exit_code == 0, result.output
        assert turtle_file.read_text(encoding="utf-8").splitlines()[2] == "   ex:p ex:o ;"

    def test_flag_overrides_config_file(self, runner: CliRunner, turtle_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "ttl-mode.yaml"
        config.write_text("indent_width: 3\n", encoding="utf-8")
        result = runner.invoke(
            cli, ["indent", str(turtle_file), "--config", str(config), "-w", "2", "--in-place"]
        )
        assert result.exit_code == 0, result.output
        assert turtle_file.read_text(encoding="utf-8") == _INDENTED

    def test_invalid_config_exits_with_error(self, runner: CliRunner, turtle_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("indent_width: 0\n", encoding="utf-8")
        result = runner.invoke(cli, ["indent", str(turtle_file), "--config", str(config)])
        assert result.exit_code == 1

    def test_invalid_width_flag_exits_with_error(self, runner: CliRunner, turtle_file: Path) -> None:
        result = runner.invoke(cli, ["indent", str(turtle_file), "-w", "0"])
        assert result.exit_code == 1

    def test_missing_file_exits_with_error(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["indent", str(tmp_path / "missing.ttl")])
        assert result.exit_code == 1

    def test_unexpected_extension_still_indents(self, runner: CliRunner, tmp_path: Path, unindented_turtle: str) -> None:
        path = tmp_path / "data.txt"
        path.write_text(unindented_turtle, encoding="utf-8")
        result = runner.invoke(cli, ["indent", str(path), "-w", "2", "--in-place"])
        assert result.exit_code == 0
        assert path.read_text(encoding="utf-8") == _INDENTED

    def test_verbose_flag(self, runner: CliRunner, turtle_file: Path) -> None:
        result = runner.invoke(cli, ["--verbose", "indent", str(turtle_file), "--check"])
        assert result.exit_code == 1


# ===========================================================================
# highlight
# ===========================================================================


class TestHighlightCommand:
    def test_renders_source_text(self, runner: CliRunner, turtle_file: Path) -> None:
        result = runner.invoke(cli, ["highlight", str(turtle_file)])
        assert result.exit_code == 0
        assert "@prefix" in result.output
        assert "ex:q ex:r ." in result.output

    def test_spans_table(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "small.ttl"
        path.write_text("ex:s a ex:T .\n", encoding="utf-8")
        result = runner.invoke(cli, ["highlight", str(path), "--spans"])
        assert result.exit_code == 0
        assert "PREFIXED_NAME" in result.output
        assert "PUNCTUATION" in result.output

    def test_missing_file_exits_with_error(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["highlight", str(tmp_path / "missing.ttl")])
        assert result.exit_code == 1

    def test_non_utf8_file_exits_with_error(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "latin1.ttl"
        path.write_bytes('ex:s ex:label "café" .\n'.encode("latin-1"))
        result = runner.invoke(cli, ["highlight", str(path)])
        assert result.exit_code == 1


# ===========================================================================
# version
# ===========================================================================


class TestVersionCommand:
    def test_reports_version(self, runner: CliRunner, expected_version: str) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert f"v{expected_version}" in result.output

    def test_reports_default_settings(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert ".ttl .n3" in result.output
        assert "(defaults)" in result.output

    def test_reports_settings_from_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "ttl-mode.yaml"
        config.write_text("indent_width: 3\nextensions: [.ttl, .nt]\n", encoding="utf-8")
        result = runner.invoke(cli, ["version", "--config", str(config)])
        assert result.exit_code == 0
        assert ".ttl .nt" in result.output
        width_row = next(line for line in result.output.splitlines() if "Indent width" in line)
        assert width_row.split()[-1] == "3"

    def test_invalid_config_exits_with_error(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("indent_width: 0\n", encoding="utf-8")
        result = runner.invoke(cli, ["version", "--config", str(config)])
        assert result.exit_code == 1
