"""Tests for the list-fns command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from nixfns.cli.main import cli

runner = CliRunner()

DOUBLE = """\
{
  # doubles the input
  myFunc = x: x + 1;
}
"""


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the global config at a missing file and clear env overrides."""
    monkeypatch.setattr("nixfns.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "absent.yaml")
    for key in ("NIXFNS__SEARCH__WORKERS", "NIXFNS__SEARCH__FILE_PATTERN", "NIXFNS__LOGGING__LEVEL"):
        monkeypatch.delenv(key, raising=False)


class TestUsage:
    def test_missing_pattern_prints_usage_and_succeeds(self) -> None:
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_version(self) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "list-fns" in result.output
        assert "0.1.0" in result.output


class TestSearchCommand:
    def test_finds_documented_function(self, tmp_path: Path) -> None:
        (tmp_path / "lib.nix").write_text(DOUBLE)

        result = runner.invoke(cli, ["myFunc", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert "doubles the input" in result.output
        assert f"myFunc {tmp_path / 'lib.nix'}:3" in result.output

    def test_invalid_pattern_fails(self, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["(", str(tmp_path)])

        assert result.exit_code == 1
        assert "Invalid pattern" in result.output

    def test_missing_root_rejected(self, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["f", str(tmp_path / "nowhere")])

        assert result.exit_code == 2

    def test_empty_file_pattern_searches_all_nix_files(self, tmp_path: Path) -> None:
        (tmp_path / "pkgs").mkdir()
        (tmp_path / "pkgs" / "default.nix").write_text(DOUBLE)

        result = runner.invoke(cli, ["myFunc", str(tmp_path), "--file-pattern", ""])

        assert result.exit_code == 0, result.output
        assert "myFunc" in result.output

    def test_file_pattern_excludes_files(self, tmp_path: Path) -> None:
        (tmp_path / "default.nix").write_text(DOUBLE)

        result = runner.invoke(cli, ["myFunc", str(tmp_path), "--file-pattern", "zz-no-match"])

        assert result.exit_code == 0
        assert "myFunc" not in result.output

    def test_parse_failure_reported_and_exit_zero(self, tmp_path: Path) -> None:
        (tmp_path / "lib.nix").write_text("{ f = ")

        result = runner.invoke(cli, ["f", str(tmp_path), "-j", "1"])

        assert result.exit_code == 0
        assert "Failure handling" in result.output

    def test_zero_workers_rejected(self, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["f", str(tmp_path), "-j", "0"])

        assert result.exit_code == 2

    def test_config_file_applied(self, tmp_path: Path) -> None:
        (tmp_path / "pkgs").mkdir()
        (tmp_path / "pkgs" / "default.nix").write_text(DOUBLE)
        config = tmp_path / "config.yaml"
        config.write_text("search:\n  file_pattern: ''\noutput:\n  doc_indent: 1\n")

        result = runner.invoke(cli, ["myFunc", str(tmp_path / "pkgs"), "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert "\n doubles the input\n" in "\n" + result.output
