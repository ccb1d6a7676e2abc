"""
Command line entry point, run against a temp working directory.
"""
from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import pytest
from typer.testing import CliRunner

from licenser.cli import app

runner = CliRunner()


@pytest.fixture
def cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCli:
    """Test exit codes and stdout lines."""

    def test_missing_project_name(self, cwd):
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "usage: licenser <project name>" in result.output
        assert list(cwd.iterdir()) == []

    def test_empty_directory(self, cwd):
        result = runner.invoke(app, ["MyProj"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["Writing LICENSE file", "Writing AUTHORS file"]
        year = datetime.now().year
        license_text = (cwd / "LICENSE").read_text(encoding="utf-8")
        assert f"Copyright © {year} the MyProj Authors" in license_text

    def test_authors_verbatim(self, cwd):
        result = runner.invoke(app, ["Foo", "Alice <a@x.com>", "Bob <b@y.com>"])

        assert result.exit_code == 0, result.output
        assert (cwd / "AUTHORS").read_text(encoding="utf-8") == (
            "Alice <a@x.com>\nBob <b@y.com>\n"
        )

    def test_dash_leading_arguments_taken_verbatim(self, cwd):
        result = runner.invoke(app, ["-proj", "-jr <j@x.com>", "--x=y", "Alice"])

        assert result.exit_code == 0, result.output
        assert (cwd / "AUTHORS").read_text(encoding="utf-8") == "-jr <j@x.com>\n--x=y\nAlice\n"
        license_text = (cwd / "LICENSE").read_text(encoding="utf-8")
        assert license_text.splitlines()[0].endswith(" the -proj Authors")

    def test_stamps_relative_paths(self, cwd):
        (cwd / "src").mkdir()
        (cwd / "src" / "main.go").write_text("package main\n", encoding="utf-8")
        (cwd / "b.txt").write_text("plain\n", encoding="utf-8")

        result = runner.invoke(app, ["MyProj"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "Writing LICENSE file",
            "Writing AUTHORS file",
            str(Path("src") / "main.go"),
        ]

    def test_second_run_skips_everything(self, cwd):
        (cwd / "run.sh").write_text("echo hi\n", encoding="utf-8")
        runner.invoke(app, ["MyProj", "Alice"])

        result = runner.invoke(app, ["MyProj", "Alice"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "LICENSE file exists, skipping",
            "AUTHORS file exists, skipping",
            "run.sh has a copyright, skipping",
        ]

    def test_path_with_brackets_printed_verbatim(self, cwd):
        (cwd / "[red]x.go").write_text("package x\n", encoding="utf-8")

        result = runner.invoke(app, ["MyProj"])

        assert result.exit_code == 0, result.output
        assert "[red]x.go" in result.output.splitlines()

    @pytest.mark.skipif(os.name == "nt", reason="tab in file name")
    def test_tab_in_file_name_printed_verbatim(self, cwd):
        (cwd / "a\tb.go").write_text("package a\n", encoding="utf-8")

        result = runner.invoke(app, ["MyProj"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[-1] == "a\tb.go"

    def test_io_error_aborts_with_message(self, cwd):
        (cwd / "broken.go").symlink_to(cwd / "missing.go")

        result = runner.invoke(app, ["MyProj"])

        assert result.exit_code == 2
        assert "ERROR" in result.output
        assert "broken.go" in result.output
        assert "Traceback" not in result.output
