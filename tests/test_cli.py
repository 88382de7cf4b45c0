"""Tests for the ``k-license add`` command (in-process)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from k_license.__main__ import main
from k_license.utils.exit_codes import ExitCode

TEMPLATES = Path(__file__).resolve().parent / "fixtures" / "boilerplate"


@pytest.fixture()
def tree(tmp_path: Path) -> Path:
    (tmp_path / "a.go").write_text("package a\n")
    (tmp_path / "gen").mkdir()
    (tmp_path / "gen" / "g.go").write_text("package gen\n")
    (tmp_path / "vendor").mkdir()
    (tmp_path / "vendor" / "v.go").write_text("package v\n")
    return tmp_path


def _add(root: Path, *extra: str) -> int:
    return main(["add", "--path", str(root), "--templates", str(TEMPLATES), *extra])


class TestAddCommand:
    def test_dry_run_lists_files(self, tree: Path, capsys) -> None:
        rc = _add(tree)
        err = capsys.readouterr().err

        assert rc == ExitCode.SUCCESS
        assert "DRY RUN" in err
        assert '"--confirm"' in err
        assert "2 files will be modified to add License Headers" in err
        assert (tree / "a.go").as_posix() in err
        assert (tree / "a.go").read_text() == "package a\n"

    def test_dry_run_clean_tree(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "notes.txt").write_text("hello\n")
        assert _add(tmp_path) == ExitCode.SUCCESS
        assert "All files have appropriate License Headers" in capsys.readouterr().err

    def test_confirm_modifies(self, tree: Path, capsys) -> None:
        rc = _add(tree, "--confirm", "--year", "2024")

        assert rc == ExitCode.SUCCESS
        assert "Modified 2 files" in capsys.readouterr().err
        assert "Copyright 2024" in (tree / "a.go").read_text()
        assert (tree / "vendor" / "v.go").read_text() == "package v\n"

    def test_exclude_comma_list_and_repeat(self, tree: Path) -> None:
        (tree / "other").mkdir()
        (tree / "other" / "o.go").write_text("package o\n")

        rc = _add(tree, "-e", "gen,vendor", "--exclude", "other", "--confirm")

        assert rc == ExitCode.SUCCESS
        assert (tree / "gen" / "g.go").read_text() == "package gen\n"
        assert (tree / "other" / "o.go").read_text() == "package o\n"
        assert "Copyright" in (tree / "a.go").read_text()

    def test_exclude_replaces_defaults(self, tree: Path, capsys) -> None:
        _add(tree, "-e", "gen")
        err = capsys.readouterr().err
        assert (tree / "vendor" / "v.go").as_posix() in err

    def test_json_output(self, tree: Path, capsys) -> None:
        rc = _add(tree, "--json")
        out = capsys.readouterr().out
        d = json.loads(out)

        assert rc == ExitCode.SUCCESS
        assert d["summary"]["files_to_modify"] == 2
        assert d["excluded_dirs"] == [(tree / "vendor").as_posix()]

    def test_check_fails_when_headers_missing(self, tree: Path) -> None:
        assert _add(tree, "--check") == ExitCode.VIOLATION
        assert (tree / "a.go").read_text() == "package a\n"

    def test_check_passes_after_confirm(self, tree: Path) -> None:
        _add(tree, "--confirm")
        assert _add(tree, "--check") == ExitCode.SUCCESS

    def test_check_and_confirm_are_exclusive(self, tree: Path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            _add(tree, "--check", "--confirm")
        assert excinfo.value.code == 2


class TestErrors:
    def test_missing_template_exits_error(self, tree: Path, capsys) -> None:
        rc = main([
            "add", "--path", str(tree), "--templates", str(tree / "none"), "--confirm",
        ])
        assert rc == ExitCode.ERROR
        assert "error: cannot read template" in capsys.readouterr().err
        assert (tree / "a.go").read_text() == "package a\n"

    def test_missing_path_exits_error(self, tmp_path: Path, capsys) -> None:
        assert _add(tmp_path / "nope") == ExitCode.ERROR
        assert "path does not exist" in capsys.readouterr().err

    def test_no_subcommand(self, capsys) -> None:
        assert main([]) == ExitCode.ERROR
        assert "add" in capsys.readouterr().err
