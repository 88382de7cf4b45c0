"""Exit code contract tests — enforce stable CLI exit semantics.

Code  Meaning
----  -------
  0   Success — run completed, whatever was found
  1   Violation — ``--check`` found files missing a header
  2   Error — usage error, missing path, unreadable template or file
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
TEMPLATES = REPO_ROOT / "tests" / "fixtures" / "boilerplate"


def _run(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = {**os.environ}
    env["PYTHONPATH"] = str(REPO_ROOT / "src") + (
        os.pathsep + env["PYTHONPATH"] if env.get("PYTHONPATH") else ""
    )
    return subprocess.run(
        [sys.executable, "-m", "k_license", *args],
        capture_output=True,
        text=True,
        env=env,
        cwd=cwd,
    )


class TestExitCodes:
    def test_dry_run_with_changes_returns_0(self, tmp_path: Path) -> None:
        (tmp_path / "a.go").write_text("package a\n")
        r = _run("add", "--path", str(tmp_path), "--templates", str(TEMPLATES))
        assert r.returncode == 0, r.stderr
        assert "1 files will be modified" in r.stderr

    def test_check_with_changes_returns_1(self, tmp_path: Path) -> None:
        (tmp_path / "a.go").write_text("package a\n")
        r = _run("add", "--path", str(tmp_path), "--templates", str(TEMPLATES), "--check")
        assert r.returncode == 1

    def test_missing_template_returns_2(self, tmp_path: Path) -> None:
        (tmp_path / "a.go").write_text("package a\n")
        r = _run("add", "--path", str(tmp_path), "--templates", str(tmp_path / "x"), "--confirm")
        assert r.returncode == 2
        assert "error:" in r.stderr

    def test_default_path_is_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "a.py").write_text("x = 1\n")
        r = _run("add", "--templates", str(TEMPLATES), "--confirm", "--year", "2030", cwd=tmp_path)
        assert r.returncode == 0, r.stderr
        assert "Copyright 2030" in (tmp_path / "a.py").read_text()
        assert "Modified a.py" in r.stderr

    def test_unknown_flag_returns_2(self) -> None:
        r = _run("add", "--no-such-flag")
        assert r.returncode == 2
