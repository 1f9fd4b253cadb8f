# git.py
# Small wrapper around the Git CLI, used to find where the checks run from.

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional


def _git(args: list[str], cwd: Optional[str] = None) -> str:
    """
    Execute a git command and return its stdout as a clean string.

    Raises subprocess.CalledProcessError on a non-zero exit and
    FileNotFoundError if git is not installed.
    """
    out = subprocess.check_output(
        ["git", *args],
        cwd=cwd,
        text=True,
        stderr=subprocess.DEVNULL,
    )
    return out.strip()


def repo_root(cwd: Optional[str] = None) -> Path:
    """Return the absolute path to the root of the enclosing Git work tree."""
    return Path(_git(["rev-parse", "--show-toplevel"], cwd=cwd))


def find_repo_root(cwd: Optional[str] = None) -> Path:
    """
    Like repo_root(), but falls back to the current directory when git is
    missing or we are not inside a work tree.
    """
    try:
        return repo_root(cwd)
    except (subprocess.CalledProcessError, FileNotFoundError):
        return Path(cwd or ".").resolve()
