"""Shared pytest fixtures: a throwaway repo and python stand-ins for tools."""

import sys

import pytest

from repocheck.ui.console import Console, set_console


def py(code: str) -> list[str]:
    """argv that runs a snippet of python, standing in for an external tool."""
    return [sys.executable, "-c", code]


@pytest.fixture(autouse=True)
def fresh_console():
    set_console(Console())
    yield


@pytest.fixture
def repo(tmp_path, monkeypatch):
    """A repo root with the usual subdirectories; cwd starts at the root."""
    (tmp_path / "compile-assets").mkdir()
    (tmp_path / "assets").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def log(repo):
    """File that stand-in tools append to, one line per invocation."""
    path = repo / "calls.log"
    path.write_text("")
    return path


def record(log_path, line: str, exit_code: int = 0) -> list[str]:
    """Stand-in tool: append `line` to the log, then exit with `exit_code`."""
    return py(
        f"import sys\n"
        f"with open({str(log_path)!r}, 'a') as f:\n"
        f"    f.write({line!r} + '\\n')\n"
        f"sys.exit({exit_code})\n"
    )


def record_cwd(log_path) -> list[str]:
    """Stand-in tool: append its working directory to the log."""
    return py(
        f"import os\n"
        f"with open({str(log_path)!r}, 'a') as f:\n"
        f"    f.write(os.getcwd() + '\\n')\n"
    )


def lines(log_path) -> list[str]:
    return log_path.read_text().splitlines()
