# runner.py
from __future__ import annotations

import os
import subprocess
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterator, Optional, Sequence

from .model import Step
from .step_workflows import drift
from .ui.console import get_console


TOOL_HINTS = {
    "yarn": "Install Yarn (e.g., corepack enable) or fix PATH.",
    "cargo": "Install the Rust toolchain (https://rustup.rs) or fix PATH.",
    "git": "Install Git or fix PATH.",
}

# shell conventions for "could not run the program at all"
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------

@dataclass
class StepFailure(Exception):
    step: str
    cmd: str
    exit_code: int
    hint: Optional[str] = None

    def __str__(self) -> str:
        return f"step '{self.step}' failed (exit={self.exit_code}): {self.cmd}"


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

@contextmanager
def working_directory(path: str | Path) -> Iterator[Path]:
    """Change the process cwd for the duration of the block, then restore it."""
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)


def exit_status(returncode: int) -> int:
    # subprocess reports death-by-signal as -N; shells report 128+N
    if returncode < 0:
        return 128 - returncode
    return returncode


def execute(step: Step) -> None:
    """
    Run the step's command in the current directory.

    stdin/stdout/stderr are inherited so the tool talks to the terminal
    directly. Raises StepFailure on a non-zero status.
    """
    program = step.run[0]
    try:
        proc = subprocess.run(list(step.run))
    except FileNotFoundError:
        tool = Path(program).name
        raise StepFailure(
            step=step.name,
            cmd=step.cmd,
            exit_code=EXIT_NOT_FOUND,
            hint=TOOL_HINTS.get(tool, f"{program}: command not found"),
        )
    except PermissionError:
        raise StepFailure(
            step=step.name,
            cmd=step.cmd,
            exit_code=EXIT_NOT_EXECUTABLE,
            hint=f"{program}: permission denied",
        )
    except OSError as e:
        # e.g. ENOEXEC (no shebang) or ENOTDIR (a path component is a file)
        raise StepFailure(
            step=step.name,
            cmd=step.cmd,
            exit_code=EXIT_NOT_EXECUTABLE,
            hint=f"{program}: {e.strerror}",
        )

    status = exit_status(proc.returncode)
    if status != 0:
        raise StepFailure(step=step.name, cmd=step.cmd, exit_code=status)


def _run_sh(step: Step, repo_root: Path) -> None:
    execute(step)


_EXECUTORS: Dict[str, Callable[[Step, Path], None]] = {
    "sh": _run_sh,
    "drift": drift.run_step,
}


def run_step(step: Step, repo_root: str | Path) -> None:
    """Run one step inside its working directory. Raises StepFailure."""
    executor = _EXECUTORS.get(step.kind)
    if executor is None:
        raise ValueError(f"step '{step.name}' has unknown kind: {step.kind!r}")

    root = Path(repo_root).resolve()
    cwd = (root / (step.cwd or ".")).resolve()
    if not cwd.is_dir():
        raise StepFailure(
            step=step.name,
            cmd=step.cmd,
            exit_code=1,
            hint=f"working directory not found: {cwd}",
        )

    with working_directory(cwd):
        executor(step, root)


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_pipeline(steps: Sequence[Step], *, repo_root: str | Path = ".") -> int:
    """
    Run steps in order and stop at the first failure.

    Returns 0 if every step succeeded, otherwise the failing step's status.
    """
    console = get_console()
    root = Path(repo_root).resolve()

    for step in steps:
        console.print_step(step.name)
        try:
            run_step(step, root)
        except StepFailure as e:
            if e.hint:
                console.print_hint(e.hint)
            console.print_debug(str(e))
            return e.exit_code

    return 0
