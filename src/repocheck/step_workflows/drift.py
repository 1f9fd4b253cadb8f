# step_workflows/drift.py
from __future__ import annotations

import difflib
from pathlib import Path

from ..model import Step
from ..ui.console import get_console


# ---------------------------------------------------------------------
# Artifact helpers
# ---------------------------------------------------------------------

def read_artifact(path: Path) -> bytes:
    """Read a generated file; a file that does not exist yet reads as empty."""
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return b""


def _diff_lines(text: str) -> list[str]:
    lines = text.splitlines(keepends=True)
    # keep the last line terminated so diff output stays one change per line
    if lines and not lines[-1].endswith(("\n", "\r")):
        lines[-1] += "\n\\ No newline at end of file\n"
    return lines


def artifact_diff(before: str, after: str, path: str) -> str:
    """Unified diff of two versions of an artifact ('' if they are equal)."""
    return "".join(
        difflib.unified_diff(
            _diff_lines(before),
            _diff_lines(after),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
        )
    )


# ---------------------------------------------------------------------
# Drift step execution
# ---------------------------------------------------------------------

def run_step(step: Step, repo_root: Path) -> None:
    """
    Regenerate the step's artifact and fail if it changed.

    The regeneration tool exiting 0 is not enough: any byte difference
    between the committed and regenerated file fails the step with status 1.
    """
    # Import here to avoid circular import
    from ..runner import StepFailure, execute

    rel = (step.data or {}).get("artifact")
    if not rel:
        raise ValueError(f"step '{step.name}' has no artifact to check")

    artifact = Path(repo_root) / rel
    before = read_artifact(artifact)

    execute(step)

    after = read_artifact(artifact)
    if before == after:
        return

    diff = artifact_diff(
        before.decode("utf-8", errors="replace"),
        after.decode("utf-8", errors="replace"),
        rel,
    )
    get_console().print_diff(diff or f"{rel}: contents changed\n")
    raise StepFailure(step=step.name, cmd=step.cmd, exit_code=1)
