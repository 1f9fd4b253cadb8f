# src/repocheck/dsl.py
from __future__ import annotations

import shlex
from typing import Any, Callable, Iterable, List, Sequence, Union

from .model import Step

Command = Union[str, Sequence[str]]


def _argv(cmd: Command) -> tuple[str, ...]:
    # strings are split like a shell would, but never run through one
    if isinstance(cmd, str):
        return tuple(shlex.split(cmd))
    return tuple(cmd)


# ---------------------------------------------------------------------
# Step helpers
# ---------------------------------------------------------------------

def sh(name: str, cmd: Command, *, cwd: str | None = None) -> Step:
    """Create a plain command step."""
    return Step(name=name, run=_argv(cmd), cwd=cwd)


def drift(name: str, cmd: Command, *, artifact: str, cwd: str | None = None) -> Step:
    """
    Create a drift-check step.

    `cmd` regenerates `artifact` (a path relative to the repo root). The step
    fails if the file differs from what was there before the command ran.
    """
    return Step(
        name=name,
        run=_argv(cmd),
        cwd=cwd,
        kind="drift",
        data={"artifact": artifact},
    )


# ---------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------

class Matrix:
    """
    Minimal matrix expander.

    Example:
        matrix("features", [[], ["--no-default-features"]]).steps(
            lambda v: sh(f"Run tests {v}", ["cargo", "test", *v])
        )
    """
    def __init__(self, key: str, values: Iterable[Any]):
        self.key = key
        self.values = list(values)

    def steps(self, builder: Callable[[Any], Step]) -> List[Step]:
        return [builder(v) for v in self.values]


def matrix(key: str, values: Iterable[Any]) -> Matrix:
    return Matrix(key, values)


# ---------------------------------------------------------------------
# Pipeline helper
# ---------------------------------------------------------------------

def pipeline(*items: Union[Step, Iterable[Step]]) -> List[Step]:
    """
    Flatten steps (and lists of steps, e.g. from a matrix) into one ordered
    pipeline.

        pipeline(
            sh("Check formatting", "cargo fmt -- --check"),
            matrix("features", [...]).steps(...),
        )
    """
    steps: List[Step] = []
    for item in items:
        if isinstance(item, Step):
            steps.append(item)
        else:
            steps.extend(item)

    if not steps:
        raise ValueError("pipeline must have at least one step")

    seen: set[str] = set()
    for s in steps:
        if s.name in seen:
            raise ValueError(f"Duplicate step name: {s.name}")
        seen.add(s.name)

    return steps
