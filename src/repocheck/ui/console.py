"""Console output formatting utilities for repocheck."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from ..model import Step


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_step(self, name: str) -> None:
        """Announce a step on stderr, before its tool writes anything."""
        print(f"==> {name}", file=sys.stderr, flush=True)

    def print_diff(self, diff: str) -> None:
        """Print a unified diff (drift check failures)."""
        sys.stderr.write(diff)
        if diff and not diff.endswith("\n"):
            sys.stderr.write("\n")
        sys.stderr.flush()

    def print_hint(self, hint: str) -> None:
        print(f"Hint: {hint}", file=sys.stderr)

    def print_plan(self, steps: Sequence[Step]) -> None:
        """Print the ordered step plan without running anything."""
        for i, step in enumerate(steps, start=1):
            where = step.cwd or "."
            print(f"{i:>2}. {step.name}")
            print(f"    $ {step.cmd}  (in {where})")
            if step.kind == "drift":
                print(f"    checks: {step.data['artifact']}")

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message, file=sys.stderr)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
