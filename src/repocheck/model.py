# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Step:
    """A single named command inside the check pipeline."""
    name: str
    run: Tuple[str, ...]
    cwd: str | None = None

    # "sh" succeeds on exit 0, "drift" also requires an unchanged artifact
    kind: str = "sh"
    data: Optional[Dict[str, Any]] = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if not self.run:
            raise ValueError(f"step {self.name!r} has an empty command")

    @property
    def cmd(self) -> str:
        """Command line as a single string, for display."""
        return " ".join(self.run)
