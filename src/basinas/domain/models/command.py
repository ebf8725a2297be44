"""Command models - an external tool invocation and its outcome"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class CommandInvocation:
    """A named external program with its argument vector.

    Standard I/O is always inherited from the parent process so that the
    program's own prompts and progress output stay visible.
    """

    command: str
    args: Tuple[str, ...] = ()
    cwd: Optional[Path] = None
    env: Optional[Dict[str, str]] = None

    @property
    def argv(self) -> list:
        return [self.command, *self.args]

    def display(self) -> str:
        """Render the invocation for log messages"""
        return " ".join(self.argv)


@dataclass
class CommandOutcome:
    """Result of running an invocation under a retry policy"""

    invocation: CommandInvocation
    attempts: int = 0
    last_error: Optional[BaseException] = field(default=None, repr=False)

    @property
    def succeeded(self) -> bool:
        return self.last_error is None

    def raise_for_failure(self) -> None:
        """Re-raise the error from the final attempt, unmodified"""
        if self.last_error is not None:
            raise self.last_error
