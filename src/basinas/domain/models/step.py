"""Scaffold step models - the orchestrator as a flat list of labelled steps"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from basinas.domain.models.command import CommandInvocation
from basinas.domain.models.patch_rule import PatchRule


@dataclass(frozen=True)
class CommandStep:
    """Run an external tool under the retry policy.

    When ``in_project`` is True the command runs inside the project directory,
    otherwise in its parent (used by the framework scaffolder, which creates
    the project directory itself).
    """

    label: str
    invocation: CommandInvocation
    in_project: bool = True


@dataclass(frozen=True)
class WriteFileStep:
    """Write a template file, creating parent directories first"""

    label: str
    path: str  # Relative to the project root
    content: str


@dataclass(frozen=True)
class PatchFileStep:
    """Apply patch rules to the first existing path of ``paths``"""

    label: str
    paths: Tuple[str, ...]
    rules: Tuple[PatchRule, ...]


@dataclass(frozen=True)
class RelocateStep:
    """Move entries of a directory into a route group subdirectory"""

    label: str
    parent: str  # e.g. "app"
    group: str  # e.g. "(main)"
    names: Tuple[str, ...]


Step = Union[CommandStep, WriteFileStep, PatchFileStep, RelocateStep]
