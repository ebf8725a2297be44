"""PatchRule model - a guarded, idempotent text transformation"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Pattern, Union


class PatchApplicationError(Exception):
    """A rule could not be applied to the content it was given.

    Raised when the rule's anchor text is missing, which means the target file
    no longer has the shape the rule assumes. Never retried.
    """

    def __init__(self, rule: str, message: str, path: str = None):
        self.rule = rule
        self.reason = message
        self.path = path
        location = f" in {path}" if path else ""
        super().__init__(f"Patch '{rule}' failed{location}: {message}")


@dataclass(frozen=True)
class PatchRule:
    """A named detect/transform pair.

    ``detect`` returns True iff the patch is already present. ``transform``
    maps content without the patch to content with it, so that
    ``detect(transform(content))`` always holds.
    """

    name: str
    detect: Callable[[str], bool] = field(repr=False)
    transform: Callable[[str], str] = field(repr=False)

    def is_applied(self, content: str) -> bool:
        return bool(self.detect(content))


@dataclass
class PatchResult:
    """Outcome of applying an ordered list of rules to one file's content"""

    content: str
    applied: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    path: str = None

    @property
    def changed(self) -> bool:
        """Check if at least one rule modified the content"""
        return len(self.applied) > 0


Marker = Union[str, Pattern[str]]
Replacement = Union[str, Callable[["re.Match[str]"], str]]


def _marker_detector(marker: Marker) -> Callable[[str], bool]:
    if isinstance(marker, str):
        return lambda content: marker in content
    return lambda content: marker.search(content) is not None


def anchored_rule(
    name: str,
    marker: Marker,
    anchor: Marker,
    replacement: Replacement,
) -> PatchRule:
    """Build a rule that substitutes the first match of an anchor.

    Args:
        name: Rule name used in logs and errors
        marker: Substring or compiled pattern whose presence means "already applied"
        anchor: Substring or compiled pattern locating the insertion point
        replacement: Literal text, or a callable receiving the anchor match

    Returns:
        PatchRule whose transform raises PatchApplicationError when the anchor is absent
    """
    pattern = re.compile(re.escape(anchor)) if isinstance(anchor, str) else anchor
    render = replacement if callable(replacement) else (lambda _match: replacement)

    def _transform(content: str) -> str:
        match = pattern.search(content)
        if match is None:
            raise PatchApplicationError(name, f"anchor not found: {pattern.pattern!r}")
        return content[: match.start()] + render(match) + content[match.end():]

    return PatchRule(name=name, detect=_marker_detector(marker), transform=_transform)
