"""Idempotent text patching of generated files.

Each rule pairs a detector with a transform. A rule whose detector already
matches is skipped, so the file content itself records which patches have
been applied and re-running a patch set is always safe.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from basinas.domain.models.patch_rule import PatchApplicationError, PatchResult, PatchRule
from basinas.infrastructure.filesystem import read_text, write_text_atomic

logger = logging.getLogger(__name__)


class IdempotentTextPatcher:
    """Applies ordered patch rules to content and files"""

    def apply(self, content: str, rules: Iterable[PatchRule]) -> PatchResult:
        """Apply every rule that is not yet present, in order.

        Later rules see the content produced by earlier ones, so a rule may
        depend on text inserted by a preceding rule.

        Args:
            content: Current file content
            rules: Ordered patch rules

        Returns:
            PatchResult with the final content and applied/skipped rule names

        Raises:
            PatchApplicationError: If a rule's anchor is missing, or a rule's
                transform does not make its own detector succeed
        """
        result = PatchResult(content=content)
        for rule in rules:
            if rule.is_applied(result.content):
                logger.debug(f"Patch '{rule.name}' already applied, skipping")
                result.skipped.append(rule.name)
                continue

            new_content = rule.transform(result.content)
            if not rule.is_applied(new_content):
                raise PatchApplicationError(
                    rule.name, "transform did not produce the rule's own marker"
                )
            result.content = new_content
            result.applied.append(rule.name)
            logger.debug(f"Applied patch '{rule.name}'")
        return result

    def patch_file(self, path: Path, rules: Sequence[PatchRule]) -> PatchResult:
        """Patch a file in place, writing only if at least one rule applied.

        Args:
            path: File to patch
            rules: Ordered patch rules

        Returns:
            PatchResult for the file

        Raises:
            PatchApplicationError: If the file is missing or a rule cannot be applied
        """
        path = Path(path)
        if not path.is_file():
            first = rules[0].name if rules else "<none>"
            raise PatchApplicationError(first, "target file not found", path=str(path))

        try:
            result = self.apply(read_text(path), rules)
        except PatchApplicationError as e:
            if e.path is None:
                raise PatchApplicationError(e.rule, e.reason, path=str(path)) from e
            raise
        result.path = str(path)

        if result.changed:
            write_text_atomic(path, result.content)
            logger.info(f"Patched {path}: {', '.join(result.applied)}")
        else:
            logger.info(f"{path} already up to date")
        return result
