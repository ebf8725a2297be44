"""ScaffoldReport model - what a scaffold run did"""

from dataclasses import dataclass, field
from typing import List

from basinas.domain.models.patch_rule import PatchResult


@dataclass
class ScaffoldReport:
    """Summary of a scaffold run"""

    project_name: str
    steps_run: List[str] = field(default_factory=list)
    files_written: List[str] = field(default_factory=list)
    patches: List[PatchResult] = field(default_factory=list)
    moved: List[str] = field(default_factory=list)
    command_attempts: int = 0

    @property
    def rules_applied(self) -> int:
        return sum(len(p.applied) for p in self.patches)

    @property
    def rules_skipped(self) -> int:
        return sum(len(p.skipped) for p in self.patches)
