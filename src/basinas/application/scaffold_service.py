"""Service that executes a scaffold plan"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from basinas.application.scaffold_plan import find_step
from basinas.domain.models.patch_rule import PatchApplicationError, PatchResult
from basinas.domain.models.report import ScaffoldReport
from basinas.domain.models.step import (
    CommandStep,
    PatchFileStep,
    RelocateStep,
    Step,
    WriteFileStep,
)
from basinas.infrastructure.filesystem import move_into_group, write_file_with_dirs
from basinas.infrastructure.process_executor import ProcessRetryExecutor
from basinas.infrastructure.text_patcher import IdempotentTextPatcher

logger = logging.getLogger(__name__)


class ScaffoldService:
    """Runs scaffold steps sequentially against one project directory.

    The working directory is passed explicitly to every command and file
    operation; the process-wide current directory is never changed.
    """

    def __init__(
        self,
        project_name: str,
        parent_dir: Path,
        executor: Optional[ProcessRetryExecutor] = None,
        patcher: Optional[IdempotentTextPatcher] = None,
    ):
        """Initialize scaffold service

        Args:
            project_name: Name of the project (and its directory)
            parent_dir: Directory in which the project directory is created
            executor: Process executor (uses default retry policy if None)
            patcher: Text patcher (creates default if None)
        """
        self.project_name = project_name
        self.parent_dir = Path(parent_dir)
        self.executor = executor or ProcessRetryExecutor()
        self.patcher = patcher or IdempotentTextPatcher()

    @property
    def project_dir(self) -> Path:
        return self.parent_dir / self.project_name

    def run(self, plan: List[Step]) -> ScaffoldReport:
        """Execute every step of the plan in order.

        The first failing step aborts the run; its error propagates unchanged.

        Args:
            plan: Ordered scaffold steps

        Returns:
            ScaffoldReport describing what was done
        """
        report = ScaffoldReport(project_name=self.project_name)
        total = len(plan)
        for index, step in enumerate(plan, 1):
            logger.info(f"[{index}/{total}] {step.label}")
            self._run_step(step, report)
        logger.info(f"Scaffold of {self.project_name} completed: {total} steps")
        return report

    def run_step(self, plan: List[Step], label: str) -> ScaffoldReport:
        """Execute a single step of the plan, looked up by label

        Raises:
            ValueError: If the label is not part of the plan
        """
        step = find_step(plan, label)
        return self.run([step])

    def _run_step(self, step: Step, report: ScaffoldReport) -> None:
        if isinstance(step, CommandStep):
            self._run_command(step, report)
        elif isinstance(step, WriteFileStep):
            write_file_with_dirs(self.project_dir / step.path, step.content)
            report.files_written.append(step.path)
        elif isinstance(step, PatchFileStep):
            report.patches.append(self._run_patch(step))
        elif isinstance(step, RelocateStep):
            moved = move_into_group(self.project_dir / step.parent, step.group, step.names)
            report.moved.extend(f"{step.parent}/{name}" for name in moved)
        else:
            raise TypeError(f"Unsupported step type: {type(step).__name__}")
        report.steps_run.append(step.label)

    def _run_command(self, step: CommandStep, report: ScaffoldReport) -> None:
        cwd = self.project_dir if step.in_project else self.parent_dir
        outcome = self.executor.execute(replace(step.invocation, cwd=cwd))
        report.command_attempts += outcome.attempts
        outcome.raise_for_failure()

    def _run_patch(self, step: PatchFileStep) -> PatchResult:
        for relative in step.paths:
            candidate = self.project_dir / relative
            if candidate.is_file():
                return self.patcher.patch_file(candidate, step.rules)
        rule = step.rules[0].name if step.rules else step.label
        raise PatchApplicationError(
            rule, "target file not found", path=str(self.project_dir / step.paths[0])
        )
