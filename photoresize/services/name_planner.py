"""Output name planning for photo resizing."""
from pathlib import Path
from typing import Iterable, Optional
import logging

from ..base.conflict_resolver import ConflictResolver, ConflictDecision
from ..base.exceptions import BatchAborted
from ..models.file_job import FileJob
from ..models.naming_policy import NamingPolicy
from ..models.plan_result import PlanResult
from .conflict_resolvers import OverwriteResolver, SkipResolver
from .file_manager import FileManager

class NamePlanner:
    """Derives output paths for input photos under a naming policy."""

    def __init__(self, policy: NamingPolicy, resolver: Optional[ConflictResolver] = None):
        self.policy = policy
        if resolver is None:
            resolver = OverwriteResolver() if policy.overwrite else SkipResolver()
        self.resolver = resolver
        self.logger = logging.getLogger(__name__)

    def make_output_name(self, input_file: Path) -> str:
        """Build ``<stem>[.<postfix>]<ext>`` for an input photo."""
        stem = input_file.stem
        if self.policy.web_safe_rename:
            stem = FileManager.make_web_safe_name(stem)
        if self.policy.postfix:
            stem = f"{stem}.{self.policy.postfix}"
        return stem + input_file.suffix

    def make_output_path(self, input_file: Path, target_dir: Path) -> Optional[Path]:
        """Return the output path, or None when the input should be skipped.

        Raises BatchAborted when the conflict resolver decides to abort.
        """
        target_file = target_dir / self.make_output_name(input_file)

        if target_file.exists():
            decision = self.resolver.resolve(target_file)
            if decision is ConflictDecision.ABORT:
                raise BatchAborted(str(target_file))
            if decision is ConflictDecision.SKIP:
                return None

        self.logger.debug(f"Planned {input_file.name} -> {target_file}")
        return target_file

    def plan_jobs(self, input_files: Iterable[Path], target_dir: Path) -> PlanResult:
        """Plan one FileJob per input, in input order.

        Skipped inputs stay in the list with no output path. An abort
        discards every job planned so far.
        """
        result = PlanResult()

        for input_file in input_files:
            try:
                output_path = self.make_output_path(input_file, target_dir)
            except BatchAborted:
                return PlanResult(jobs=[], aborted=True)
            result.jobs.append(FileJob(input_path=input_file, output_path=output_path))

        return result
