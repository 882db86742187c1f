"""Planning result data model."""
from dataclasses import dataclass, field
from typing import List

from .file_job import FileJob

@dataclass
class PlanResult:
    """Ordered file jobs, plus whether the user abandoned the batch."""
    jobs: List[FileJob] = field(default_factory=list)
    aborted: bool = False

    @property
    def active_jobs(self) -> List[FileJob]:
        return [job for job in self.jobs if not job.skipped]

    @property
    def skipped_count(self) -> int:
        return sum(1 for job in self.jobs if job.skipped)
