"""Batch photo resize processor: plans file jobs, then resizes them."""
import time
from pathlib import Path
from typing import Optional
import logging

from .base.exceptions import ValidationError
from .factory import ResolverFactory
from .models.directory_set import DirectorySet
from .models.file_job import FileJob
from .models.plan_result import PlanResult
from .models.program_options import ProgramOptions
from .services.conflict_resolvers import PromptFunc
from .services.directory_manager import DirectoryManager
from .services.file_manager import FileManager
from .services.name_planner import NamePlanner
from .services.photo_finder import PhotoFinder
from .services.photo_resizer import PhotoResizer

class PhotoBatchProcessor:
    """Runs one batch: resolve directories, plan jobs, resize, report."""

    def __init__(self, options: ProgramOptions, prompt: Optional[PromptFunc] = None,
                 cwd: Optional[Path] = None):
        self.options = options
        self.prompt = prompt
        self.cwd = cwd
        self.logger = logging.getLogger(__name__)
        self.directories: Optional[DirectorySet] = None

    def resolve_directories(self) -> DirectorySet:
        """Resolve directories; raises DirectoryNotFoundError before any file is touched."""
        self.directories = DirectoryManager.resolve_directories(
            self.options.source_dir, self.options.target_dir,
            self.options.relocation_dir, cwd=self.cwd)
        return self.directories

    def build_file_jobs(self) -> PlanResult:
        """Build the ordered list of input and output file pairs."""
        directories = self.resolve_directories()

        input_photos = PhotoFinder.find_photos(directories.source, self.options.extensions)
        if not input_photos:
            return PlanResult()

        conflict_mode = 'overwrite' if self.options.naming.overwrite else self.options.conflict_mode
        resolver = ResolverFactory.create_resolver(conflict_mode, self.prompt)
        planner = NamePlanner(self.options.naming, resolver)

        result = planner.plan_jobs(input_photos, directories.target)
        if result.aborted:
            self.logger.warning("Resize cancelled, no photos will be processed")
        else:
            self.check_relocation(result)
        return result

    def check_relocation(self, plan: PlanResult) -> None:
        """Reject relocation when a resized photo would take its original's place.

        That happens when the output overwrites the input in place, or when the
        output lands where the original is to be moved.
        """
        if not self.directories.relocates:
            return

        for job in plan.active_jobs:
            moved_to = self.directories.relocation / job.input_path.name
            if job.output_path in (job.input_path, moved_to):
                raise ValidationError(
                    f"Can't relocate {job.input_path.name}: the resized photo {job.output_path} "
                    f"would take the original's place. Use --extend-filename or a "
                    f"different --save-dir or --relocate-dir")

    def _relocate_original(self, job: FileJob) -> bool:
        return FileManager.safe_move_file(job.input_path, self.directories.relocation)

    def resize_jobs(self, plan: PlanResult) -> int:
        """Resize every planned job. Returns the number of photos saved."""
        on_saved = self._relocate_original if self.directories.relocates else None
        return PhotoResizer.resize_all(plan.jobs, self.options.resize,
                                       show_progress=self.options.show_progress,
                                       on_saved=on_saved)

    def run(self) -> bool:
        """Process the batch. Returns False if any attempted photo failed."""
        plan = self.build_file_jobs()
        if not plan.jobs:
            return True

        start = time.perf_counter()
        resized = self.resize_jobs(plan)
        elapsed = time.perf_counter() - start

        attempted = len(plan.active_jobs)
        failed = attempted - resized

        self.logger.info(f"📊 {len(plan.jobs)} found, {resized} resized, "
                         f"{plan.skipped_count} skipped, {failed} failed")
        if self.options.time_execution:
            self.logger.info(f"⏱️ Processing and reporting input files took {elapsed:.3f} seconds")

        if failed:
            self.logger.error("Not all photos were resized")
            return False
        return True
