"""File job data model."""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

@dataclass
class FileJob:
    """One planned resize: an input photo and where the result goes.

    ``output_path`` of None means the job is skipped, either because the user
    declined to replace an existing file or because overwriting is disallowed.
    """
    input_path: Path
    output_path: Optional[Path] = None

    @property
    def skipped(self) -> bool:
        return self.output_path is None
