"""Resolved directory data model."""
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class DirectorySet:
    """Absolute source, target and relocation directories for one run."""
    source: Path
    target: Path
    relocation: Path

    @property
    def relocates(self) -> bool:
        """True when processed originals should be moved out of the source."""
        return self.relocation != self.source
