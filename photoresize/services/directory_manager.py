"""Directory resolution for photo resizing."""
from pathlib import Path
from typing import Optional
import logging

from ..base.exceptions import DirectoryNotFoundError
from ..models.directory_set import DirectorySet

class DirectoryManager:
    """Resolves and validates the source, target and relocation directories."""

    SOURCE_ROLE = 'photo source'
    TARGET_ROLE = 'photo target'
    RELOCATION_ROLE = 'photo relocation'

    @staticmethod
    def find_directory(directory: Optional[str], role: str, default_dir: Path,
                       cwd: Path) -> Path:
        """Resolve one directory argument against the current directory.

        An empty argument falls back to ``default_dir``. A directory that
        doesn't exist raises DirectoryNotFoundError naming its role.
        """
        logger = logging.getLogger(__name__)

        if not directory:
            logger.debug(f"No {role} directory given, using {default_dir}")
            return default_dir

        found_dir = (cwd / Path(directory).expanduser()).resolve()
        if not found_dir.is_dir():
            raise DirectoryNotFoundError(role, directory)

        logger.debug(f"Resolved {role} directory: {found_dir}")
        return found_dir

    @staticmethod
    def resolve_directories(source_dir: Optional[str] = None,
                            target_dir: Optional[str] = None,
                            relocation_dir: Optional[str] = None,
                            cwd: Optional[Path] = None) -> DirectorySet:
        """Resolve all three directories, failing at the first missing one."""
        cwd = Path(cwd) if cwd else Path.cwd()
        cwd = cwd.resolve()

        source = DirectoryManager.find_directory(
            source_dir, DirectoryManager.SOURCE_ROLE, cwd, cwd)
        target = DirectoryManager.find_directory(
            target_dir, DirectoryManager.TARGET_ROLE, source, cwd)
        relocation = DirectoryManager.find_directory(
            relocation_dir, DirectoryManager.RELOCATION_ROLE, source, cwd)

        return DirectorySet(source=source, target=target, relocation=relocation)
