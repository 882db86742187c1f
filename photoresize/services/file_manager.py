"""Safe file operations for photo output."""
import re
import shutil
from pathlib import Path
import logging

class FileManager:
    """Handles file naming and moves with safety checks."""

    _NOT_ALPHANUMERIC = re.compile(r'[^A-Za-z0-9]')

    @staticmethod
    def make_web_safe_name(name: str) -> str:
        """Replace every character that is not alphanumeric with an underscore."""
        return FileManager._NOT_ALPHANUMERIC.sub('_', name)

    @staticmethod
    def safe_move_file(source_path: Path, destination_dir: Path) -> bool:
        """Move a file into destination_dir, refusing to clobber an existing file."""
        logger = logging.getLogger(__name__)

        try:
            if not source_path.is_file():
                logger.error(f"Source file does not exist: {source_path}")
                return False

            destination_path = destination_dir / source_path.name
            if destination_path.exists():
                logger.error(f"Can't relocate {source_path.name}, "
                             f"{destination_path} already exists")
                return False

            shutil.move(str(source_path), str(destination_path))
            logger.debug(f"Relocated {source_path} to {destination_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to move {source_path} to {destination_dir}: {e}")
            return False
