"""Photo discovery in a source directory."""
from pathlib import Path
from typing import Iterable, List
import logging

class PhotoFinder:
    """Finds the photos to resize."""

    @staticmethod
    def matches_extension(file_path: Path, extensions: Iterable[str]) -> bool:
        """Case-insensitive match of a file suffix against enabled extensions."""
        return file_path.suffix.lower() in {ext.lower() for ext in extensions}

    @staticmethod
    def find_photos(source_dir: Path, extensions: Iterable[str]) -> List[Path]:
        """Get regular files directly under source_dir with an enabled extension.

        The search is not recursive. Results are sorted by name.
        """
        logger = logging.getLogger(__name__)
        extensions = [ext.lower() for ext in extensions]

        photos = [
            entry for entry in source_dir.iterdir()
            if entry.is_file() and PhotoFinder.matches_extension(entry, extensions)
        ]
        photos.sort(key=lambda p: p.name)

        if not photos:
            logger.warning(f"No photos found to resize in {source_dir} "
                           f"(looking for {', '.join(extensions)})")
        else:
            logger.debug(f"Found {len(photos)} photos in {source_dir}")

        return photos
