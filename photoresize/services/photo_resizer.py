"""Photo resizing and saving with Pillow."""
from pathlib import Path
from typing import Callable, List, Optional, Tuple
import logging

from PIL import Image
from tqdm import tqdm

from ..base.exceptions import PhotoProcessingError
from ..models.file_job import FileJob
from ..models.resize_spec import ResizeSpec

Size = Tuple[int, int]

class PhotoResizer:
    """Resizes each planned photo and writes it to its output path."""

    JPEG_QUALITY = 95

    @staticmethod
    def _scale_to_width(size: Size, max_width: int) -> Optional[Size]:
        width, height = size
        if width <= max_width:
            return None
        ratio = max_width / width
        return max_width, max(1, int(height * ratio))

    @staticmethod
    def _scale_to_height(size: Size, max_height: int) -> Optional[Size]:
        width, height = size
        if height <= max_height:
            return None
        ratio = max_height / height
        return max(1, int(width * ratio)), max_height

    @staticmethod
    def compute_target_size(size: Size, spec: ResizeSpec) -> Optional[Size]:
        """Work out the new dimensions of a photo, or None to leave it alone.

        Both width and height stretch the photo to exactly that size. A scale
        percentage scales both sides uniformly. A single width or height
        shrinks the photo to fit and keeps its geometry; a photo that already
        fits is not resized.
        """
        width, height = size

        if spec.max_width and spec.max_height:
            return spec.max_width, spec.max_height

        if spec.scale_percent:
            factor = spec.scale_percent / 100.0
            return max(1, int(width * factor)), max(1, int(height * factor))

        if spec.max_width:
            return PhotoResizer._scale_to_width(size, spec.max_width)

        if spec.max_height:
            return PhotoResizer._scale_to_height(size, spec.max_height)

        if spec.maintain_ratio:
            logging.getLogger(__name__).error(
                "Neither width nor height were specified with --maintain-ratio, "
                "can't resize photo!")
        return None

    @staticmethod
    def _save_options(output_path: Path) -> dict:
        if output_path.suffix.lower() in ('.jpg', '.jpeg'):
            return {'quality': PhotoResizer.JPEG_QUALITY, 'optimize': True}
        return {'optimize': True}

    @staticmethod
    def resize_photo(job: FileJob, spec: ResizeSpec) -> Tuple[Size, Size]:
        """Resize one photo and save it. Returns the original and new sizes.

        Raises PhotoProcessingError when the photo can't be read or written.
        """
        logger = logging.getLogger(__name__)

        try:
            with Image.open(job.input_path) as photo:
                photo.load()
                original_size = photo.size
                target_size = PhotoResizer.compute_target_size(original_size, spec)

                if target_size and target_size != original_size:
                    resized = photo.resize(target_size, Image.Resampling.LANCZOS)
                else:
                    logger.debug(f"{job.input_path.name} already fits, saving unchanged size")
                    resized = photo.copy()
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise PhotoProcessingError(f"Could not read photo {job.input_path}: {e}") from e

        new_size = resized.size
        try:
            if spec.display:
                resized.show(title="Resized Photo")
            resized.save(job.output_path, **PhotoResizer._save_options(job.output_path))
        except (OSError, ValueError) as e:
            raise PhotoProcessingError(f"Could not write photo {job.output_path} to file: {e}") from e
        finally:
            resized.close()

        return original_size, new_size

    @staticmethod
    def resize_and_save(job: FileJob, spec: ResizeSpec) -> bool:
        """Resize one job. Returns True if the photo was saved."""
        logger = logging.getLogger(__name__)

        if job.skipped:
            logger.debug(f"Skipping {job.input_path.name}, no output planned")
            return False

        try:
            original_size, new_size = PhotoResizer.resize_photo(job, spec)
        except PhotoProcessingError as e:
            logger.error(str(e))
            return False

        logger.info(f"Resized: {job.input_path.name} from {original_size} to {new_size} "
                    f"-> {job.output_path.name}")
        return True

    @staticmethod
    def resize_all(jobs: List[FileJob], spec: ResizeSpec, show_progress: bool = True,
                   on_saved: Optional[Callable[[FileJob], bool]] = None) -> int:
        """Resize every job that has an output path. Returns the number saved.

        ``on_saved`` runs after each successful save; if it returns False the
        job is not counted.
        """
        resized_count = 0

        with tqdm(total=len(jobs), desc="Resizing photos", unit="photos",
                  disable=not show_progress) as pbar:
            for job in jobs:
                if PhotoResizer.resize_and_save(job, spec):
                    if on_saved is None or on_saved(job):
                        resized_count += 1
                pbar.update(1)

        return resized_count
