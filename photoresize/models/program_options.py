"""Program options data model."""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .naming_policy import NamingPolicy
from .resize_spec import ResizeSpec

JPEG_EXTENSIONS = ('.jpg', '.jpeg')
PNG_EXTENSIONS = ('.png',)

@dataclass
class ProgramOptions:
    """Everything needed to run once the command line has been processed."""
    resize: ResizeSpec = field(default_factory=ResizeSpec)
    naming: NamingPolicy = field(default_factory=NamingPolicy)

    source_dir: Optional[str] = None
    target_dir: Optional[str] = None
    relocation_dir: Optional[str] = None

    process_jpg: bool = True
    process_png: bool = False

    conflict_mode: str = 'skip'
    time_execution: bool = False
    show_progress: bool = True
    verbose: bool = False

    @property
    def extensions(self) -> Tuple[str, ...]:
        """Enabled file extensions, lower case."""
        extensions = ()
        if self.process_jpg:
            extensions += JPEG_EXTENSIONS
        if self.process_png:
            extensions += PNG_EXTENSIONS
        return extensions
