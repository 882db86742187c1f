"""Custom exceptions for the photo resize tool."""
from pathlib import Path
from typing import Union

class ResizeToolError(Exception):
    """Base exception for photo resize errors."""
    pass

class ValidationError(ResizeToolError):
    """Raised when command line options are invalid."""
    pass

class DirectoryNotFoundError(ValidationError):
    """Raised when a source, target or relocation directory can't be found."""

    def __init__(self, role: str, path: Union[str, Path]):
        self.role = role
        self.path = Path(path)
        super().__init__(f"The {role} directory {path} can't be found!")

class ConfigurationError(ResizeToolError):
    """Raised when configuration is invalid."""
    pass

class PhotoProcessingError(ResizeToolError):
    """Raised when a single photo can't be read, resized or saved."""
    pass

class BatchAborted(ResizeToolError):
    """Raised during planning when the user abandons the batch."""
    pass
