"""Base classes and interfaces for the photo resize tool."""
from .conflict_resolver import ConflictResolver, ConflictDecision
from .exceptions import (ResizeToolError, ValidationError, DirectoryNotFoundError, BatchAborted,
                         ConfigurationError, PhotoProcessingError)

__all__ = ['ConflictResolver', 'ConflictDecision', 'ResizeToolError', 'ValidationError',
           'DirectoryNotFoundError', 'BatchAborted', 'ConfigurationError', 'PhotoProcessingError']
