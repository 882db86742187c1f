"""
Photo resize tool.

Batch-resizes the JPEG and PNG photos in a directory and writes the results
to an output directory, optionally renaming them to web safe names.

Architecture:
- base/: Exceptions and the conflict resolver interface
- services/: Directory resolution, photo discovery, name planning, resizing
- models/: Data structures passed between the stages
- factory.py: Factory for conflict resolvers
- photo_batch_processor.py: Runs one batch from options to summary
"""
import logging

# Version info
__version__ = "1.0.0"
__description__ = "Batch photo resizer with web safe renaming"

from .factory import ResolverFactory
from .photo_batch_processor import PhotoBatchProcessor

from .services.directory_manager import DirectoryManager
from .services.photo_finder import PhotoFinder
from .services.name_planner import NamePlanner
from .services.photo_resizer import PhotoResizer

from .base.conflict_resolver import ConflictResolver, ConflictDecision
from .base.exceptions import (ResizeToolError, ValidationError, DirectoryNotFoundError,
                              BatchAborted, ConfigurationError, PhotoProcessingError)

from .models import (FileJob, NamingPolicy, DirectorySet, ResizeSpec,
                     ProgramOptions, PlanResult)

__all__ = [
    # Processing
    'PhotoBatchProcessor',
    'ResolverFactory',

    # Services
    'DirectoryManager',
    'PhotoFinder',
    'NamePlanner',
    'PhotoResizer',

    # Base classes
    'ConflictResolver',
    'ConflictDecision',

    # Exceptions
    'ResizeToolError',
    'ValidationError',
    'DirectoryNotFoundError',
    'BatchAborted',
    'ConfigurationError',
    'PhotoProcessingError',

    # Models
    'FileJob',
    'NamingPolicy',
    'DirectorySet',
    'ResizeSpec',
    'ProgramOptions',
    'PlanResult',
]

# Initialize logging for the package
logging.getLogger(__name__).addHandler(logging.NullHandler())
