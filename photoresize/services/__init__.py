"""Shared services for photo resizing."""
from .config_manager import ConfigManager
from .directory_manager import DirectoryManager
from .file_manager import FileManager
from .photo_finder import PhotoFinder
from .name_planner import NamePlanner
from .photo_resizer import PhotoResizer
from .conflict_resolvers import (OverwriteResolver, SkipResolver,
                                 AskPerFileResolver, AskOnceResolver)

__all__ = [
    'ConfigManager', 'DirectoryManager', 'FileManager', 'PhotoFinder',
    'NamePlanner', 'PhotoResizer', 'OverwriteResolver', 'SkipResolver',
    'AskPerFileResolver', 'AskOnceResolver'
]
