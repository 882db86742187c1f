"""Abstract base class for output file conflict resolution."""
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
import logging

class ConflictDecision(Enum):
    """What to do with an output file that already exists."""
    REPLACE = 'replace'
    SKIP = 'skip'
    ABORT = 'abort'

class ConflictResolver(ABC):
    """Abstract base class that all conflict resolvers must implement."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def resolve(self, existing_path: Path) -> ConflictDecision:
        """Decide what happens to an output path that already exists."""
        pass
