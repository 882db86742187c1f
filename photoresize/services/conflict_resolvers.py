"""Conflict resolution strategies for output files that already exist."""
import sys
from pathlib import Path
from typing import Callable, Optional

from ..base.conflict_resolver import ConflictResolver, ConflictDecision

PromptFunc = Callable[[str], str]

def _stderr_prompt(question: str) -> str:
    """Ask on stderr and read the answer from stdin."""
    sys.stderr.write(question)
    sys.stderr.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line

class OverwriteResolver(ConflictResolver):
    """Always replace existing output files."""

    def resolve(self, existing_path: Path) -> ConflictDecision:
        self.logger.debug(f"Replacing existing photo: {existing_path}")
        return ConflictDecision.REPLACE

class SkipResolver(ConflictResolver):
    """Never replace existing output files."""

    def resolve(self, existing_path: Path) -> ConflictDecision:
        self.logger.warning(f"Skipping {existing_path.name}: {existing_path} already exists "
                            f"(use --overwrite to replace it)")
        return ConflictDecision.SKIP

class InteractiveResolver(ConflictResolver):
    """Base for resolvers that ask the user."""

    def __init__(self, prompt: Optional[PromptFunc] = None):
        super().__init__()
        self.prompt = prompt or _stderr_prompt

    def ask_yes_no(self, question: str, default: bool = False) -> bool:
        """Ask until the answer is y or n. End of input gives the default."""
        while True:
            try:
                answer = self.prompt(f"{question}\n(y | n)>> ")
            except EOFError:
                self.logger.debug("No answer available, using default")
                return default

            answer = answer.strip().lower()
            if answer in ('y', 'yes'):
                return True
            if answer in ('n', 'no'):
                return False

class AskPerFileResolver(InteractiveResolver):
    """Ask about every existing file; a "no" offers to abort the batch."""

    def resolve(self, existing_path: Path) -> ConflictDecision:
        if self.ask_yes_no(f"Do you want to replace the photo: {existing_path}?"):
            return ConflictDecision.REPLACE

        if self.ask_yes_no("Do you want to quit?"):
            self.logger.info("Batch abandoned by user")
            return ConflictDecision.ABORT

        self.logger.info(f"Keeping existing photo: {existing_path}")
        return ConflictDecision.SKIP

class AskOnceResolver(InteractiveResolver):
    """Ask at the first existing file and apply that answer to the rest."""

    def __init__(self, prompt: Optional[PromptFunc] = None):
        super().__init__(prompt)
        self.decision: Optional[ConflictDecision] = None

    def resolve(self, existing_path: Path) -> ConflictDecision:
        if self.decision is None:
            replace = self.ask_yes_no(
                f"The photo {existing_path} already exists. "
                f"Replace it and every other existing photo?")
            self.decision = ConflictDecision.REPLACE if replace else ConflictDecision.SKIP

        if self.decision is ConflictDecision.SKIP:
            self.logger.warning(f"Skipping {existing_path.name}: {existing_path} already exists")
        return self.decision
