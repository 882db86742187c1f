"""Naming policy data model."""
from dataclasses import dataclass
from typing import Optional

@dataclass
class NamingPolicy:
    """Governs how an output filename is derived from an input filename."""
    web_safe_rename: bool = False
    postfix: Optional[str] = None
    overwrite: bool = False
