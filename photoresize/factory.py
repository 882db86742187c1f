"""Factory for creating conflict resolvers."""
from typing import Dict, Optional, Type

from .base.conflict_resolver import ConflictResolver
from .base.exceptions import ConfigurationError
from .services.conflict_resolvers import (OverwriteResolver, SkipResolver,
                                          AskPerFileResolver, AskOnceResolver,
                                          InteractiveResolver, PromptFunc)

class ResolverFactory:
    """Factory for creating conflict resolvers by mode name."""

    _resolvers: Dict[str, Type[ConflictResolver]] = {
        'skip': SkipResolver,
        'overwrite': OverwriteResolver,
        'ask': AskPerFileResolver,
        'ask-once': AskOnceResolver,
    }

    @classmethod
    def create_resolver(cls, mode: str, prompt: Optional[PromptFunc] = None) -> ConflictResolver:
        """Create a resolver for the given conflict mode."""
        if mode not in cls._resolvers:
            raise ConfigurationError(f"Unknown conflict mode: {mode}")

        resolver_class = cls._resolvers[mode]
        if issubclass(resolver_class, InteractiveResolver):
            return resolver_class(prompt)
        return resolver_class()

    @classmethod
    def get_available_modes(cls) -> list:
        """Get list of available conflict mode names."""
        return list(cls._resolvers.keys())
