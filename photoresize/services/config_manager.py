"""Configuration management service."""
import json
from pathlib import Path
from typing import Dict, Iterable, Optional, Union
import logging

from ..base.exceptions import ConfigurationError

class ConfigManager:
    """Manages configuration loading and validation."""

    @staticmethod
    def load_config(config_file: Union[str, Path]) -> Optional[Dict]:
        """Load configuration from JSON file."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logging.error(f"Config error: {e}")
            return None

        if not isinstance(config, dict):
            logging.error(f"Config error: {config_file} must contain a JSON object")
            return None
        return config

    @staticmethod
    def validate_keys(config: Dict, allowed_keys: Iterable[str]) -> Dict:
        """Normalize option names and reject any that aren't known."""
        allowed = set(allowed_keys)
        normalized = {}
        for key, value in config.items():
            name = key.lstrip('-').replace('-', '_')
            if name not in allowed:
                raise ConfigurationError(f"Unknown option in config file: {key}")
            normalized[name] = value
        return normalized
