"""
Configuration loading for prompter.

Settings resolve from command-line arguments, then the environment, then
the JSON config file, then built-in defaults.
"""

import json
import os
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_HANDLE_RETRIES, PROMPTER_CONFIG_FILE

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def load_prompter_config(config_file: Optional[Path] = None) -> dict:
    """Load prompter settings from the config file."""
    config_file = config_file or PROMPTER_CONFIG_FILE
    if config_file.exists():
        try:
            with open(config_file) as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError):
            return {}
        if isinstance(data, dict):
            return data
    return {}


def parse_bool(value: str) -> Optional[bool]:
    """Parse an on/off style string, None if it is neither."""
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None


def get_handle_retries(arg_value: Optional[bool] = None, config_file: Optional[Path] = None) -> bool:
    """Get the handle_retries setting from args, env, config, or default."""
    if arg_value is not None:
        return arg_value
    env_value = parse_bool(os.environ.get("PROMPTER_HANDLE_RETRIES", ""))
    if env_value is not None:
        return env_value
    config = load_prompter_config(config_file)
    section = config.get("prompter")
    if not isinstance(section, dict):
        return DEFAULT_HANDLE_RETRIES
    value = section.get("handle_retries")
    if isinstance(value, bool):
        return value
    return DEFAULT_HANDLE_RETRIES
