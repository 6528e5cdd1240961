"""
prompter_lib.config - Configuration for prompter

This package contains:
- constants: Retry bound, default settings and config file location
- settings: Resolution of settings from args, environment and config file
"""

from .constants import (
    MAX_RETRIES,
    DEFAULT_HANDLE_RETRIES,
    PROMPTER_CONFIG_FILE,
    YES_NO_ITEMS,
)
from .settings import load_prompter_config, get_handle_retries, parse_bool

__all__ = [
    'MAX_RETRIES', 'DEFAULT_HANDLE_RETRIES', 'PROMPTER_CONFIG_FILE', 'YES_NO_ITEMS',
    'load_prompter_config', 'get_handle_retries', 'parse_bool',
]
