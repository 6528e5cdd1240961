"""
prompter_lib.common - Shared utilities for prompter tools

This module provides:
- colors: ANSI color codes and status output functions
- prompts: prompt_toolkit backed prompt primitives
"""

from .colors import Colors, warn, error
from .prompts import PromptBackend, ToolkitBackend

__all__ = [
    'Colors', 'warn', 'error',
    'PromptBackend', 'ToolkitBackend',
]
