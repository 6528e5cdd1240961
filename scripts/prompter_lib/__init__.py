"""
prompter_lib - Interactive prompt helpers for command-line tools

This package wraps prompt_toolkit with typed prompts (yes/no, select, text,
optional text, URL), default values and a bounded retry policy.
"""

__version__ = "1.0.0"
