"""
Exceptions raised by prompter prompts.
"""

from typing import Optional


class PrompterError(Exception):
    """Base class for prompt failures."""


class InputValidationError(PrompterError):
    """Input was rejected by a validator."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.value = value


class UnderlyingInputError(PrompterError):
    """The terminal prompt itself failed (interrupted, closed input, ...)."""
