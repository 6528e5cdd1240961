"""
prompter_lib.prompter - Typed prompts with defaults and retries

This package contains:
- handle: Prompter, the prompt facade and its retry policy
- options: PrompterOptions and field-wise merging
- labels: Label formatting with default values
- validation: Input validators
- errors: Exception types
"""

from .errors import PrompterError, InputValidationError, UnderlyingInputError
from .options import PrompterOptions, DEFAULT_OPTIONS, merge_options
from .labels import format_label, prompt_message
from .validation import (
    validate_text,
    text_validator,
    validate_url,
    resolve_choice,
    choice_validator,
)
from .handle import Prompter, NO_RETRIES

__all__ = [
    'PrompterError', 'InputValidationError', 'UnderlyingInputError',
    'PrompterOptions', 'DEFAULT_OPTIONS', 'merge_options',
    'format_label', 'prompt_message',
    'validate_text', 'text_validator', 'validate_url', 'resolve_choice', 'choice_validator',
    'Prompter', 'NO_RETRIES',
]
