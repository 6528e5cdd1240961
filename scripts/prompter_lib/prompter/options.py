"""
Per-call prompt options.

Options merge field by field: a value that is explicitly set (not None)
replaces whatever came before it.
"""

from dataclasses import dataclass, fields, replace
from typing import Optional

from prompter_lib.config.constants import DEFAULT_HANDLE_RETRIES


@dataclass(frozen=True)
class PrompterOptions:
    """Options accepted by every prompt call."""
    handle_retries: Optional[bool] = None  # None = not supplied


DEFAULT_OPTIONS = PrompterOptions(handle_retries=DEFAULT_HANDLE_RETRIES)


def merge_options(*options: Optional[PrompterOptions]) -> PrompterOptions:
    """Apply each options record over the defaults, last writer wins per field."""
    merged = DEFAULT_OPTIONS
    for option in options:
        if option is None:
            continue
        overrides = {
            f.name: getattr(option, f.name)
            for f in fields(option)
            if getattr(option, f.name) is not None
        }
        merged = replace(merged, **overrides)
    return merged
