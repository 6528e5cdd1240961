"""
Label formatting for prompts.
"""


def format_label(label: str, default_value: str = "") -> str:
    """Append the default value to a label, unless the default is blank."""
    if not default_value or not default_value.strip():
        return label
    return f"{label} (default: {default_value})"


def prompt_message(label: str) -> str:
    """Text shown in front of the input cursor."""
    return f"{label}: "
