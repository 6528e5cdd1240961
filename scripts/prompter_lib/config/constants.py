"""
Constants for prompter configuration.
"""

import os
from pathlib import Path

MAX_RETRIES = 3  # automatic retries after the first failed attempt

DEFAULT_HANDLE_RETRIES = True

PROMPTER_CONFIG_FILE = Path(
    os.environ.get("PROMPTER_CONFIG", "~/.config/prompter/prompter.json")
).expanduser()

YES_NO_ITEMS = ["Yes", "No"]
