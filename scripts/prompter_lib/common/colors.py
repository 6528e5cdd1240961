"""
ANSI color codes and status output for prompter tools.
"""


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    YELLOW = "\033[1;33m"
    NC = "\033[0m"  # Reset


def warn(msg: str) -> None:
    """Print a warning in yellow."""
    print(f"{Colors.YELLOW}[!]{Colors.NC} {msg}")


def error(msg: str) -> None:
    """Print an error in red."""
    print(f"{Colors.RED}[ERROR]{Colors.NC} {msg}")
