#!/usr/bin/env python3
"""
prompter_cli.py - Ask a single question from the shell

Issues one prompt, retrying on bad input, and prints the answer.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from prompter_lib.common import error
from prompter_lib.config import PROMPTER_CONFIG_FILE, get_handle_retries
from prompter_lib.prompter import Prompter, PrompterError, PrompterOptions

KINDS = ["yes-no", "select", "text", "optional-text", "url"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ask a question on the terminal")
    parser.add_argument("kind", choices=KINDS, help="Kind of prompt")
    parser.add_argument("label", help="Question to show")
    parser.add_argument("--default", default="",
                        help="Value used when the answer is left blank")
    parser.add_argument("--option", action="append", default=[], dest="items",
                        help="Option for select (repeatable)")
    parser.add_argument("--no-retries", action="store_const", const=False,
                        dest="handle_retries",
                        help="Fail on the first error instead of asking again")
    parser.add_argument("--config-file", default=None,
                        help=f"Configuration file (default: {PROMPTER_CONFIG_FILE})")
    return parser


def ask(prompter: Prompter, args: argparse.Namespace) -> str:
    """Run the prompt selected by args and return the printable answer."""
    if args.kind == "yes-no":
        _, selection = prompter.yes_no(args.label, args.default)
        return selection
    if args.kind == "select":
        _, selection = prompter.select(args.label, args.items, args.default)
        return selection
    if args.kind == "text":
        return prompter.text(args.label, args.default)
    if args.kind == "optional-text":
        return prompter.optional_text(args.label, args.default)
    return prompter.url(args.label, args.default)


def main(argv: Optional[list[str]] = None, prompter: Optional[Prompter] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.kind == "select" and not args.items:
        parser.error("select needs at least one --option")

    if prompter is None:
        config_file = Path(args.config_file).expanduser() if args.config_file else None
        handle_retries = get_handle_retries(args.handle_retries, config_file)
        prompter = Prompter(options=PrompterOptions(handle_retries=handle_retries))

    try:
        answer = ask(prompter, args)
    except PrompterError as e:
        error(str(e))
        return 1

    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
