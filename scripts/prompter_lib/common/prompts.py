"""
Interactive prompt primitives.

Provides the terminal backend used by Prompter: one line of free text,
or one choice from a numbered list. Both are built on prompt_toolkit;
the option list is rendered with rich.
"""

from typing import Any, Optional, Protocol, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.validation import ValidationError, Validator
from rich.console import Console
from rich.text import Text

from prompter_lib.prompter.errors import UnderlyingInputError
from prompter_lib.prompter.labels import prompt_message
from prompter_lib.prompter.validation import (
    Validator as ValidateFunc,
    choice_validator,
    resolve_choice,
)


class PromptBackend(Protocol):
    """Underlying prompt primitive used by Prompter."""

    def run_line(self, label: str, validate: Optional[ValidateFunc] = None) -> str:
        """Read one line of text; raises PrompterError on failure."""
        ...

    def run_select(self, label: str, items: Sequence[str], default: str = "") -> int:
        """Let the user pick one item; returns its index."""
        ...


class MessageValidator(Validator):
    """Adapts a message-returning validator to prompt_toolkit."""

    def __init__(self, func: ValidateFunc):
        self.func = func

    def validate(self, document) -> None:
        message = self.func(document.text)
        if message:
            raise ValidationError(cursor_position=len(document.text), message=message)


class ToolkitBackend:
    """prompt_toolkit backed prompts. Invalid input is refused on submit."""

    def __init__(self, input: Any = None, output: Any = None, console: Optional[Console] = None):
        self.input = input
        self.output = output
        self.console = console or Console()

    def _read(self, message: str, validate: Optional[ValidateFunc] = None, completer=None) -> str:
        session = PromptSession(
            message,
            validator=MessageValidator(validate) if validate else None,
            validate_while_typing=False,
            completer=completer,
            input=self.input,
            output=self.output,
        )
        try:
            return session.prompt()
        except KeyboardInterrupt as e:
            raise UnderlyingInputError("input interrupted") from e
        except EOFError as e:
            raise UnderlyingInputError("input closed") from e

    def run_line(self, label: str, validate: Optional[ValidateFunc] = None) -> str:
        """
        Prompt for a single line of text.

        Args:
            label: Prompt text to display
            validate: Optional validator, checked when the user presses Enter

        Returns:
            Raw user input (not stripped)
        """
        return self._read(prompt_message(label), validate)

    def run_select(self, label: str, items: Sequence[str], default: str = "") -> int:
        """
        Show a numbered list and prompt for a choice.

        The answer may be the item number or the item itself. A blank
        answer picks default when it names an item.

        Args:
            label: Question to display above the list
            items: Options to choose from
            default: Option picked on blank input

        Returns:
            Index of the chosen item
        """
        self.console.print(Text(label, style="bold"))
        for i, item in enumerate(items, 1):
            self.console.print(Text(f"  {i}. {item}"))

        answer = self._read(
            prompt_message("Choice"),
            choice_validator(items, default),
            completer=WordCompleter(list(items), ignore_case=True),
        )
        return resolve_choice(answer, items, default)
