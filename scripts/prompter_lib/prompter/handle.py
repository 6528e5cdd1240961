"""
Prompter handle.

A Prompter issues typed prompts through a backend and retries failed
attempts. The retry counter belongs to the handle and is shared by every
call made through it: a success resets it, each failure increments it, and
a call gives up once it exceeds MAX_RETRIES. Giving up does not reset the
counter, so the next call starts from where the last one stopped.
"""

from typing import Callable, Optional, Sequence, TypeVar

from prompter_lib.common.colors import warn, error
from prompter_lib.config.constants import MAX_RETRIES, YES_NO_ITEMS

from .errors import InputValidationError, PrompterError
from .labels import format_label
from .options import PrompterOptions, merge_options
from .validation import Validator, text_validator, validate_url

T = TypeVar("T")

NO_RETRIES = PrompterOptions(handle_retries=False)


class Prompter:
    """Typed prompts sharing one retry counter."""

    def __init__(self, backend=None, options: Optional[PrompterOptions] = None):
        if backend is None:
            from prompter_lib.common.prompts import ToolkitBackend
            backend = ToolkitBackend()
        self.backend = backend
        self.options = options
        self.retry_count = 0

    def effective_options(self, options: Optional[PrompterOptions] = None) -> PrompterOptions:
        """Defaults, overridden by handle options, overridden by call options."""
        return merge_options(self.options, options)

    def reset_retries(self) -> None:
        self.retry_count = 0

    def handle_retry(self, err: Optional[Exception], options: Optional[PrompterOptions] = None) -> bool:
        """
        Record the outcome of one attempt.

        Args:
            err: The error the attempt failed with, or None on success
            options: Call options; retries are skipped when handle_retries is off

        Returns:
            True if the attempt should be issued again
        """
        if not self.effective_options(options).handle_retries:
            return False
        # Only failures count, so the counter sits at 0 after a success and
        # every call that follows a success gets all MAX_RETRIES retries.
        # The older counter was also bumped on success and read 1 here.
        if err is None:
            self.retry_count = 0
            return False
        self.retry_count += 1
        return self.retry_count <= MAX_RETRIES

    def _run(self, attempt: Callable[[], T], options: Optional[PrompterOptions]) -> T:
        retries = self.effective_options(options).handle_retries
        while True:
            try:
                result = attempt()
            except PrompterError as e:
                if self.handle_retry(e, options):
                    warn(f"{e} (retry {self.retry_count}/{MAX_RETRIES})")
                    continue
                if retries:
                    error(f"Giving up: {e}")
                raise
            self.handle_retry(None, options)
            return result

    def _line(self, label: str, validate: Optional[Validator] = None) -> str:
        value = self.backend.run_line(label, validate)
        if validate:
            message = validate(value)
            if message:
                raise InputValidationError(message, value)
        return value

    def select(
        self,
        label: str,
        items: Sequence[str],
        default: str = "",
        options: Optional[PrompterOptions] = None,
    ) -> tuple[int, str]:
        """
        Ask the user to pick one of items.

        Returns:
            (index, selection) of the chosen item
        """
        items = list(items)
        if not items:
            raise ValueError("select needs at least one option")

        def attempt() -> tuple[int, str]:
            index = self.backend.run_select(format_label(label, default), items, default)
            return index, items[index]

        return self._run(attempt, options)

    def yes_no(
        self,
        label: str,
        default: str = "",
        options: Optional[PrompterOptions] = None,
    ) -> tuple[int, str]:
        """Select between "Yes" (index 0) and "No" (index 1)."""
        return self.select(label, YES_NO_ITEMS, default, options)

    def confirm(
        self,
        label: str,
        default: Optional[bool] = None,
        options: Optional[PrompterOptions] = None,
    ) -> bool:
        """Yes/no question answered as a bool."""
        default_item = "" if default is None else YES_NO_ITEMS[0 if default else 1]
        index, _ = self.yes_no(label, default_item, options)
        return index == 0

    def text(
        self,
        label: str,
        default: str = "",
        options: Optional[PrompterOptions] = None,
    ) -> str:
        """
        Prompt for required text.

        Blank input is rejected unless a default is given, in which case
        the default is returned. Other input is returned unchanged.
        """
        validate = text_validator(default)

        def attempt() -> str:
            value = self._line(format_label(label, default), validate)
            if not value.strip():
                return default
            return value

        return self._run(attempt, options)

    def optional_text(
        self,
        label: str,
        default: str = "",
        options: Optional[PrompterOptions] = None,
    ) -> str:
        """Prompt for text that may be left blank (then default is used)."""
        if not default.strip():
            return self._run(lambda: self._line(label), options)

        def attempt() -> str:
            value = self.optional_text(format_label(label, default), options=NO_RETRIES)
            if not value.strip():
                return default
            return value

        return self._run(attempt, options)

    def url(
        self,
        label: str,
        default: str = "",
        options: Optional[PrompterOptions] = None,
    ) -> str:
        """
        Prompt for an http(s) URL, returned lowercased.

        Empty input is accepted; it yields default when one is given.
        """
        if not default.strip():
            return self._run(lambda: self._line(label, validate_url).lower(), options)

        def attempt() -> str:
            value = self.url(format_label(label, default), options=NO_RETRIES)
            if value == "":
                value = default
            return value.lower()

        return self._run(attempt, options)
