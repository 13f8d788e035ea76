"""Blocking terminal prompts: pick one, yes/no, free text."""

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from ..core.exceptions import NoOptionsAvailableError

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})


@dataclass(frozen=True)
class Choice:
    """One selectable option: what the user sees and what the caller gets back."""

    label: str
    value: Any


class Prompter:
    """
    Asks the user questions on stdin/stdout.

    Every call blocks until a valid answer is given; invalid answers are
    asked again. There is no timeout.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        """
        Initialize prompter.

        Args:
            input_func: Reads one line given a prompt (builtin input by default)
            output_func: Writes one line (builtin print by default)
        """
        self._input = input_func
        self._output = output_func

    def choose_one(self, message: str, choices: Sequence[Choice]) -> Any:
        """
        Show a numbered list and return the value of the picked choice.

        Args:
            message: Question to ask
            choices: Options to pick from

        Returns:
            Value of the selected choice

        Raises:
            NoOptionsAvailableError: If choices is empty
        """
        if not choices:
            raise NoOptionsAvailableError(message)

        self._output(f"? {message}")
        for number, choice in enumerate(choices, start=1):
            self._output(f"  {number}) {choice.label}")

        while True:
            answer = self._input(f"Answer (1-{len(choices)}): ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1].value
            self._output(f"Please enter a number between 1 and {len(choices)}")

    def confirm(self, message: str, default: bool = True) -> bool:
        """
        Ask a yes/no question.

        Args:
            message: Question to ask
            default: Answer used when the user just presses enter

        Returns:
            True for yes, False for no
        """
        hint = "Y/n" if default else "y/N"
        while True:
            answer = self._input(f"? {message} ({hint}) ").strip().lower()
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self._output("Please answer yes or no")

    def ask_text(self, message: str) -> str:
        """Ask for free text; empty answers are asked again."""
        while True:
            answer = self._input(f"? {message} ").strip()
            if answer:
                return answer
            self._output("An answer is required")
