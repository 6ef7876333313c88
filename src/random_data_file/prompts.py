"""Console prompts used by the interactive session.

Each prompt prints its text without a trailing newline, reads a single line
and trims it. The data-type and element-count prompts raise
:class:`InvalidInputError` when the answer cannot be used.
"""

import re

from rich.console import Console

from .models import MAX_ELEMENT_COUNT, DataType

console = Console(highlight=False, soft_wrap=True, emoji=False)

# Integer width used when parsing the menu choice
_CHOICE_MIN = -(2**31)
_CHOICE_MAX = 2**31 - 1

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

# Both 32-bit widths fit in ten decimal digits
_MAX_DIGITS = 10


def _parse_int(text: str) -> int | None:
    """Convert a signed digit string, or return None if it cannot fit in 32 bits."""
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return None
    return sign * int(digits)


class InvalidInputError(ValueError):
    """The user typed something a prompt cannot accept."""


def read_line(prompt: str) -> str:
    """Print `prompt`, then read one line from the console and trim it."""
    return console.input(prompt, markup=False, emoji=False).strip()


def get_choice() -> int:
    """Prompt for a menu choice.

    Unparseable input is returned as -1 so that it matches no menu entry.
    """
    raw = read_line("Enter your choice: ")
    choice = _parse_int(raw) if _SIGNED_INT.fullmatch(raw) else None
    if choice is None or not _CHOICE_MIN <= choice <= _CHOICE_MAX:
        return -1
    return choice


def get_data_type() -> DataType:
    """Ask for the kind of values to generate."""
    answer = read_line("Enter data type (i for integer, f for float): ").lower()
    if answer[:1] == DataType.INTEGER.value:
        return DataType.INTEGER
    if answer[:1] == DataType.FLOAT.value:
        return DataType.FLOAT
    raise InvalidInputError("Invalid data type")


def get_element_count() -> int:
    """Ask for the number of values to generate."""
    answer = read_line("Enter number of elements: ")
    count = _parse_int(answer) if _UNSIGNED_INT.fullmatch(answer) else None
    if count is None or count > MAX_ELEMENT_COUNT:
        raise InvalidInputError("Invalid number")
    return count


def get_filename() -> str:
    """Ask for the path of the file to write."""
    return read_line("Enter filename: ")
