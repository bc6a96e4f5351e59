# Rev 0.2.0
# diyprojects – terminal prompts (Rev 0.2.0)
from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from ..models.entities import two_places
from ..models.errors import InputError

DIFFICULTY_MIN = 1
DIFFICULTY_MAX = 5


def is_valid_difficulty(difficulty: Optional[int]) -> bool:
    """Absent, or an integer between 1 and 5 inclusive."""
    return difficulty is None or DIFFICULTY_MIN <= difficulty <= DIFFICULTY_MAX


def parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise InputError(f"{raw} is not a valid number.") from None


def parse_decimal(raw: Optional[str]) -> Optional[Decimal]:
    """Blank → None; otherwise a scale-2 Decimal. More than two decimal places is rejected."""
    if raw is None:
        return None
    try:
        value = Decimal(raw)
        if not value.is_finite():
            raise InvalidOperation(raw)
        # quantize fails once the scaled value exceeds the context precision
        normalized = two_places(value)
    except InvalidOperation:
        raise InputError(f"{raw} is not a valid decimal number.") from None
    if normalized != value:
        raise InputError(f"{raw} has more than two decimal places.")
    return normalized


class Console:
    """
    Thin wrapper over input()/print() so the session loop can be scripted in tests.
    Blank input is always returned as None.
    """

    def __init__(self, reader: Callable[[str], str] = input, writer: Callable[[str], None] = print):
        self._read = reader
        self._write = writer

    def out(self, text: str = "") -> None:
        self._write(text)

    def get_string(self, prompt: str) -> Optional[str]:
        raw = self._read(prompt + ": ")
        return None if not raw or raw.isspace() else raw.strip()

    def get_int(self, prompt: str) -> Optional[int]:
        return parse_int(self.get_string(prompt))

    def get_decimal(self, prompt: str) -> Optional[Decimal]:
        return parse_decimal(self.get_string(prompt))

    def get_difficulty(self, current: Optional[int] = None, *, show_current: bool = False) -> Optional[int]:
        """Re-prompts until the value is blank or within 1-5."""
        prompt = "Enter a difficulty from 1-5 (1 is easier, 5 is harder)"
        if show_current:
            prompt += f" [{current}]"
        difficulty = self.get_int("\n" + prompt)
        while not is_valid_difficulty(difficulty):
            self.out("\nPlease enter a valid integer between 1 and 5 inclusive.")
            difficulty = self.get_int("\n" + prompt)
        return difficulty

    def confirm(self, prompt: str) -> bool:
        answer = self.get_string(prompt + " (y/n)")
        return answer is not None and answer.lower() == "y"
