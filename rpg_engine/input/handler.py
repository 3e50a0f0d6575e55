"""
Console input handling.

Menus are numbered; the player types a number. Parsing never
raises into the game loop: it returns a MenuChoice that either
carries the chosen value or the InvalidInput describing why the
line was rejected, and the caller reprompts.

Usage:
    choice = parse_menu_choice(line, 1, 5)
    if not choice.ok:
        ui.error(str(choice.error))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from rpg_engine.errors import InvalidInput


@dataclass(frozen=True)
class MenuChoice:
    """Result of parsing one menu line."""
    value: Optional[int] = None
    error: Optional[InvalidInput] = None

    @property
    def ok(self) -> bool:
        """Check if the line parsed to a valid choice."""
        return self.error is None and self.value is not None


def parse_menu_choice(raw: str, minimum: int, maximum: int) -> MenuChoice:
    """
    Parse a numbered menu choice.

    Args:
        raw: Line typed by the player
        minimum: Lowest accepted number (inclusive)
        maximum: Highest accepted number (inclusive)

    Returns:
        MenuChoice with either value or error set
    """
    text = raw.strip()
    try:
        value = int(text)
    except ValueError:
        return MenuChoice(error=InvalidInput("Invalid input. Please enter a number."))

    if value < minimum or value > maximum:
        return MenuChoice(
            error=InvalidInput(
                f"Invalid choice! Please select a number from {minimum} to {maximum}."
            )
        )

    return MenuChoice(value=value)


class ConsoleInput:
    """
    Reads menu choices from the console.

    The reader is injectable so tests can script the player's lines.
    """

    def __init__(self, reader: Callable[[str], str] = input):
        self._reader = reader

    def read_line(self, prompt: str = "") -> str:
        """Read one raw line."""
        return self._reader(prompt)

    def read_choice(self, prompt: str, minimum: int, maximum: int) -> MenuChoice:
        """Read and parse a single menu choice."""
        return parse_menu_choice(self.read_line(prompt), minimum, maximum)

    def ask_choice(
        self,
        prompt: str,
        minimum: int,
        maximum: int,
        on_error: Optional[Callable[[InvalidInput], None]] = None,
    ) -> int:
        """
        Read until a valid choice is entered.

        Args:
            prompt: Prompt shown before each read
            minimum: Lowest accepted number
            maximum: Highest accepted number
            on_error: Called with the error for each rejected line

        Returns:
            The chosen number
        """
        while True:
            choice = self.read_choice(prompt, minimum, maximum)
            if choice.ok:
                return choice.value
            if on_error:
                on_error(choice.error)
