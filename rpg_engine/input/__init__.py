"""
Input module - console menu parsing.
"""

from rpg_engine.input.handler import ConsoleInput, MenuChoice, parse_menu_choice

__all__ = [
    "ConsoleInput",
    "MenuChoice",
    "parse_menu_choice",
]
