"""Keypad mapping and candidate generation."""

from .mapping import KEYPAD, NUMBER_LENGTH
from .generator import InvalidInput, validate_digits, parse_digits, letters_for, generate, count_candidates

__all__ = [
    "KEYPAD",
    "NUMBER_LENGTH",
    "InvalidInput",
    "validate_digits",
    "parse_digits",
    "letters_for",
    "generate",
    "count_candidates",
]
