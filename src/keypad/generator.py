"""Expand a phone number into every keypad spelling."""

import itertools
from math import prod
from typing import List

from .mapping import KEYPAD, NUMBER_LENGTH


_DIGITS = frozenset("0123456789")


class InvalidInput(ValueError):
    """Raised when a line is not a 7-digit phone number."""


def validate_digits(digits: str) -> str:
    """
    Check that `digits` is exactly 7 characters of 0-9, unchanged.

    Raises:
        InvalidInput: On wrong length or any non-digit character
    """
    if len(digits) != NUMBER_LENGTH:
        raise InvalidInput(
            f"Expected {NUMBER_LENGTH} digits, got {len(digits)}: {digits!r}"
        )
    bad = [c for c in digits if c not in _DIGITS]
    if bad:
        raise InvalidInput(f"Non-digit character {bad[0]!r} in {digits!r}")
    return digits


def parse_digits(line: str) -> str:
    """
    Validate a raw input line as a phone number.

    Surrounding whitespace (including the trailing newline) is stripped
    before validating.

    Raises:
        InvalidInput: If the stripped line is not a 7-digit number
    """
    return validate_digits(line.strip())


def letters_for(digits: str) -> List[str]:
    """Letter set for each position of a validated number."""
    return [KEYPAD[int(d)] for d in digits]


def count_candidates(digits: str) -> int:
    """Number of spellings `generate` will produce, without expanding them."""
    return prod(len(letters) for letters in letters_for(validate_digits(digits)))


def generate(digits: str) -> List[str]:
    """
    Every spelling of a phone number, in nested-product order.

    Position 0 varies slowest and position 6 fastest. A number containing
    0 or 1 has an empty letter set at that position and yields no spellings.

    Raises:
        InvalidInput: If `digits` is not a 7-digit number
    """
    letter_sets = letters_for(validate_digits(digits))
    return ["".join(combo) for combo in itertools.product(*letter_sets)]
