"""Telephone keypad letters."""

from typing import Tuple


# Letters for each digit on a phone dialpad, indexed by digit.
# 0 and 1 have no letters, so any number containing them has no spellings.
KEYPAD: Tuple[str, ...] = (
    "",      # 0
    "",      # 1
    "abc",   # 2
    "def",   # 3
    "ghi",   # 4
    "jkl",   # 5
    "mno",   # 6
    "pqrs",  # 7
    "tuv",   # 8
    "wxyz",  # 9
)

NUMBER_LENGTH = 7
