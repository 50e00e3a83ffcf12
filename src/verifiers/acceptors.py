"""
Strategies deciding whether a candidate spelling is a mnemonic.

Both strategies expose `check(candidate)`, returning the supporting matches
for an accepted candidate and None otherwise.
"""

from typing import List, Literal, Optional, Union

from .models import Match
from .coverage import is_fully_covered
from .data import WordTrie
from ..keypad.mapping import NUMBER_LENGTH


Mode = Literal["coverage", "lookup"]


class CoverageAcceptor:
    """Accepts candidates whose every letter lies inside some dictionary word."""

    def __init__(self, trie: WordTrie, length: int = NUMBER_LENGTH, legacy: bool = False):
        self.trie = trie
        self.length = length
        self.legacy = legacy

    def check(self, candidate: str) -> Optional[List[Match]]:
        matches = self.trie.find_overlapping(candidate)
        if matches and is_fully_covered(matches, self.length, legacy=self.legacy):
            return matches
        return None


class LookupAcceptor:
    """Accepts candidates that are a single dictionary word."""

    def __init__(self, trie: WordTrie):
        self.trie = trie

    def check(self, candidate: str) -> Optional[List[Match]]:
        if candidate in self.trie:
            return [Match(0, len(candidate), candidate)]
        return None


def build_acceptor(
    mode: Mode,
    trie: WordTrie,
    legacy: bool = False
) -> Union[CoverageAcceptor, LookupAcceptor]:
    """Create the acceptor for a matching mode."""
    if mode == "coverage":
        return CoverageAcceptor(trie, legacy=legacy)
    if mode == "lookup":
        return LookupAcceptor(trie)
    raise ValueError(f"Unknown mode: '{mode}'")
