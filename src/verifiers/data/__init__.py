"""Bundled word list and dictionary index."""

from .dictionary import (
    DictionaryLoadFailure,
    WordTrie,
    load_words,
    load_dictionary,
    WORDLIST_FILE,
)

__all__ = [
    "DictionaryLoadFailure",
    "WordTrie",
    "load_words",
    "load_dictionary",
    "WORDLIST_FILE",
]
