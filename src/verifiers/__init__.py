"""Candidate verification against a dictionary."""

from .models import Match
from .coverage import covered_span, is_fully_covered
from .acceptors import CoverageAcceptor, LookupAcceptor, build_acceptor, Mode
from .data import DictionaryLoadFailure, WordTrie, load_words, load_dictionary

__all__ = [
    # Models
    "Match",
    # Coverage
    "covered_span",
    "is_fully_covered",
    # Strategies
    "CoverageAcceptor",
    "LookupAcceptor",
    "build_acceptor",
    "Mode",
    # Dictionary
    "DictionaryLoadFailure",
    "WordTrie",
    "load_words",
    "load_dictionary",
]
