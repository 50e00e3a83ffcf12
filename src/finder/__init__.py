"""Phone number mnemonic search."""

from .models import FinderConfig, Mnemonic, QueryResult
from .finder import MnemonicFinder

__all__ = [
    "FinderConfig",
    "Mnemonic",
    "QueryResult",
    "MnemonicFinder",
]
