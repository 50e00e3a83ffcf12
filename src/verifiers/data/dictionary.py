# Word list loading and a prefix tree supporting both exact lookup and
# overlapping substring search. The tree is built once and only read after.

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..models import Match

END = '$'

WORDLIST_FILE = Path(__file__).parent / "wordlist.txt"


class DictionaryLoadFailure(RuntimeError):
    """Raised when the word list cannot be read or is empty."""


def load_words(path: Optional[str | Path] = None) -> List[str]:
    '''
    Read one word per line, lowercased, skipping blank lines.
    Uses the bundled word list when `path` is None.
    '''
    path = Path(path) if path is not None else WORDLIST_FILE
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadFailure(f"Cannot read word list {path}: {e}") from e

    words = [line.strip().lower() for line in text.splitlines()]
    words = [w for w in words if w]
    if not words:
        raise DictionaryLoadFailure(f"Word list {path} contains no words")
    return words


class WordTrie(object):
    def __init__(self, words: Iterable[str]):
        self.root: Dict = {}
        self.size = 0
        for word in words:
            self.add(word)

    def add(self, word: str) -> None:
        if not word or END in word:
            return
        node = self.root
        for letter in word:
            node = node.setdefault(letter, {})
        if END not in node:
            node[END] = True
            self.size += 1

    def _walk(self, s: str) -> Optional[Dict]:
        node = self.root
        for letter in s:
            node = node.get(letter)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and END in node

    def __len__(self) -> int:
        return self.size

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def find_overlapping(self, query: str) -> List[Match]:
        '''
        Every dictionary word occurring in `query`, overlaps included.
        Ordered by start offset, then end offset.
        '''
        matches: List[Match] = []
        for start in range(len(query)):
            node = self.root
            for end in range(start, len(query)):
                node = node.get(query[end])
                if node is None:
                    break
                if END in node:
                    matches.append(Match(start, end + 1, query[start:end + 1]))
        return matches


def load_dictionary(path: Optional[str | Path] = None) -> WordTrie:
    """Load the word list and index it."""
    return WordTrie(load_words(path))
