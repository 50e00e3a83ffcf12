"""Tests for word list loading, the dictionary index and acceptors."""

import pytest

from src.verifiers import (
    DictionaryLoadFailure,
    WordTrie,
    Match,
    CoverageAcceptor,
    LookupAcceptor,
    build_acceptor,
    load_words,
    load_dictionary,
)


@pytest.fixture
def trie():
    return WordTrie(["cat", "cats", "at", "dog", "call", "box"])


class TestLoadWords:
    """Test reading word lists."""

    def test_bundled_list(self):
        """The bundled list loads and contains common words."""
        words = load_words()
        assert "example" in words
        assert all(w == w.strip().lower() for w in words)

    def test_normalizes_lines(self, tmp_path):
        """Words are stripped and lowercased; blank lines are skipped."""
        path = tmp_path / "words.txt"
        path.write_text("Cat\n\n  dog  \nBOX\n", encoding="utf-8")
        assert load_words(path) == ["cat", "dog", "box"]

    def test_missing_file(self, tmp_path):
        """A missing word list is a load failure."""
        with pytest.raises(DictionaryLoadFailure):
            load_words(tmp_path / "nope.txt")

    def test_not_utf8(self, tmp_path):
        """A word list that is not valid UTF-8 is a load failure."""
        path = tmp_path / "words.bin"
        path.write_bytes(b"cat\n\xff\xfe\xfa\ndog\n")
        with pytest.raises(DictionaryLoadFailure, match="Cannot read word list"):
            load_words(path)

    def test_bundled_short_words(self):
        """The bundled list includes one- and two-letter words."""
        words = set(load_words())
        assert {"a", "i", "an", "at", "go", "up"} <= words

    def test_empty_file(self, tmp_path):
        """A word list without words is a load failure."""
        path = tmp_path / "empty.txt"
        path.write_text("\n  \n", encoding="utf-8")
        with pytest.raises(DictionaryLoadFailure):
            load_words(path)

    def test_load_dictionary(self, tmp_path):
        """load_dictionary indexes the file's words."""
        path = tmp_path / "words.txt"
        path.write_text("call\nbox\nbox\n", encoding="utf-8")
        index = load_dictionary(path)
        assert len(index) == 2
        assert "call" in index


class TestWordTrie:
    """Test exact lookup and overlapping search."""

    def test_contains(self, trie):
        """Only complete words are members."""
        assert "cat" in trie
        assert "cats" in trie
        assert "ca" not in trie
        assert "catsx" not in trie

    def test_has_prefix(self, trie):
        """Prefixes of words are found."""
        assert trie.has_prefix("ca")
        assert trie.has_prefix("")
        assert not trie.has_prefix("cx")

    def test_len_counts_distinct_words(self):
        """Duplicate and empty entries are not counted."""
        assert len(WordTrie(["a", "a", "", "b"])) == 2

    def test_overlapping_includes_nested(self, trie):
        """Words sharing a start and words inside words are all reported."""
        assert trie.find_overlapping("cats") == [
            Match(0, 3, "cat"),
            Match(0, 4, "cats"),
            Match(1, 3, "at"),
        ]

    def test_overlapping_ordered_by_start(self, trie):
        """Matches come out in non-decreasing start order."""
        matches = trie.find_overlapping("catsdog")
        starts = [m.start for m in matches]
        assert starts == sorted(starts)
        assert matches[-1] == Match(4, 7, "dog")

    def test_no_matches(self, trie):
        """A query without dictionary words gives nothing."""
        assert trie.find_overlapping("zzzzzzz") == []


class TestAcceptors:
    """Test the two acceptance strategies."""

    def test_coverage_accepts_tiling(self, trie):
        """Concatenated words are accepted with their matches."""
        matches = CoverageAcceptor(trie).check("callbox")
        assert matches == [Match(0, 4, "call"), Match(4, 7, "box")]

    def test_coverage_rejects_gap(self, trie):
        """An uncovered letter rejects the candidate."""
        assert CoverageAcceptor(trie).check("callxox") is None

    def test_legacy_flag(self):
        """The legacy merge rejects partially overlapping words."""
        trie = WordTrie(["callb", "lbox"])
        assert CoverageAcceptor(trie).check("callbox") is not None
        assert CoverageAcceptor(trie, legacy=True).check("callbox") is None

    def test_lookup_exact_only(self):
        """Lookup mode needs the whole candidate to be one word."""
        acceptor = LookupAcceptor(WordTrie(["callbox", "call", "box"]))
        assert acceptor.check("callbox") == [Match(0, 7, "callbox")]
        assert acceptor.check("callbix") is None

    def test_lookup_ignores_concatenations(self, trie):
        """Two words side by side are not a lookup hit."""
        assert LookupAcceptor(trie).check("callbox") is None

    def test_build_acceptor(self, trie):
        """The mode selects the strategy."""
        assert isinstance(build_acceptor("coverage", trie), CoverageAcceptor)
        assert isinstance(build_acceptor("lookup", trie), LookupAcceptor)
        assert build_acceptor("coverage", trie, legacy=True).legacy is True

    def test_build_acceptor_unknown_mode(self, trie):
        """Unknown modes are rejected."""
        with pytest.raises(ValueError):
            build_acceptor("fuzzy", trie)
