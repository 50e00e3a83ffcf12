import sys
from typing import Any, Callable, Iterable, List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

from .models import FinderConfig, Mnemonic, QueryResult
from ..keypad.generator import InvalidInput, parse_digits, generate
from ..verifiers.acceptors import CoverageAcceptor, LookupAcceptor, build_acceptor
from ..verifiers.data import WordTrie, load_words


class MnemonicFinder(BaseModel):
    """
    Finds dictionary spellings of phone numbers.

    Holds the dictionary index and the acceptance strategy, both built once
    in `create` and only read while processing lines.

    Attributes:
        config: Run configuration
        trie: Dictionary index
        acceptor: Strategy deciding which candidates are reported
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: FinderConfig = Field(default_factory=FinderConfig)
    trie: WordTrie
    acceptor: Union[CoverageAcceptor, LookupAcceptor]

    @classmethod
    def create(
        cls,
        config: Optional[FinderConfig] = None,
        trie: Optional[WordTrie] = None,
        verbose: bool = False,
        **config_kwargs: Any
    ) -> "MnemonicFinder":
        """
        Factory method loading the dictionary and selecting the strategy.

        Args:
            config: Optional FinderConfig instance
            trie: Prebuilt dictionary index (loaded from config.wordlist if None)
            verbose: If True, print loading progress to stderr
            **config_kwargs: Config parameters if config not provided

        Raises:
            DictionaryLoadFailure: If the word list cannot be loaded
        """
        if config is None:
            config = FinderConfig(**config_kwargs)

        if trie is None:
            if verbose:
                print("Loading wordlist...", file=sys.stderr)
            words = load_words(config.wordlist)
            if verbose:
                print(f"Compiling dictionary index from {len(words)} words...", file=sys.stderr)
            trie = WordTrie(words)
            if verbose:
                print(f"Indexed {len(trie)} words", file=sys.stderr)

        acceptor = build_acceptor(config.mode, trie, legacy=config.legacy_coverage)
        return cls(config=config, trie=trie, acceptor=acceptor)

    def query(self, line: str) -> QueryResult:
        """
        Generate every spelling of one number and keep the accepted ones.

        Raises:
            InvalidInput: If the line is not a 7-digit number
        """
        digits = parse_digits(line)
        candidates = generate(digits)

        mnemonics: List[Mnemonic] = []
        for word in candidates:
            matches = self.acceptor.check(word)
            if matches is not None:
                mnemonics.append(Mnemonic(digits=digits, word=word, matches=matches))

        return QueryResult(
            digits=digits,
            candidates=len(candidates),
            mnemonics=mnemonics,
            misses=len(candidates) - len(mnemonics),
        )

    def format_result(self, result: QueryResult) -> List[str]:
        """Output lines for one processed number."""
        if result.error:
            return []
        if self.config.mode == "coverage":
            return [f"{m.digits}: {m.word}" for m in result.mnemonics]

        # Lookup mode reports every candidate in generation order
        if not self.config.show_misses:
            return [m.word for m in result.mnemonics]
        hits = {m.word for m in result.mnemonics}
        return [word if word in hits else "NONE" for word in generate(result.digits)]

    def run(
        self,
        lines: Iterable[str],
        out: Callable[[str], None] = print,
        verbose: bool = False
    ) -> List[QueryResult]:
        """
        Process input lines one at a time until the input is exhausted.

        Invalid lines are reported on stderr and skipped, unless the config
        is strict, in which case the InvalidInput propagates.

        Args:
            lines: Input lines, one phone number each
            out: Receives each output line
            verbose: If True, print a summary per line to stderr

        Returns:
            One QueryResult per non-blank line
        """
        if verbose:
            print("Ready...", file=sys.stderr)

        results: List[QueryResult] = []
        for line in lines:
            if not line.strip():
                continue

            try:
                result = self.query(line)
            except InvalidInput as e:
                if self.config.strict:
                    raise
                print(f"Skipping invalid input: {e}", file=sys.stderr)
                results.append(QueryResult(digits=line.strip(), error=str(e)))
                continue

            for output_line in self.format_result(result):
                out(output_line)

            if verbose:
                print(
                    f"{result.digits}: {len(result.mnemonics)} of "
                    f"{result.candidates} candidates accepted",
                    file=sys.stderr
                )
            results.append(result)

        return results
