"""
Main entry point for finding phone number mnemonics.

Reads one 7-digit phone number per line from stdin and prints the
spellings made of dictionary words.

Usage:
    python -m src.main
    python -m src.main config.yaml --verbose
    echo 3926753 | python -m src.main --mode lookup --hide-misses
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .finder import FinderConfig, MnemonicFinder
from .keypad import InvalidInput
from .verifiers import DictionaryLoadFailure


def load_config(config_path: str) -> FinderConfig:
    """
    Load finder configuration from a YAML file.

    A relative `wordlist` path is taken relative to the config file.
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = FinderConfig(**data)
    if config.wordlist and not Path(config.wordlist).is_absolute():
        config = config.model_copy(update={"wordlist": str(path.parent / config.wordlist)})
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find dictionary-word spellings of 7-digit phone numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  mode: coverage
  wordlist: words.txt
  legacy_coverage: false
  strict: false
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--mode",
        choices=["coverage", "lookup"],
        help="coverage: spellings tiled by dictionary words; lookup: exact single words"
    )
    parser.add_argument(
        "--wordlist",
        help="Word list with one word per line (default: bundled list)"
    )
    parser.add_argument(
        "--legacy-coverage",
        action="store_true",
        default=None,
        help="Use the legacy interval merge, which ignores partially overlapping words"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Abort on the first invalid input line instead of skipping it"
    )
    parser.add_argument(
        "--hide-misses",
        action="store_true",
        help="Lookup mode: do not print NONE for candidates not in the dictionary"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else FinderConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Flags override the config file
    overrides = {
        "mode": args.mode,
        "wordlist": args.wordlist,
        "legacy_coverage": args.legacy_coverage,
        "strict": args.strict,
    }
    if args.hide_misses:
        overrides["show_misses"] = False
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    try:
        finder = MnemonicFinder.create(config=config, verbose=args.verbose)
    except DictionaryLoadFailure as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        return 1

    try:
        finder.run(sys.stdin, verbose=args.verbose)
    except InvalidInput as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
