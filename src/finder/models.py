"""
Pydantic models for the finder layer.

Configuration for a run and the per-line results it produces. The
processing logic lives in finder.py.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from ..verifiers.acceptors import Mode
from ..verifiers.models import Match


class FinderConfig(BaseModel):
    """Configuration for a mnemonic search run."""
    model_config = ConfigDict(extra='forbid')

    mode: Mode = "coverage"
    wordlist: Optional[str] = None  # None uses the bundled list
    legacy_coverage: bool = False
    strict: bool = False  # Abort on the first invalid line
    show_misses: bool = True  # Lookup mode: print NONE for misses


class Mnemonic(BaseModel):
    """An accepted spelling of a phone number."""
    digits: str
    word: str
    matches: List[Match] = Field(default_factory=list)


class QueryResult(BaseModel):
    """Result of processing one input line."""
    digits: str
    candidates: int = 0
    mnemonics: List[Mnemonic] = Field(default_factory=list)
    misses: int = 0
    error: Optional[str] = None
