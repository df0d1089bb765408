"""Data models for anagram generation results and indexing metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

DEFAULT_MIN_WORD_LENGTH = 3
DEFAULT_MAX_WORD_LENGTH = 8


@dataclass(slots=True)
class GeneratorOptions:
    """Length bounds and caching options shared by indexing and solving."""

    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    max_word_length: int = DEFAULT_MAX_WORD_LENGTH
    use_speed_cache: bool = True

    def has_valid_bounds(self) -> bool:
        return 0 <= self.min_word_length <= self.max_word_length


@dataclass(slots=True)
class SolveReport:
    """Words generated for one query, in enumeration order."""

    query: str
    letters: list[str]
    combinations_checked: int
    matched_signatures: int
    words: list[str] = field(default_factory=list)
    generated_at_utc: str = field(
        default_factory=lambda: datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
    )

    @property
    def unique_words(self) -> list[str]:
        # Repeated input letters probe the same signature more than once.
        return list(dict.fromkeys(self.words))


@dataclass(slots=True)
class IndexBuildResult:
    """Summary returned after building or loading an index."""

    wordlist_path: str
    total_lines: int
    accepted_words: int
    unique_signatures: int
    loaded_from_cache: bool
