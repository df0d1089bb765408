"""Signature index mapping sorted letters to dictionary words."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from utils import canonicalize, normalize_word


class DictionaryIndex:
    """
    Read-only map of signature -> words sharing that signature.

    Words keep their source order inside each bucket and duplicates are kept.
    Build one with :meth:`build`; the buckets cannot be changed afterwards.
    """

    __slots__ = ("_buckets", "min_length", "max_length", "total_lines", "accepted_words")

    def __init__(
        self,
        buckets: Mapping[str, tuple[str, ...]] | None = None,
        min_length: int = 0,
        max_length: int = 0,
        total_lines: int = 0,
        accepted_words: int = 0,
    ) -> None:
        self._buckets = MappingProxyType(dict(buckets or {}))
        self.min_length = min_length
        self.max_length = max_length
        self.total_lines = total_lines
        self.accepted_words = accepted_words

    @classmethod
    def build(cls, lines: Iterable[str], min_length: int, max_length: int) -> DictionaryIndex:
        """
        Index every line whose normalized length is within [min_length, max_length].

        A negative ``min_length`` or an inverted range is not an error; the
        index is simply empty. Errors raised while iterating ``lines``
        propagate before anything is returned.
        """
        usable_bounds = 0 <= min_length <= max_length
        total_lines = 0
        accepted_words = 0
        index_map: dict[str, list[str]] = defaultdict(list)

        for raw_line in lines:
            total_lines += 1
            word = normalize_word(raw_line)
            if not usable_bounds or not min_length <= len(word) <= max_length:
                continue
            index_map[canonicalize(word)].append(word)
            accepted_words += 1

        return cls(
            {sig: tuple(words) for sig, words in index_map.items()},
            min_length=min_length,
            max_length=max_length,
            total_lines=total_lines,
            accepted_words=accepted_words,
        )

    def get(self, key: str) -> list[str]:
        """Words stored under ``key``, or an empty list on a miss."""
        return list(self._buckets.get(key, ()))

    @property
    def unique_signatures(self) -> int:
        return len(self._buckets)

    def to_payload(self) -> dict:
        """Plain-data form used by the pickle speed cache."""
        return {
            "index": dict(self._buckets),
            "min_length": self.min_length,
            "max_length": self.max_length,
            "total_lines": self.total_lines,
            "accepted_words": self.accepted_words,
        }

    @classmethod
    def from_payload(cls, payload: dict) -> DictionaryIndex:
        return cls(
            payload["index"],
            min_length=payload["min_length"],
            max_length=payload["max_length"],
            total_lines=payload["total_lines"],
            accepted_words=payload["accepted_words"],
        )

    def __len__(self) -> int:
        return len(self._buckets)
