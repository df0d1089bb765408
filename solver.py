"""Anagram index builder and word generation engine."""

from __future__ import annotations

import logging
import os
import pickle
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Callable

from combos import count_combos, gen_combos
from index import DictionaryIndex
from models import GeneratorOptions, IndexBuildResult, SolveReport
from utils import CACHE_DIR, cache_key, canonicalize, ensure_app_dirs, split_letters

ProgressCallback = Callable[[float], None]

LARGE_ENUMERATION_WARNING = 1_000_000

logger = logging.getLogger(__name__)


class AnagramSolver:
    """Build a signature index and generate every word a set of letters can spell."""

    def __init__(self, min_word_length: int, max_word_length: int) -> None:
        self.min_word_length = min_word_length
        self.max_word_length = max_word_length
        self.index: DictionaryIndex | None = None
        self.wordlist_path: str = ""

    @property
    def options(self) -> GeneratorOptions:
        return GeneratorOptions(
            min_word_length=self.min_word_length,
            max_word_length=self.max_word_length,
        )

    def build_index_from_lines(self, lines: Iterable[str], source: str = "<lines>") -> IndexBuildResult:
        """
        Build the index from any iterable of raw lines.

        The previous index stays in place if reading ``lines`` fails.
        """
        if not 0 <= self.min_word_length <= self.max_word_length:
            logger.warning(
                "Word length bounds [%d, %d] admit no words",
                self.min_word_length,
                self.max_word_length,
            )
        built = DictionaryIndex.build(lines, self.min_word_length, self.max_word_length)
        self.index = built
        self.wordlist_path = source
        logger.info(
            "Indexed %s: %d lines, %d words, %d signatures",
            source,
            built.total_lines,
            built.accepted_words,
            built.unique_signatures,
        )
        return IndexBuildResult(
            wordlist_path=source,
            total_lines=built.total_lines,
            accepted_words=built.accepted_words,
            unique_signatures=built.unique_signatures,
            loaded_from_cache=False,
        )

    def build_index(
        self,
        wordlist_path: str,
        options: GeneratorOptions,
        progress_callback: ProgressCallback | None = None,
    ) -> IndexBuildResult:
        """
        Build or load an anagram index from a wordlist path.

        Length bounds come from the solver; ``options`` only controls caching.
        """
        path = Path(wordlist_path)
        if not path.exists():
            raise FileNotFoundError(f"Wordlist file not found: {wordlist_path}")

        ensure_app_dirs()
        bounds = self.options
        file_stat = path.stat()
        cache_file = CACHE_DIR / f"{cache_key(path, bounds, file_stat.st_size, file_stat.st_mtime_ns)}.pkl"

        cached = _load_cached_index(cache_file) if options.use_speed_cache else None
        if cached is not None:
            self.index = cached
            self.wordlist_path = str(path)
            if progress_callback:
                progress_callback(1.0)
            return IndexBuildResult(
                wordlist_path=str(path),
                total_lines=cached.total_lines,
                accepted_words=cached.accepted_words,
                unique_signatures=cached.unique_signatures,
                loaded_from_cache=True,
            )

        with path.open("rb") as handle:
            result = self.build_index_from_lines(
                _decoded_lines(handle, max(file_stat.st_size, 1), progress_callback),
                source=str(path),
            )

        if options.use_speed_cache and self.index is not None:
            partial_file = cache_file.with_suffix(".tmp")
            try:
                with partial_file.open("wb") as handle:
                    pickle.dump(self.index.to_payload(), handle, protocol=pickle.HIGHEST_PROTOCOL)
                os.replace(partial_file, cache_file)
            except Exception:
                logger.exception("Failed writing cache file: %s", cache_file)
                partial_file.unlink(missing_ok=True)

        if progress_callback:
            progress_callback(1.0)

        return result

    def solve(self, query: str) -> list[str]:
        """Every dictionary word spelled by a subset of the query's letters."""
        return self.solve_report(query).words

    def solve_report(self, query: str) -> SolveReport:
        """Solve a query and keep the bookkeeping the UI and exports show."""
        letters = split_letters(query)
        if self.index is None:
            return SolveReport(query=query, letters=letters, combinations_checked=0, matched_signatures=0)

        expected = count_combos(len(letters), self.min_word_length, self.max_word_length)
        if expected > LARGE_ENUMERATION_WARNING:
            logger.warning("Query of %d letters needs %d lookups", len(letters), expected)

        words: list[str] = []
        checked = 0
        matched: set[str] = set()
        for combo in gen_combos(letters, self.min_word_length, self.max_word_length):
            checked += 1
            sig = canonicalize(combo)
            found = self.index.get(sig)
            if found:
                matched.add(sig)
                words.extend(found)

        return SolveReport(
            query=query,
            letters=letters,
            combinations_checked=checked,
            matched_signatures=len(matched),
            words=words,
        )


def _load_cached_index(cache_file: Path) -> DictionaryIndex | None:
    """Load a pickled index, discarding cache files that cannot be read back."""
    if not cache_file.exists():
        return None
    try:
        with cache_file.open("rb") as handle:
            return DictionaryIndex.from_payload(pickle.load(handle))
    except (pickle.UnpicklingError, EOFError, KeyError):
        logger.exception("Discarding unreadable cache file: %s", cache_file)
        cache_file.unlink(missing_ok=True)
        return None


def _decoded_lines(
    handle: Iterable[bytes],
    total_bytes: int,
    progress_callback: ProgressCallback | None,
) -> Iterator[str]:
    bytes_processed = 0
    for line_no, raw_line in enumerate(handle, start=1):
        bytes_processed += len(raw_line)
        yield raw_line.decode("utf-8", errors="ignore")
        if progress_callback and line_no % 5000 == 0:
            progress_callback(min(bytes_processed / total_bytes, 1.0))
