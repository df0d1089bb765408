"""Utility helpers for normalization, config, caching, and exports."""

from __future__ import annotations

import csv
import hashlib
import json
import logging
from pathlib import Path
from typing import Any

from models import DEFAULT_MAX_WORD_LENGTH, DEFAULT_MIN_WORD_LENGTH, GeneratorOptions, SolveReport


def _choose_app_dir() -> Path:
    """
    Pick a writable app directory.

    Preferred location is user home, with local workspace fallback when blocked.
    """
    preferred = Path.home() / ".anagram_generator_app"
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(".anagram_generator_app")
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


APP_DIR = _choose_app_dir()
CONFIG_PATH = APP_DIR / "config.json"
CACHE_DIR = APP_DIR / "cache"
LOG_PATH = APP_DIR / "app.log"


def ensure_app_dirs() -> None:
    """Create app directories if they do not already exist."""
    APP_DIR.mkdir(parents=True, exist_ok=True)
    CACHE_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging() -> None:
    """Configure file logging once per app run."""
    ensure_app_dirs()
    logging.basicConfig(
        filename=str(LOG_PATH),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_config() -> dict[str, Any]:
    """
    Load saved settings, with default word length bounds filled in.

    An unreadable or non-object config file is logged and ignored.
    """
    ensure_app_dirs()
    config: dict[str, Any] = {
        "min_word_length": DEFAULT_MIN_WORD_LENGTH,
        "max_word_length": DEFAULT_MAX_WORD_LENGTH,
    }
    if not CONFIG_PATH.exists():
        return config
    try:
        saved = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        logging.exception("Failed to load config from %s", CONFIG_PATH)
        return config
    if isinstance(saved, dict):
        config.update(saved)
    else:
        logging.warning("Ignoring config in %s: expected a JSON object", CONFIG_PATH)
    return config


def save_config(config: dict[str, Any]) -> None:
    """Persist config to disk."""
    ensure_app_dirs()
    try:
        CONFIG_PATH.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except Exception:
        logging.exception("Failed to save config to %s", CONFIG_PATH)


def normalize_word(word: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return word.strip().lower()


def split_letters(query: str) -> list[str]:
    """
    Break a query into its positional letters.

    The query goes through the same normalization as dictionary lines, so
    "TaC " becomes ["t", "a", "c"]. Inner characters are kept as-is; anything
    that is not in the dictionary simply never matches.
    """
    return list(normalize_word(query))


def canonicalize(word: str) -> str:
    """Canonical sorted-signature for an anagram token."""
    return "".join(sorted(word))


def cache_key(wordlist_path: Path, options: GeneratorOptions, file_size: int, mtime_ns: int) -> str:
    """Create a deterministic cache key from file identity and length bounds."""
    key_data = {
        "path": str(wordlist_path.resolve()),
        "size": file_size,
        "mtime_ns": mtime_ns,
        "min_word_length": options.min_word_length,
        "max_word_length": options.max_word_length,
    }
    digest = hashlib.sha256(json.dumps(key_data, sort_keys=True).encode("utf-8")).hexdigest()
    return digest


def export_report(
    json_path: Path,
    csv_path: Path,
    report: SolveReport,
    wordlist_path: str,
    options: GeneratorOptions,
) -> None:
    """Export a solve report to both JSON and CSV."""
    payload = {
        "generated_at_utc": report.generated_at_utc,
        "wordlist_path": wordlist_path,
        "options": {
            "min_word_length": options.min_word_length,
            "max_word_length": options.max_word_length,
            "use_speed_cache": options.use_speed_cache,
        },
        "query": report.query,
        "letters": report.letters,
        "combinations_checked": report.combinations_checked,
        "matched_signatures": report.matched_signatures,
        "words": report.unique_words,
    }

    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    with csv_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(["word", "length"])
        for word in report.unique_words:
            writer.writerow([word, len(word)])
