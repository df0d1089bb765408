from collections.abc import Iterator

import pytest

from index import DictionaryIndex
from utils import canonicalize


def test_build_keeps_only_words_within_bounds() -> None:
    lines = ["ab", "abc", "abcd", "abcde", "xy", "xyz"]
    index = DictionaryIndex.build(lines, 3, 4)

    assert index.accepted_words == 3
    assert index.total_lines == 6
    for word in lines:
        bucket = index.get(canonicalize(word))
        if 3 <= len(word) <= 4:
            assert bucket == [word]
        else:
            assert bucket == []


def test_build_preserves_order_and_duplicates() -> None:
    index = DictionaryIndex.build(["listen", "silent", "enlist", "silent"], 1, 10)
    assert index.get(canonicalize("tinsel")) == ["listen", "silent", "enlist", "silent"]
    assert index.unique_signatures == 1


def test_build_trims_and_lowercases_before_filtering() -> None:
    index = DictionaryIndex.build(["  CAT \n", "Dogs\n"], 3, 3)
    assert index.get("act") == ["cat"]
    assert index.get("dgos") == []


def test_get_miss_is_empty_and_buckets_are_read_only() -> None:
    index = DictionaryIndex.build(["cat"], 3, 3)
    assert index.get("zzz") == []

    bucket = index.get("act")
    bucket.append("intruder")
    assert index.get("act") == ["cat"]


def test_inverted_bounds_give_empty_index() -> None:
    index = DictionaryIndex.build(["a", "at", "cat"], 3, 1)
    assert len(index) == 0
    assert index.total_lines == 3


def test_negative_min_length_gives_empty_index() -> None:
    index = DictionaryIndex.build(["a", "cat"], -1, 3)
    assert len(index) == 0
    assert index.accepted_words == 0
    assert index.get("act") == []
    assert index.total_lines == 2


def test_read_failure_propagates() -> None:
    def broken_lines() -> Iterator[str]:
        yield "cat"
        raise OSError("disk went away")

    with pytest.raises(OSError):
        DictionaryIndex.build(broken_lines(), 1, 5)


def test_payload_round_trip_keeps_buckets() -> None:
    index = DictionaryIndex.build(["cat", "act", "dog"], 3, 3)
    restored = DictionaryIndex.from_payload(index.to_payload())
    assert restored.get("act") == ["cat", "act"]
    assert restored.accepted_words == 3
    assert (restored.min_length, restored.max_length) == (3, 3)
