"""Top-k selection: the topic entry plus the most frequent other words."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._stop_words import STOP_WORDS, is_stop_word
from ._tokenizer import normalize_word

if TYPE_CHECKING:
    from ._index import FrequencyIndex
    from ._types import WordEntry

DEFAULT_OTHERS_LIMIT: int = 4


def rank_entries(entries: tuple[WordEntry, ...]) -> list[WordEntry]:
    """Order entries by count, highest first.

    The sort is stable, so equal counts keep snapshot order and the word
    seen first in the stream ranks first.
    """
    return sorted(entries, key=lambda e: e.count, reverse=True)


def select_top(
    index: FrequencyIndex,
    topic_word: str,
    *,
    stop_words: frozenset[str] = STOP_WORDS,
    limit: int = DEFAULT_OTHERS_LIMIT,
) -> tuple[WordEntry | None, list[WordEntry]]:
    """Return (topic_entry, others).

    topic_entry is None when the normalized topic never occurs. others
    holds at most ``limit`` entries, skipping the topic and stop words.
    """
    topic_entry = index.get(normalize_word(topic_word))

    others: list[WordEntry] = []
    if limit <= 0:
        return topic_entry, others

    for entry in rank_entries(index.snapshot()):
        if entry is topic_entry:
            continue
        if is_stop_word(entry.word, stop_words):
            continue
        others.append(entry)
        if len(others) >= limit:
            break

    return topic_entry, others
