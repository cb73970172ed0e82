"""Word-frequency index keyed by normalized word."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._types import WordEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class FrequencyIndex:
    """Per-word occurrence and sentence counts for one processing pass.

    Entries are created on first sight and never removed. Iteration and
    ``snapshot()`` follow first-occurrence order.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, WordEntry] = {}

    def observe(self, word: str, sentence_id: int) -> WordEntry:
        """Count one occurrence of word inside sentence sentence_id."""
        entry = self._entries.get(word)
        if entry is None:
            entry = WordEntry(word)
            self._entries[word] = entry

        entry.count += 1
        if entry.last_sentence_seen != sentence_id:
            entry.sentence_count += 1
            entry.last_sentence_seen = sentence_id
        return entry

    def observe_all(self, tokens: Iterable[tuple[str, int]]) -> None:
        for word, sentence_id in tokens:
            self.observe(word, sentence_id)

    def get(self, word: str) -> WordEntry | None:
        return self._entries.get(word)

    def snapshot(self) -> tuple[WordEntry, ...]:
        """All entries, for ranking. Callers must not mutate them."""
        return tuple(self._entries.values())

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self._entries.values())
