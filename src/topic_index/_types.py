"""Data structures for topic-index."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class WordEntry:
    word: str                 # normalized, never changes after creation
    count: int = 0            # total occurrences in the stream
    sentence_count: int = 0   # distinct sentences containing the word
    last_sentence_seen: int = field(default=-1, repr=False, compare=False)


@dataclass(slots=True)
class StreamState:
    buffer: bytearray = field(default_factory=bytearray)  # partial word
    sentence_id: int = 0
    total_words: int = 0
    total_sentences: int = 0
    open_sentence: bool = False  # current sentence has words but no terminator yet
    finished: bool = False


@dataclass(slots=True, frozen=True)
class ReportRow:
    entry: WordEntry
    pct_words: float
    pct_sentences: float

    @property
    def word(self) -> str:
        return self.entry.word

    @property
    def count(self) -> int:
        return self.entry.count

    @property
    def sentence_count(self) -> int:
        return self.entry.sentence_count


@dataclass(slots=True, frozen=True)
class ReportResult:
    topic_word: str               # as supplied by the caller
    topic: ReportRow | None       # None when the topic never occurs
    others: tuple[ReportRow, ...]
    total_words: int
    total_sentences: int

    @property
    def rows(self) -> tuple[ReportRow, ...]:
        """Present rows in report order: topic first, then the others."""
        if self.topic is None:
            return self.others
        return (self.topic, *self.others)
