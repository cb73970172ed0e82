"""TopicIndexer: tokenize -> index -> select -> assemble."""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from ._errors import (
    TopicIndexConfigError,
    TopicIndexInputError,
    TopicIndexUsageError,
)
from ._index import FrequencyIndex
from ._report import assemble
from ._selector import DEFAULT_OTHERS_LIMIT, select_top
from ._stop_words import STOP_WORDS
from ._tokenizer import DEFAULT_CHUNK_SIZE, Tokenizer

if TYPE_CHECKING:
    from typing import BinaryIO

    from ._types import ReportResult, StreamState


def _check_topic(topic_word: str) -> None:
    if not topic_word:
        raise TopicIndexUsageError("topic word must not be empty")


class TopicIndexer:
    """Holds the run configuration and exposes the public analysis API.

    Every call builds its own FrequencyIndex, so one indexer can serve
    any number of independent inputs.
    """

    __slots__ = ("_stop_words", "_others_limit", "_chunk_size")

    def __init__(
        self,
        stop_words: frozenset[str] = STOP_WORDS,
        others_limit: int = DEFAULT_OTHERS_LIMIT,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if others_limit < 0:
            raise TopicIndexConfigError(
                f"others_limit must be >= 0, got {others_limit}"
            )
        if chunk_size <= 0:
            raise TopicIndexConfigError(
                f"chunk_size must be positive, got {chunk_size}"
            )
        self._stop_words = frozenset(stop_words)
        self._others_limit = others_limit
        self._chunk_size = chunk_size

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    @property
    def others_limit(self) -> int:
        return self._others_limit

    # -- Public API --

    def build_index(self, stream: BinaryIO) -> tuple[FrequencyIndex, StreamState]:
        """Consume the stream once, returning the index and final totals."""
        tokenizer = Tokenizer(stream, self._chunk_size)
        index = FrequencyIndex()
        index.observe_all(tokenizer)
        logger.debug("Indexed {} distinct words", len(index))
        return index, tokenizer.state

    def analyze(self, stream: BinaryIO, topic_word: str) -> ReportResult:
        """Run the full pipeline over a binary stream."""
        _check_topic(topic_word)
        index, state = self.build_index(stream)
        topic_entry, others = select_top(
            index, topic_word,
            stop_words=self._stop_words, limit=self._others_limit,
        )
        if topic_entry is None:
            logger.debug("Topic word {!r} does not occur in the input", topic_word)
        return assemble(
            topic_word, topic_entry, others,
            state.total_words, state.total_sentences,
        )

    def analyze_text(self, text: str, topic_word: str) -> ReportResult:
        """Analyze a string; non-ASCII characters act as separators."""
        return self.analyze(io.BytesIO(text.encode("utf-8")), topic_word)

    def analyze_file(self, path: Path | str, topic_word: str) -> ReportResult:
        """Analyze the contents of a file.

        Raises:
            TopicIndexInputError: If the file cannot be opened or read.
        """
        _check_topic(topic_word)
        path = Path(path)
        try:
            f = open(path, "rb")
        except OSError as e:
            raise TopicIndexInputError(f"Cannot open {path}: {e}") from e
        with f:
            logger.debug("Reading {}", path)
            return self.analyze(f, topic_word)
