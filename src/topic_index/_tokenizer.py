"""Streaming byte tokenizer emitting normalized words tagged with sentence ids."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from loguru import logger

from ._errors import TopicIndexConfigError, TopicIndexError, TopicIndexInputError
from ._types import StreamState

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import BinaryIO

DEFAULT_CHUNK_SIZE: int = 65536

_WORD_BYTES = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b"0123456789"
)
_TERMINATORS = frozenset(b".!?")

# Maximal ASCII alphanumeric runs, or a single sentence terminator.
_TOKEN_RE = re.compile(rb"[A-Za-z0-9]+|[.!?]")
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9]+")


def normalize_word(text: str) -> str:
    """Reduce text to lower-case ASCII letters and digits."""
    return _NON_WORD_RE.sub("", text).lower()


def _trailing_word_start(chunk: bytes) -> int:
    """Index where the run of word bytes at the end of chunk begins."""
    return len(chunk.rstrip(_WORD_BYTES))


class Tokenizer:
    """Single pass over a binary stream.

    Iterating yields ``(word, sentence_id)`` pairs. A word split across
    read boundaries is held in ``state.buffer`` until a separator or the
    end of the stream completes it. Totals are final once iteration ends.
    """

    __slots__ = ("_stream", "_chunk_size", "_state", "_started")

    def __init__(
        self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        if chunk_size <= 0:
            raise TopicIndexConfigError(
                f"chunk_size must be positive, got {chunk_size}"
            )
        self._stream = stream
        self._chunk_size = chunk_size
        self._state = StreamState()
        self._started = False

    @property
    def state(self) -> StreamState:
        return self._state

    def __iter__(self) -> Iterator[tuple[str, int]]:
        if self._started:
            raise TopicIndexError("token stream already consumed")
        self._started = True
        return self._tokens()

    def _read(self) -> bytes:
        try:
            chunk = self._stream.read(self._chunk_size)
        except OSError as e:
            raise TopicIndexInputError(f"Failed to read input: {e}") from e
        if isinstance(chunk, str):
            raise TopicIndexInputError("Expected a binary stream, got text")
        return chunk

    def _tokens(self) -> Iterator[tuple[str, int]]:
        state = self._state
        n_chunks = 0
        for chunk in iter(self._read, b""):
            n_chunks += 1
            cut = _trailing_word_start(chunk)
            if cut == 0:
                # Whole chunk extends the buffered word
                state.buffer += chunk
                continue
            if state.buffer:
                data = bytes(state.buffer) + chunk[:cut]
                state.buffer.clear()
            else:
                data = chunk[:cut]
            yield from self._scan(data)
            state.buffer += chunk[cut:]

        # Flush a trailing word that has no terminator after it
        if state.buffer:
            tail = bytes(state.buffer)
            state.buffer.clear()
            yield from self._scan(tail)

        # Words after the last terminator form one more sentence; with no
        # terminators at all the whole stream is a single sentence.
        if state.open_sentence:
            state.total_sentences += 1
            state.open_sentence = False
        state.finished = True
        logger.debug(
            "Tokenized {} chunks: {} words, {} sentences",
            n_chunks, state.total_words, state.total_sentences,
        )

    def _scan(self, data: bytes) -> Iterator[tuple[str, int]]:
        state = self._state
        for m in _TOKEN_RE.finditer(data):
            piece = m.group()
            if piece[0] in _TERMINATORS:
                state.total_sentences += 1
                state.sentence_id = state.total_sentences
                state.open_sentence = False
            else:
                state.total_words += 1
                state.open_sentence = True
                yield piece.lower().decode("ascii"), state.sentence_id
