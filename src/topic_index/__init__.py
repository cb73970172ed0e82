"""topic-index: word-frequency statistics for a text relative to a topic word."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ._errors import (
    TopicIndexConfigError,
    TopicIndexError,
    TopicIndexInputError,
    TopicIndexUsageError,
)
from ._index import FrequencyIndex
from ._indexer import TopicIndexer
from ._loader import load_stop_words
from ._report import assemble, render_report
from ._selector import select_top
from ._stop_words import STOP_WORDS, is_stop_word
from ._tokenizer import Tokenizer, normalize_word
from ._types import ReportResult, ReportRow, StreamState, WordEntry

if TYPE_CHECKING:
    from ._settings import Settings

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "FrequencyIndex",
    "ReportResult",
    "ReportRow",
    "STOP_WORDS",
    "StreamState",
    "Tokenizer",
    "TopicIndexConfigError",
    "TopicIndexError",
    "TopicIndexInputError",
    "TopicIndexUsageError",
    "TopicIndexer",
    "WordEntry",
    "assemble",
    "is_stop_word",
    "load_stop_words",
    "normalize_word",
    "render_report",
    "select_top",
]

# Library code stays quiet unless the application enables it.
logger.disable("topic_index")


def load(settings: Settings | None = None) -> TopicIndexer:
    """Build a TopicIndexer from settings.

    Args:
        settings: Explicit settings. If None, reads ``TOPIC_INDEX_*``
            environment variables (and ``.env``).
    """
    from ._settings import get_settings

    if settings is None:
        settings = get_settings()

    stop_words = STOP_WORDS
    if settings.stop_words_file is not None:
        extra = load_stop_words(settings.stop_words_file)
        stop_words = extra if settings.replace_stop_words else STOP_WORDS | extra

    return TopicIndexer(
        stop_words=stop_words,
        others_limit=settings.others_limit,
        chunk_size=settings.chunk_size,
    )
