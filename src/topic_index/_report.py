"""Report assembly (percentages) and plain-text rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._types import ReportResult, ReportRow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._types import WordEntry

_BANNER = "=" * 29
_RULE = "-" * 67


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return 100.0 * part / whole


def _row(entry: WordEntry, total_words: int, total_sentences: int) -> ReportRow:
    return ReportRow(
        entry=entry,
        pct_words=_percent(entry.count, total_words),
        pct_sentences=_percent(entry.sentence_count, total_sentences),
    )


def assemble(
    topic_word: str,
    topic_entry: WordEntry | None,
    others: Sequence[WordEntry],
    total_words: int,
    total_sentences: int,
) -> ReportResult:
    """Combine selected entries and stream totals into a ReportResult."""
    topic = (
        None if topic_entry is None
        else _row(topic_entry, total_words, total_sentences)
    )
    return ReportResult(
        topic_word=topic_word,
        topic=topic,
        others=tuple(_row(e, total_words, total_sentences) for e in others),
        total_words=total_words,
        total_sentences=total_sentences,
    )


def render_report(result: ReportResult) -> str:
    """Format a ReportResult as the fixed-width text report.

    Rows whose entry is absent are omitted rather than zero-filled.
    """
    lines = [
        _BANNER,
        "Topic index report",
        f"Topic word: '{result.topic_word}'",
        f"Total words: {result.total_words}",
        f"Total sentences: {result.total_sentences}",
        _BANNER,
        f"{'Word':<15} {'Count':>8} {'% Words':>10} {'Sentences':>15} {'% Sent':>10}",
        _RULE,
    ]
    for row in result.rows:
        lines.append(
            f"{row.word:<15} {row.count:>8} {row.pct_words:>9.2f}%   "
            f"{row.sentence_count:>5}/{result.total_sentences:<7} "
            f"{row.pct_sentences:>8.2f}%"
        )
    lines.append(_BANNER)
    return "\n".join(lines)
