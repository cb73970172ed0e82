"""Built-in English stop words excluded from the "other words" ranking."""

from __future__ import annotations

STOP_WORDS: frozenset[str] = frozenset({
    # Articles, conjunctions, prepositions
    "a", "an", "and", "as", "at", "by", "for", "from", "in", "of", "on",
    "to", "with", "if", "or", "but", "not",
    # Be/have/will forms
    "are", "be", "has", "is", "was", "were", "will",
    # Pronouns and determiners
    "i", "you", "me", "my", "we", "our", "they", "their", "them",
    "he", "she", "him", "his", "her", "hers", "it", "its",
    "your", "yours", "this", "that", "these", "those", "the",
    # Interrogatives
    "who", "whom", "what", "which", "when", "where", "why", "how",
})


def is_stop_word(word: str, stop_words: frozenset[str] = STOP_WORDS) -> bool:
    """Exact membership test against an already-normalized word."""
    return word in stop_words
