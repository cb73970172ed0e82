"""Stop-word list files: JSON, msgpack, or plain text."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import msgpack
from loguru import logger

from ._errors import TopicIndexConfigError
from ._tokenizer import normalize_word

_EXPECTED_VERSION = "1.0"

_MSGPACK_SUFFIXES = frozenset({".msgpack", ".bin"})


def _load_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _load_msgpack(path: Path) -> Any:
    with open(path, "rb") as f:
        return msgpack.unpackb(f.read(), raw=False)


def _load_text(path: Path) -> list[str]:
    words: list[str] = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.split("#", 1)[0].strip()
            if line:
                words.append(line)
    return words


def _extract_words(raw: Any, path: Path) -> list[Any]:
    """Accept a bare list or a versioned ``{"version", "words"}`` mapping."""
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        version = raw.get("version")
        if version != _EXPECTED_VERSION:
            raise TopicIndexConfigError(
                f"Expected stop-word file version {_EXPECTED_VERSION!r}, "
                f"got {version!r} in {path}"
            )
        words = raw.get("words")
        if not isinstance(words, list):
            raise TopicIndexConfigError(f"No 'words' list in {path}")
        return words
    raise TopicIndexConfigError(
        f"Unsupported stop-word file layout in {path}: {type(raw).__name__}"
    )


def load_stop_words(path: Path | str) -> frozenset[str]:
    """Load and normalize a stop-word list.

    Args:
        path: ``.json``, ``.msgpack``/``.bin``, or a plain text file with
            one word per line (``#`` starts a comment).

    Raises:
        TopicIndexConfigError: If the file is missing, cannot be decoded,
            has the wrong version, or contains non-string entries.
    """
    path = Path(path)
    if not path.is_file():
        raise TopicIndexConfigError(f"Stop-word file not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            raw = _extract_words(_load_json(path), path)
        elif suffix in _MSGPACK_SUFFIXES:
            raw = _extract_words(_load_msgpack(path), path)
        else:
            raw = _load_text(path)
    except (OSError, ValueError) as e:
        raise TopicIndexConfigError(f"Cannot read stop words from {path}: {e}") from e

    words: set[str] = set()
    for item in raw:
        if not isinstance(item, str):
            raise TopicIndexConfigError(
                f"Stop words must be strings, got {item!r} in {path}"
            )
        word = normalize_word(item)
        if word:
            words.add(word)

    logger.debug("Loaded {} stop words from {}", len(words), path)
    return frozenset(words)
