"""Runtime configuration, read from ``TOPIC_INDEX_*`` variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._selector import DEFAULT_OTHERS_LIMIT
from ._tokenizer import DEFAULT_CHUNK_SIZE


class Settings(BaseSettings):
    # Extra stop words, merged into the built-in list unless replace_stop_words
    stop_words_file: Path | None = None
    replace_stop_words: bool = False

    # Number of "other" words reported next to the topic
    others_limit: int = Field(default=DEFAULT_OTHERS_LIMIT, ge=0)

    # Bytes read from the input per call
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)

    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="TOPIC_INDEX_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Cache settings so the environment is parsed once per process."""
    return Settings()
