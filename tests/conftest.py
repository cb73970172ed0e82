"""Shared fixtures for topic-index tests."""

import pytest
from loguru import logger

import topic_index


@pytest.fixture(scope="session")
def indexer():
    """Default-configured indexer shared by all tests."""
    return topic_index.TopicIndexer()


@pytest.fixture(autouse=True)
def _quiet_loguru():
    """Undo any sinks a test installed (the CLI reconfigures loguru)."""
    yield
    logger.remove()
    logger.disable("topic_index")


@pytest.fixture
def log_messages():
    """Collect topic_index log messages emitted during a test."""
    messages = []
    logger.enable("topic_index")
    logger.add(messages.append, level="DEBUG", format="{message}")
    return messages
