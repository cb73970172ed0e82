"""topic-index error types."""


class TopicIndexError(Exception):
    """Base error for all topic-index failures."""


class TopicIndexUsageError(TopicIndexError):
    """Invalid topic word or command-line usage."""


class TopicIndexInputError(TopicIndexError):
    """Input stream or file could not be opened or read."""


class TopicIndexConfigError(TopicIndexError):
    """Stop-word file or settings are invalid."""
