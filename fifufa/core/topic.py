from __future__ import annotations

from fifufa.core import messages


MIN_TOPIC_LENGTH = 2
MAX_TOPIC_LENGTH = 50


class TopicValidationError(ValueError):
    """Raised when a topic cannot be submitted; the message is user-facing."""


def clip_topic(raw: str) -> str:
    # Input field never holds more than MAX_TOPIC_LENGTH characters.
    return (raw or "")[:MAX_TOPIC_LENGTH]


def validate_topic(raw: str) -> str:
    sanitized = (raw or "").strip()
    if not sanitized:
        raise TopicValidationError(messages.TOPIC_REQUIRED)
    if len(sanitized) < MIN_TOPIC_LENGTH:
        raise TopicValidationError(messages.TOPIC_TOO_SHORT)
    if len(sanitized) > MAX_TOPIC_LENGTH:
        raise TopicValidationError(messages.TOPIC_TOO_LONG)
    return sanitized


def char_count(topic: str) -> str:
    return f"{len(topic)}/{MAX_TOPIC_LENGTH} characters"
