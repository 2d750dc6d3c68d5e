from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from fifufa import decor
from fifufa.core import messages
from fifufa.core.topic import TopicValidationError, char_count, clip_topic, validate_topic
from fifufa.tools.facts_api import FactsApiClient, FactsApiError


logger = logging.getLogger("fifufa.view")

MORE_FACTS_LIMIT = 5


def describe_failure(exc: Exception) -> List[str]:
    """Pick the canned fact list shown when a topic submission fails."""
    text = str(exc)
    if "429" in text or "Too many requests" in text:
        return list(messages.TOO_MANY_REQUESTS)
    if "500" in text or "Something went wrong" in text:
        return list(messages.SERVER_ISSUE)
    return list(messages.GENERIC_FAILURE)


class FactView:
    """Transient state of the fun-facts page for one client.

    Every operation is ignored while its own loading flag is set.
    """

    def __init__(self, api: Optional[FactsApiClient] = None):
        self.api = api or FactsApiClient()
        self.topic = ""
        self.facts: List[str] = []
        self.loading = False
        self.loading_more = False
        self.loading_random_word = False
        self.error = ""
        self.floating_elements = decor.floating_elements()
        self._lock = threading.Lock()

    def _claim(self, flag: str) -> bool:
        with self._lock:
            if getattr(self, flag):
                return False
            setattr(self, flag, True)
            return True

    def _release(self, flag: str) -> None:
        with self._lock:
            setattr(self, flag, False)

    def set_topic(self, value: str) -> None:
        self.topic = clip_topic(value)

    def submit(self) -> None:
        try:
            sanitized = validate_topic(self.topic)
        except TopicValidationError as exc:
            self.error = str(exc)
            return

        if not self._claim("loading"):
            return
        self.error = ""
        with self._lock:
            self.facts = []
        try:
            facts = self.api.fetch_facts(sanitized)
        except FactsApiError as exc:
            logger.warning("Fetching facts failed (status=%s): %s", exc.status_code, exc)
            facts = describe_failure(exc)
        except Exception:
            self._release("loading")
            raise
        with self._lock:
            self.facts = facts
            self.loading = False

    def load_more(self) -> None:
        if not self.topic:
            return
        if not self._claim("loading_more"):
            return
        try:
            extra = self.api.fetch_facts(self.topic, more=True)
        except FactsApiError as exc:
            logger.warning("Fetching more facts failed (status=%s): %s", exc.status_code, exc)
            extra = [messages.MORE_FAILURE]
        except Exception:
            self._release("loading_more")
            raise
        with self._lock:
            self.facts = self.facts + extra
            self.loading_more = False

    def random_topic(self) -> None:
        if not self._claim("loading_random_word"):
            return
        try:
            suggestion = self.api.fetch_random_word()
        except FactsApiError as exc:
            logger.warning("Failed to get random word: %s", exc)
            self.error = messages.RANDOM_TOPIC_FAILURE
        else:
            self.set_topic(suggestion.word)
            self.error = ""
            logger.info(
                "Random word: %s, %s remaining in cache", suggestion.word, suggestion.remaining
            )
        finally:
            self._release("loading_random_word")

    def handle_key(self, key: str) -> None:
        if key == "Enter":
            self.submit()
        elif key == "Escape":
            self.topic = ""
            self.error = ""

    @property
    def can_submit(self) -> bool:
        return not self.loading and bool(self.topic.strip())

    @property
    def can_load_more(self) -> bool:
        return 0 < len(self.facts) <= MORE_FACTS_LIMIT

    def snapshot(self) -> Dict[str, Any]:
        return {
            "topic": self.topic,
            "char_count": char_count(self.topic),
            "facts": [
                {"number": idx + 1, "text": fact, "accent": decor.accent_for(idx)}
                for idx, fact in enumerate(self.facts)
            ],
            "error": self.error,
            "loading": self.loading,
            "loading_more": self.loading_more,
            "loading_random_word": self.loading_random_word,
            "can_submit": self.can_submit,
            "can_load_more": self.can_load_more,
            "labels": decor.button_labels(self.loading, self.loading_more),
            "floating_elements": self.floating_elements,
        }
