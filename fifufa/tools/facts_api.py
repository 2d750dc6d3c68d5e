from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from config.settings import get_settings
from fifufa.core import messages


logger = logging.getLogger("fifufa.facts_api")

FACTS_PATH = "/api/facts"
RANDOM_WORDS_PATH = "/api/random-words"

_NUMBERED_ITEM = re.compile(r"\d+\.\s")


class FactsApiError(RuntimeError):
    """A failed call to the fact service.

    ``status_code`` is ``None`` when no HTTP response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FactsRequest(BaseModel):
    topic: str = Field(..., description="Topic to generate facts about")
    more: Optional[bool] = Field(None, description="Ask for additional facts on the same topic")


class RandomWord(BaseModel):
    word: str = Field(..., description="Suggested topic")
    remaining: int = Field(0, description="Words left in the service's cache")


def normalize_facts(value: Any) -> List[str]:
    """Turn the service's ``facts`` field into a list of fact strings.

    A list is taken as-is. A string is treated as a numbered list
    ("1. foo 2. bar") and split on the item markers.
    """
    if isinstance(value, list):
        return [str(item) for item in value]
    if isinstance(value, str):
        return [piece.strip() for piece in _NUMBERED_ITEM.split(value) if piece.strip()]
    return []


def _decode(response: httpx.Response, fallback: str) -> Dict[str, Any]:
    try:
        data = response.json()
    except ValueError as exc:
        raise FactsApiError(
            f"{fallback}: undecodable response body", response.status_code
        ) from exc

    if not isinstance(data, dict):
        data = {}

    if not response.is_success:
        raise FactsApiError(str(data.get("error") or fallback), response.status_code)
    return data


class FactsApiClient:
    """Thin httpx wrapper around the fact-generation service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.facts_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.facts_api_timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self._transport)

    def _request(self, method: str, path: str, fallback: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            with self._client() as client:
                response = client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise FactsApiError(f"{fallback}: {exc}") from exc
        return _decode(response, fallback)

    def fetch_facts(self, topic: str, more: bool = False) -> List[str]:
        payload = FactsRequest(topic=topic, more=True if more else None)
        fallback = messages.FETCH_MORE_FALLBACK if more else messages.FETCH_FACTS_FALLBACK
        data = self._request(
            "POST", FACTS_PATH, fallback, json=payload.model_dump(exclude_none=True)
        )
        facts = normalize_facts(data.get("facts"))
        logger.info("Fetched %s facts (topic_len=%s more=%s)", len(facts), len(topic), more)
        return facts

    def fetch_random_word(self) -> RandomWord:
        data = self._request("GET", RANDOM_WORDS_PATH, messages.RANDOM_WORD_FALLBACK)
        try:
            return RandomWord(**data)
        except ValidationError as exc:
            raise FactsApiError(f"{messages.RANDOM_WORD_FALLBACK}: {exc}") from exc
