import json

import httpx
import pytest

from fifufa.tools.facts_api import FactsApiClient


BASE_URL = "http://facts.test"


class FakeFactService:
    """Records requests and answers with queued (status, body) pairs."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def queue(self, status=200, body=None, raw=None):
        self.responses.append((status, body, raw))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise httpx.ConnectError("connection refused", request=request)
        status, body, raw = self.responses.pop(0)
        if raw is not None:
            return httpx.Response(status, content=raw)
        return httpx.Response(status, json=body)

    def last_json(self):
        return json.loads(self.requests[-1].content)

    def client(self) -> FactsApiClient:
        return FactsApiClient(base_url=BASE_URL, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def service():
    return FakeFactService()


@pytest.fixture
def api(service):
    return service.client()
