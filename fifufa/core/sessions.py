"""In-process view state, one FactView per client.

Nothing is persisted. Only clients that act on the page get a stored view;
the registry holds at most ``max_views`` of them and forgets the least
recently used one first.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable, Optional

from fifufa.tools.facts_api import FactsApiClient
from fifufa.view import FactView


DEFAULT_MAX_VIEWS = 1000


class SessionRegistry:
    def __init__(
        self,
        api_factory: Optional[Callable[[], FactsApiClient]] = None,
        max_views: int = DEFAULT_MAX_VIEWS,
    ):
        self._api_factory = api_factory or FactsApiClient
        self.max_views = max_views
        self._views: "OrderedDict[str, FactView]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, client_id: str) -> FactView:
        """Return the client's view, creating and storing it if needed."""
        with self._lock:
            view = self._views.get(client_id)
            if view is None:
                view = FactView(api=self._api_factory())
                self._views[client_id] = view
                while len(self._views) > self.max_views:
                    self._views.popitem(last=False)
            else:
                self._views.move_to_end(client_id)
            return view

    def peek(self, client_id: str) -> FactView:
        """Return the client's view, or a fresh unstored one for unknown clients."""
        with self._lock:
            view = self._views.get(client_id)
        if view is None:
            view = FactView(api=self._api_factory())
        return view

    def __contains__(self, client_id: str) -> bool:
        return client_id in self._views

    def __len__(self) -> int:
        return len(self._views)
