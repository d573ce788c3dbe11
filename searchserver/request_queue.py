"""Tracking how many recent search requests returned nothing."""

from __future__ import annotations

from collections import deque

from searchserver.document import Document, DocumentStatus
from searchserver.search_server import DocumentPredicate, SearchServer

MINUTES_IN_DAY = 1440


class RequestQueue:
    """Forwards queries to a server and keeps a window of the last day's requests."""

    def __init__(self, search_server: SearchServer) -> None:
        self._search_server = search_server
        self._requests: deque[bool] = deque()
        self._no_result_count = 0

    def add_find_request(
        self,
        raw_query: str,
        predicate: DocumentStatus | DocumentPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """Run a query against the server and record whether it found anything."""
        result = self._search_server.find_top_documents(raw_query, predicate)
        if len(self._requests) >= MINUTES_IN_DAY:
            if self._requests.popleft():
                self._no_result_count -= 1
        empty = not result
        if empty:
            self._no_result_count += 1
        self._requests.append(empty)
        return result

    def no_result_requests(self) -> int:
        """Number of requests in the window that returned no documents."""
        return self._no_result_count