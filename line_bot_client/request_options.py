"""
LINE Bot Client - Request Options

Per-call options that travel as extra request headers, and the single-slot
store that hands a pending option set to exactly one request.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

from line_bot_client.config import RETRY_KEY_HEADER


@dataclass
class RequestOptions:
    """
    Extra options for a single request.

    Attributes:
        retry_key: Idempotency key sent as ``X-Line-Retry-Key``
        headers: Any other headers to add to the request
    """
    retry_key: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)

    def to_headers(self) -> Dict[str, str]:
        """Render the options as request headers."""
        headers = dict(self.headers)
        if self.retry_key:
            headers[RETRY_KEY_HEADER] = self.retry_key
        return headers


class OneShotOptionSlot:
    """
    Holds at most one pending header set for the next dispatched request.

    ``take()`` reads and clears the slot under a lock, so however many
    requests race for it only one of them receives the headers.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: Optional[Dict[str, str]] = None

    def put(self, headers: Dict[str, str]) -> None:
        """Replace the pending header set."""
        with self._lock:
            self._pending = dict(headers) if headers else None

    def take(self) -> Dict[str, str]:
        """Return the pending headers and clear the slot."""
        with self._lock:
            pending, self._pending = self._pending, None
        return pending or {}

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None
