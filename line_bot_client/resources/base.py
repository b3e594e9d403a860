"""
LINE Bot Client - Base Resource

This module contains the base class for all API resources and the
``ApiResponse`` container returned by the ``*_with_http_info`` methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    List,
    Optional,
    Sequence,
    Type,
    TypeVar,
    Union,
)

import httpx

from line_bot_client.config import ACCEPTED_REQUEST_ID_HEADER, REQUEST_ID_HEADER, Endpoint
from line_bot_client.dispatcher import AsyncDispatcher
from line_bot_client.models import BaseModel


T = TypeVar("T")


@dataclass
class ApiResponse(Generic[T]):
    """
    Typed response body together with the raw HTTP metadata.

    Attributes:
        status_code: HTTP status code
        headers: Response headers (case-insensitive)
        data: Typed response body
    """
    status_code: int
    headers: httpx.Headers
    data: T

    @property
    def request_id(self) -> Optional[str]:
        """Value of the ``x-line-request-id`` response header."""
        return self.headers.get(REQUEST_ID_HEADER)

    @property
    def accepted_request_id(self) -> Optional[str]:
        """Value of the ``x-line-accepted-request-id`` response header."""
        return self.headers.get(ACCEPTED_REQUEST_ID_HEADER)


def as_list(value: Union[T, Sequence[T]]) -> List[T]:
    """Wrap a single item in a list; pass lists through."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class BaseResource:
    """
    Base class for all API resources.

    Provides common functionality for dispatching requests
    and mapping responses onto models.
    """

    def __init__(self, dispatcher: AsyncDispatcher) -> None:
        """
        Initialize the resource.

        Args:
            dispatcher: The dispatcher shared with the owning client
        """
        self._dispatcher = dispatcher

    async def _request(
        self,
        endpoint: Endpoint,
        model: Optional[Type[BaseModel]] = None,
        path_values: Sequence[Any] = (),
        **kwargs: Any,
    ) -> ApiResponse[Any]:
        """Dispatch ``endpoint`` and map the body onto ``model``."""
        envelope = await self._dispatcher.dispatch(endpoint, path_values, **kwargs)
        data = envelope.body
        if model is not None and isinstance(data, dict):
            data = model.from_dict(data)
        return ApiResponse(envelope.status_code, envelope.headers, data)

    async def _collect_pages(
        self,
        fetch_page: Callable[[Optional[str]], Awaitable[Any]],
        items_attr: str,
    ) -> List[Any]:
        """Call ``fetch_page`` with each continuation token until none is returned."""
        items: List[Any] = []
        start: Optional[str] = None
        while True:
            page = await fetch_page(start)
            items.extend(getattr(page, items_attr))
            start = page.next
            if not start:
                return items
