"""
LINE Bot Client - HTTP Dispatcher

This module sends exactly one HTTP request per call: it expands the endpoint
path, encodes the body (JSON, raw binary, multipart or url-encoded form),
attaches authentication and any pending one-shot options, and turns the
response into an ``Envelope`` or an ``ApiError``.
"""

from __future__ import annotations

import logging
import mimetypes
import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote

import httpx

from line_bot_client.config import (
    ACCEPTED_REQUEST_ID_HEADER,
    DEFAULT_CONFIG,
    REQUEST_ID_HEADER,
    USER_AGENT,
    ClientConfig,
    Endpoint,
)
from line_bot_client.exceptions import (
    InvalidArgumentError,
    LineBotConnectionError,
    LineBotTimeoutError,
    error_for_status,
)
from line_bot_client.models import to_wire
from line_bot_client.request_options import OneShotOptionSlot

logger = logging.getLogger("line_bot_client")

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

BINARY_TYPES = (bytes, bytearray, memoryview)


@dataclass
class Envelope:
    """
    Raw result of a dispatched request.

    Attributes:
        status_code: HTTP status code
        headers: Response headers (case-insensitive)
        body: Parsed JSON, or ``bytes`` for binary-content endpoints
    """
    status_code: int
    headers: httpx.Headers
    body: Any

    @property
    def request_id(self) -> Optional[str]:
        return self.headers.get(REQUEST_ID_HEADER)

    @property
    def accepted_request_id(self) -> Optional[str]:
        return self.headers.get(ACCEPTED_REQUEST_ID_HEADER)


def is_binary(value: Any) -> bool:
    """Whether ``value`` can be sent as a raw request body."""
    return isinstance(value, BINARY_TYPES)


def stringify(value: Any) -> str:
    """Render a form or query value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def expand_path(template: str, values: Sequence[Any]) -> str:
    """
    Substitute ``{name}`` placeholders with ``values`` in declaration order.

    Each value is percent-encoded as a single path segment.

    Raises:
        InvalidArgumentError: If the number of values does not match
    """
    names = _PLACEHOLDER.findall(template)
    if len(names) != len(values):
        raise InvalidArgumentError(
            f"{template} expects {len(names)} path value(s), got {len(values)}"
        )
    remaining = iter(values)
    return _PLACEHOLDER.sub(lambda _: quote_segment(next(remaining)), template)


def quote_segment(value: Any) -> str:
    return quote(stringify(value), safe="")


def _file_part(name: str, value: Any) -> Tuple[str, Any, str]:
    """
    Normalize a file value to an httpx ``(filename, content, content_type)`` part.

    Raises:
        InvalidArgumentError: If ``value`` is not bytes, a readable object
            or a ``(filename, content[, content_type])`` tuple
    """
    if isinstance(value, tuple):
        if len(value) in (2, 3) and (is_binary(value[1]) or hasattr(value[1], "read")):
            return value
        raise InvalidArgumentError(f"invalid file part for {name}")
    if not (is_binary(value) or hasattr(value, "read")):
        raise InvalidArgumentError(f"invalid file part for {name}")
    file_name = getattr(value, "name", None)
    filename = os.path.basename(file_name) if isinstance(file_name, str) else name
    content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    if is_binary(value):
        value = bytes(value)
    return (filename, value, content_type)


def _encode_query(query: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if not query:
        return None
    params: Dict[str, Any] = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params[key] = [stringify(v) for v in value]
        else:
            params[key] = stringify(value)
    return params


class AsyncDispatcher:
    """
    Low-level async HTTP dispatcher shared by all resources.

    Args:
        config: Client configuration (base URLs, timeout)
        channel_access_token: Bearer token; omitted for the OAuth endpoints
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        config: ClientConfig = DEFAULT_CONFIG,
        channel_access_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._channel_access_token = channel_access_token
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None
        self.options = OneShotOptionSlot()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._http_client is None:
            headers = {"User-Agent": USER_AGENT}
            if self._channel_access_token:
                headers["Authorization"] = f"Bearer {self._channel_access_token}"

            self._http_client = httpx.AsyncClient(
                headers=headers,
                timeout=httpx.Timeout(self._config.timeout),
                transport=self._transport,
            )

        return self._http_client

    def build_url(self, endpoint: Endpoint, path_values: Sequence[Any] = ()) -> str:
        """Absolute URL of ``endpoint`` with its placeholders filled in."""
        return self._config.base_url(endpoint.surface) + expand_path(endpoint.path, path_values)

    def _encode_body(
        self,
        body: Any,
        form: Optional[Mapping[str, Any]],
        files: Optional[Mapping[str, Any]],
        content_type: Optional[str],
    ) -> Tuple[Dict[str, Any], Optional[str]]:
        """Return httpx request kwargs and the Content-Type to send, if any."""
        if form is not None:
            data = {k: stringify(v) for k, v in form.items() if v is not None}
            return {"data": data}, None

        if files is not None:
            fields = {k: stringify(v) for k, v in (body or {}).items() if v is not None}
            parts = {name: _file_part(name, value) for name, value in files.items()}
            return {"data": fields, "files": parts}, None

        if body is None:
            return {}, None

        if is_binary(body):
            return {"content": bytes(body)}, content_type or "application/octet-stream"

        return {"json": to_wire(body)}, "application/json"

    async def dispatch(
        self,
        endpoint: Endpoint,
        path_values: Sequence[Any] = (),
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        form: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, Any]] = None,
        content_type: Optional[str] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
    ) -> Envelope:
        """
        Send one request to ``endpoint``.

        Args:
            endpoint: Endpoint descriptor
            path_values: Values for the path placeholders, in order
            query: Query parameters (``None`` values are dropped)
            body: JSON-serializable value or raw bytes; with ``files``, the
                plain fields of the multipart body
            form: Fields sent as application/x-www-form-urlencoded
            files: File parts; their presence makes the body multipart/form-data
            content_type: Content-Type for a raw binary body
            headers: Extra headers for this request only

        Returns:
            Envelope with status, headers and body

        Raises:
            InvalidArgumentError: If the path values do not fit the template or a
                file part is not bytes, a readable object or a file tuple
            ApiError: If the API returns a non-2xx status
            LineBotConnectionError: If the request could not be sent
            LineBotTimeoutError: If the request timed out
        """
        url = self.build_url(endpoint, path_values)
        params = _encode_query(query)
        request_kwargs, body_type = self._encode_body(body, form, files, content_type)

        # Claimed before the first await so no concurrent dispatch sees it too.
        request_headers = self.options.take()
        if body_type:
            request_headers["Content-Type"] = body_type
        if headers:
            request_headers.update({k: v for k, v in headers.items() if v is not None})

        logger.debug(f"Making {endpoint.method} request to {url}")

        client = self._get_client()
        try:
            response = await client.request(
                method=endpoint.method,
                url=url,
                params=params,
                headers=request_headers,
                **request_kwargs,
            )
        except httpx.TimeoutException as e:
            raise LineBotTimeoutError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise LineBotConnectionError(f"Request failed: {e}") from e

        return self._handle_response(endpoint, response)

    def _handle_response(self, endpoint: Endpoint, response: httpx.Response) -> Envelope:
        """Turn a response into an Envelope, raising on non-2xx status."""
        logger.debug(f"Response status: {response.status_code}")

        headers = httpx.Headers(response.headers)

        if response.is_success:
            if endpoint.binary_response:
                body: Any = response.content
            elif not response.content:
                body = {}
            else:
                try:
                    body = response.json()
                except ValueError:
                    body = response.text
            return Envelope(response.status_code, headers, body)

        try:
            error_body: Any = response.json()
        except ValueError:
            error_body = response.text

        raise error_for_status(response.status_code, error_body, headers)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
