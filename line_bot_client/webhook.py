"""
LINE Bot Client - Webhook Parser

Verifies and parses the body of a webhook request.

Example:
    parser = WebhookParser(channel_secret)

    # In your webhook handler:
    signature = request.headers["x-line-signature"]
    body = await request.body()
    payload = parser.parse(body, signature)
    for event in payload.events:
        if event["type"] == "message":
            ...
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from line_bot_client.exceptions import SignatureValidationFailed, WebhookParseError
from line_bot_client.signature import validate_signature

logger = logging.getLogger("line_bot_client")

SIGNATURE_HEADER = "x-line-signature"


@dataclass
class WebhookPayload:
    """Parsed webhook body."""
    destination: Optional[str] = None
    events: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebhookPayload":
        return cls(
            destination=data.get("destination"),
            events=list(data.get("events") or []),
        )


class WebhookParser:
    """
    Verifies the signature of a webhook body, then parses it.

    Args:
        channel_secret: Channel secret used to sign webhook requests
    """

    def __init__(self, channel_secret: str):
        self.channel_secret = channel_secret

    def parse(self, body: Union[str, bytes], signature: str) -> WebhookPayload:
        """
        Verify and parse a webhook request body.

        Args:
            body: Raw request body
            signature: ``x-line-signature`` header value

        Returns:
            WebhookPayload

        Raises:
            SignatureValidationFailed: If the signature does not match
            WebhookParseError: If the body is not a JSON object
        """
        if not validate_signature(body, self.channel_secret, signature):
            raise SignatureValidationFailed(signature=signature)

        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
        try:
            data = json.loads(text)
        except ValueError as e:
            raise WebhookParseError(f"Failed to parse webhook body: {e}", raw_body=text) from e

        if not isinstance(data, dict):
            raise WebhookParseError("Webhook body must be a JSON object", raw_body=text)

        payload = WebhookPayload.from_dict(data)
        logger.debug(f"Parsed webhook with {len(payload.events)} event(s)")
        return payload
