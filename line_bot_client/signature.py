"""
LINE Bot Client - Webhook Signature

Verification of the ``x-line-signature`` header sent with every webhook
request.
"""

import base64
import binascii
import hashlib
import hmac
from typing import Union


def compute_signature(body: Union[str, bytes], channel_secret: str) -> str:
    """Base64 HMAC-SHA256 of ``body`` keyed by ``channel_secret``."""
    return base64.b64encode(_digest(body, channel_secret)).decode("ascii")


def validate_signature(body: Union[str, bytes], channel_secret: str, signature: str) -> bool:
    """
    Check a webhook signature.

    Args:
        body: Raw request body, exactly as received
        channel_secret: Channel secret
        signature: Value of the ``x-line-signature`` header

    Returns:
        True if the signature matches the body

    Raises:
        TypeError: If ``body`` or ``channel_secret`` has the wrong type
    """
    expected = _digest(body, channel_secret)
    try:
        received = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError, TypeError):
        return False
    return hmac.compare_digest(expected, received)


def _digest(body: Union[str, bytes], channel_secret: str) -> bytes:
    if isinstance(body, str):
        body = body.encode("utf-8")
    elif isinstance(body, (bytearray, memoryview)):
        body = bytes(body)
    elif not isinstance(body, bytes):
        raise TypeError(f"body must be str or bytes, not {type(body).__name__}")
    if not isinstance(channel_secret, str):
        raise TypeError(f"channel_secret must be str, not {type(channel_secret).__name__}")
    return hmac.new(channel_secret.encode("utf-8"), body, hashlib.sha256).digest()
