"""Base64 text transforms used by the global ID codec."""

from base64 import b64decode, b64encode
from typing import Any


def base64(s: str) -> str:
    """Encode a string as standard base64 over its UTF-8 bytes.

    Args:
        s: The text to encode.

    Returns:
        The base64 representation as an ASCII string.
    """
    return b64encode(s.encode("utf-8")).decode("ascii")


def unbase64(s: Any) -> str:
    """Decode a base64 string produced by :func:`base64`.

    Never raises: anything that is not strictly valid base64 of UTF-8
    text decodes to the empty string.

    Args:
        s: The value to decode, typically a client supplied argument.

    Returns:
        The decoded text, or ``""`` if it cannot be decoded.
    """
    if not isinstance(s, str):
        return ""
    try:
        b = s.encode("ascii")
    except UnicodeEncodeError:
        return ""
    try:
        return b64decode(b, validate=True).decode("utf-8")
    # binascii.Error and UnicodeDecodeError are both ValueErrors
    except ValueError:
        return ""
