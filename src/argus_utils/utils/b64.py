"""Base64 encoding for binary payloads sent to the recording service.

The URL-safe mode percent-escapes ``+``, ``/`` and ``=`` so the output can be
embedded in a query string as-is. It is *not* RFC 4648 base64url (which swaps
the alphabet instead); the service expects the escaped form.
"""

import base64

STANDARD_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ" "abcdefghijklmnopqrstuvwxyz" "0123456789+/"
)
PAD = "="
URL_ESCAPES = str.maketrans({"+": "%2B", "/": "%2F", PAD: "%3D"})


def b64_encode(data: bytes | bytearray | memoryview, url_encode: bool = False) -> str:
    """Encode ``data`` as padded base64 text.

    Args:
        data: Bytes-like object to encode; may be empty.
        url_encode: Percent-escape ``+``, ``/`` and padding when True.

    Returns:
        str: ``4 * ceil(len(data) / 3)`` characters before escaping.

    Raises:
        TypeError: If ``data`` is not bytes-like.

    Example:
        ```python
        >>> b64_encode(b"M", url_encode=True)
        'TQ%3D%3D'
        ```
    """
    encoded = base64.b64encode(data).decode("ascii")
    if url_encode:
        return encoded.translate(URL_ESCAPES)
    return encoded
