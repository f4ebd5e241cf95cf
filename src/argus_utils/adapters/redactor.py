"""Regex-based redactor for credentials embedded in URIs.

Masks ``user:pass@`` passwords in any ``scheme://`` URI (``smb://`` paths in
practice) and, in strict mode, the user name as well, including a bare
``user@`` with no password.
"""

import re

from argus_utils.interfaces import redactor
from argus_utils.interfaces.redactor import RedactorMode

# pylint: disable=too-few-public-methods

PLACEHOLDER = "***"
URL_PASSWORD_PATTERN = re.compile(r"(?<=://)([^:@/]+):([^@/]+)@")
URL_USER_PATTERN = re.compile(r"(?<=://)([^:@/]+)(?=(?::[^@/]*)?@)")


class Redactor(redactor.Redactor):
    """Redactor implementation using regex-based sanitization."""

    def __init__(self, mode: RedactorMode = RedactorMode.LENIENT) -> None:
        self._mode = mode

    def sanitize_uri(self, raw_uri: str) -> str:
        # 1) user:pass@  → user:***@
        sanitized = URL_PASSWORD_PATTERN.sub(rf"\1:{PLACEHOLDER}@", str(raw_uri))

        # 2) Strict: redact the user name too (with or without a password)
        if self._mode == RedactorMode.STRICT:
            sanitized = URL_USER_PATTERN.sub(PLACEHOLDER, sanitized)

        return sanitized
