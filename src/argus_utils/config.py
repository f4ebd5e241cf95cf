"""Configuration utilities for ARGUS UTILS.

This module centralizes the environment variables the helpers read and small
accessors for them.
"""

import os

from argus_utils.interfaces.credentials import StaticCredentials
from argus_utils.utils.formatting import DEFAULT_MAX_CAPACITY

SMB_USER_ENV = "ARGUS_SMB_USER"  # pragma: no mutate
SMB_PASS_ENV = "ARGUS_SMB_PASS"  # pragma: no mutate
FORMAT_MAX_CAPACITY_ENV = "ARGUS_FORMAT_MAX_CAPACITY"  # pragma: no mutate


class InvalidConfigValueError(Exception):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"{name}={value!r} is invalid: {reason}")
        self.name = name
        self.value = value


def get_smb_credentials() -> StaticCredentials:
    """Build SMB credentials from the environment.

    Returns:
        Credentials read from `ARGUS_SMB_USER` and `ARGUS_SMB_PASS`. Unset
        variables become empty strings, which disables injection.
    """
    return StaticCredentials(
        username=os.environ.get(SMB_USER_ENV, ""),
        secret=os.environ.get(SMB_PASS_ENV, ""),
    )


def get_format_max_capacity() -> int:
    """Return the formatter's growth limit.

    Returns:
        The value of `ARGUS_FORMAT_MAX_CAPACITY`, or the built-in default when
        it is unset.

    Raises:
        InvalidConfigValueError: If the value is not a positive integer.
    """
    if not (raw := os.environ.get(FORMAT_MAX_CAPACITY_ENV)):
        return DEFAULT_MAX_CAPACITY
    try:
        value = int(raw)
    except ValueError as e:
        raise InvalidConfigValueError(
            FORMAT_MAX_CAPACITY_ENV, raw, "not an integer"
        ) from e
    if value < 1:
        raise InvalidConfigValueError(FORMAT_MAX_CAPACITY_ENV, raw, "must be positive")
    return value
