"""Credentials capability for SMB credential injection.

Credential injection only needs a user name and a password; it should not
depend on the addon's full settings object. Implementations expose just those
two accessors. Either may return an empty string to mean "not configured".
"""

import abc
from dataclasses import dataclass

# pylint: disable=too-few-public-methods


class Credentials(abc.ABC):
    """Read-only access to the SMB account configured for the share."""

    @abc.abstractmethod
    def user(self) -> str:
        """Return the SMB user name, or ``""`` when none is configured."""

    @abc.abstractmethod
    def password(self) -> str:
        """Return the SMB password, or ``""`` when none is configured."""


@dataclass(frozen=True)
class StaticCredentials(Credentials):
    """Credentials fixed at construction time."""

    username: str = ""
    secret: str = ""

    def user(self) -> str:
        return self.username

    def password(self) -> str:
        return self.secret
