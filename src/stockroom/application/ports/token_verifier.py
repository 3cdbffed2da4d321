"""Token verifier port - authentication collaborator."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class VerifiedToken:
    """Claims of a token that passed verification."""

    subject: str
    email: str | None = None
    username: str | None = None


class TokenVerifier(Protocol):
    """Port for validating bearer tokens.

    Raises ``ExpiredCredentials`` or ``MalformedCredentials``; never returns
    an unverified token.
    """

    def verify(self, token: str) -> VerifiedToken: ...
