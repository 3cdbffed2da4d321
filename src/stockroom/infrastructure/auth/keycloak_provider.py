"""Keycloak OIDC token verifier."""

import logging

from jwcrypto.common import JWException
from jwcrypto.jwt import JWTExpired
from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from stockroom.application.ports import VerifiedToken
from stockroom.domain.exceptions import ExpiredCredentials, MalformedCredentials

logger = logging.getLogger("stockroom.auth")


class KeycloakTokenVerifier:
    """Validates bearer JWTs against the realm's public keys."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
        keycloak: KeycloakOpenID | None = None,
    ) -> None:
        self._keycloak = keycloak or KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def verify(self, token: str) -> VerifiedToken:
        """Decode and validate a JWT.

        Raises ExpiredCredentials when the signature is valid but ``exp`` has
        passed, and MalformedCredentials for anything else that fails.
        """
        try:
            claims = self._keycloak.decode_token(token, validate=True)
        except JWTExpired as e:
            raise ExpiredCredentials("Token has expired") from e
        except (JWException, KeycloakError, ValueError) as e:
            logger.debug("Token rejected: %s", e)
            raise MalformedCredentials("Invalid token") from e

        subject = claims.get("sub") if isinstance(claims, dict) else None
        if not subject:
            raise MalformedCredentials("Token has no subject")
        return VerifiedToken(
            subject=subject,
            email=claims.get("email"),
            username=claims.get("preferred_username"),
        )
