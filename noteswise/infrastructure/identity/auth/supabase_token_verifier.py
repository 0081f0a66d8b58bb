"""Verification of access tokens issued by Supabase Auth."""

import logging

import jwt
from jwt import InvalidTokenError, PyJWKClient, PyJWKClientError

from noteswise.config import Settings
from noteswise.domain.common.value_objects import OwnerId

logger = logging.getLogger(__name__)

HS_ALGORITHM = "HS256"
ASYMMETRIC_ALGORITHMS = ["RS256", "ES256"]


class SupabaseTokenVerifier:
    """
    Verifies Supabase access tokens and yields the owner id (``sub`` claim).

    Tokens signed with the shared project secret (HS256) are verified locally.
    When the project URL is configured, asymmetric tokens are verified against
    the project's JWKS endpoint.
    """

    def __init__(self, settings: Settings) -> None:
        self.secret = settings.SUPABASE_JWT_SECRET
        self.audience = settings.SUPABASE_JWT_AUDIENCE
        self.jwks_client = PyJWKClient(settings.jwks_url) if settings.jwks_url else None

    def verify(self, token: str) -> OwnerId | None:
        """Verify a token and return its owner if valid."""
        try:
            payload = self._decode(token)
        except (InvalidTokenError, PyJWKClientError) as e:
            logger.debug(f"Rejected access token: {e!s}")
            return None

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject.strip():
            return None
        return OwnerId(subject)

    def _decode(self, token: str) -> dict:
        header = jwt.get_unverified_header(token)
        algorithm = header.get("alg")

        if algorithm == HS_ALGORITHM:
            if not self.secret:
                raise InvalidTokenError("HS256 tokens are not accepted by this server")
            key: object = self.secret
            algorithms = [HS_ALGORITHM]
        elif algorithm in ASYMMETRIC_ALGORITHMS and self.jwks_client is not None:
            key = self.jwks_client.get_signing_key_from_jwt(token).key
            algorithms = ASYMMETRIC_ALGORITHMS
        else:
            raise InvalidTokenError(f"Unsupported signing algorithm: {algorithm}")

        return jwt.decode(
            token,
            key,  # type: ignore[arg-type]
            algorithms=algorithms,
            audience=self.audience,
            options={"require": ["exp", "sub"]},
        )
