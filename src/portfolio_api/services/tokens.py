"""Signed session tokens binding an admin identity to a role.

Tokens are HS256 JWTs carrying ``sub`` (user id), ``role``, ``iat`` and
``exp``. There is no refresh: once a token expires the user logs in again.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from portfolio_api.errors import ConfigurationError, InvalidToken

ALGORITHM = "HS256"
DEFAULT_LIFETIME = timedelta(days=7)


@dataclass(frozen=True)
class Identity:
    """The caller resolved from a verified token."""

    id: str
    role: str


class TokenService:
    """Issue and verify session tokens.

    Args:
        secret: Signing key. Must not be empty.
        lifetime: How long an issued token stays valid.
    """

    def __init__(self, secret: str, lifetime: timedelta = DEFAULT_LIFETIME) -> None:
        if not secret:
            raise ConfigurationError("Token signing key must not be empty")
        self._secret = secret
        self.lifetime = lifetime

    def issue(self, identity: str, role: str) -> str:
        now = datetime.now(UTC)
        payload = {
            "sub": identity,
            "role": role,
            "iat": int(now.timestamp()),
            "exp": int((now + self.lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Identity:
        """Decode ``token`` and return the identity it carries.

        Raises:
            InvalidToken: If the token is expired, badly signed, malformed,
                or missing the ``sub``/``role`` claims.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidToken("Token expirado") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidToken() from exc

        subject = payload.get("sub")
        role = payload.get("role")
        if not isinstance(subject, str) or not isinstance(role, str):
            raise InvalidToken()
        return Identity(id=subject, role=role)
