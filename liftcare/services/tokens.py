"""Stateless bearer tokens: HS256 JWTs carrying the caller's identity claims."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from liftcare.errors import InvalidOrExpiredToken
from liftcare.services.auth import AuthContext

logger = logging.getLogger(__name__)

TOKEN_TTL_HOURS = 8


class TokenConfigurationError(RuntimeError):
    """Raised at startup when no signing secret is configured."""


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256", ttl_hours: int = TOKEN_TTL_HOURS):
        if not secret:
            raise TokenConfigurationError("JWT_SECRET is not configured")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(hours=ttl_hours)

    def issue(self, auth: AuthContext) -> str:
        now = datetime.now(timezone.utc)
        payload = auth.to_claims()
        payload.update({"iat": now, "exp": now + self._ttl})
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> AuthContext:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise InvalidOrExpiredToken()
        except JWTError as e:
            logger.debug("Token rejected: %s", e)
            raise InvalidOrExpiredToken()

        user_id = payload.get("id")
        role = payload.get("role")
        if not user_id or not role:
            raise InvalidOrExpiredToken()

        return AuthContext(
            user_id=str(user_id),
            role=str(role),
            email=payload.get("email", ""),
            name=payload.get("name", ""),
            customer_id=payload.get("customer_id"),
        )
