"""FastAPI dependency providers for auth and role enforcement."""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from liftcare.access.capabilities import allowed_roles
from liftcare.errors import Forbidden, MissingToken
from liftcare.services.auth import AuthContext
from liftcare.services.tokens import TokenService

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


async def require_auth(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthContext:
    """Require a valid bearer token. Returns AuthContext."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise MissingToken()
    return tokens.verify(credentials.credentials)


def require_role(*allowed: str):
    """Factory: returns a dependency that enforces role membership."""
    async def _check(auth: AuthContext = Depends(require_auth)) -> AuthContext:
        if auth.role not in allowed:
            raise Forbidden()
        return auth
    return _check


def guard(resource: str, action: str):
    """Dependency for a declared operation: authenticate, then check the capability table.

    The lookup happens when the route is defined, so an operation missing
    from the table fails at import rather than at request time.
    """
    roles = allowed_roles(resource, action)
    if roles is None:
        return require_auth
    return require_role(*sorted(roles))
