"""Auth API: register, login, current identity, password change."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db.engine import get_db
from liftcare.dependencies import get_token_service, guard
from liftcare.errors import InvalidCredentials
from liftcare.schemas import (
    AuthResponse, ChangePasswordRequest, LoginRequest, MessageResponse, RegisterRequest, UserOut,
)
from liftcare.services.auth import (
    AuthContext, authenticate, change_password, register_user, resolve_customer_id,
)
from liftcare.services.tokens import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _user_out(auth: AuthContext) -> UserOut:
    return UserOut(
        id=auth.user_id, email=auth.email, name=auth.name,
        role=auth.role, customer_id=auth.customer_id,
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    user = await register_user(
        db, body.email, body.password, body.name,
        role=body.role, customer_id=body.customer_id,
    )
    auth = AuthContext.from_user(user)
    return AuthResponse(user=_user_out(auth), token=tokens.issue(auth))


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    user = await authenticate(db, body.email, body.password)
    if user is None:
        logger.warning("Failed login for %s", body.email)
        raise InvalidCredentials()

    # Customer identities without a stored link are matched on contact email
    auth = AuthContext.from_user(user, await resolve_customer_id(db, user))
    return AuthResponse(user=_user_out(auth), token=tokens.issue(auth))


@router.get("/me")
async def me(auth: AuthContext = Depends(guard("auth", "me"))):
    return {"user": auth.to_claims()}


@router.post("/change-password", response_model=MessageResponse)
async def change_own_password(
    body: ChangePasswordRequest,
    auth: AuthContext = Depends(guard("auth", "change_password")),
    db: AsyncSession = Depends(get_db),
):
    await change_password(db, auth.user_id, body.current_password, body.new_password)
    return MessageResponse(message="Password changed")
