from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints

from liftcare.schemas.common import OptionalStr, RequiredStr
from liftcare.services.auth import MAX_PASSWORD_BYTES


def _fits_bcrypt(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


# Passwords are taken verbatim, surrounding whitespace included
LoginPassword = Annotated[str, StringConstraints(min_length=1)]
NewPassword = Annotated[str, StringConstraints(min_length=1), AfterValidator(_fits_bcrypt)]


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: RequiredStr
    password: NewPassword
    name: RequiredStr
    role: OptionalStr = None
    customer_id: OptionalStr = Field(default=None, alias="customerId")


class LoginRequest(BaseModel):
    email: RequiredStr
    password: LoginPassword


class ChangePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_password: LoginPassword = Field(alias="currentPassword")
    new_password: NewPassword = Field(alias="newPassword")


class UserOut(BaseModel):
    id: str
    email: str
    name: str
    role: str
    customer_id: str | None = None


class AuthResponse(BaseModel):
    user: UserOut
    token: str
