"""Authentication service: bcrypt passwords, caller identity, login lookups."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import bcrypt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.access.roles import CUSTOMER, SELF_REGISTRATION_ROLES, TECHNICIAN
from liftcare.errors import DuplicateEmail, InvalidCredentials, NotFoundError, ValidationError
from liftcare.models import Customer, User

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
MIN_PASSWORD_LENGTH = 8
# bcrypt only accepts this many bytes of input
MAX_PASSWORD_BYTES = 72


@dataclass(frozen=True)
class AuthContext:
    """Verified claims of the caller, attached to every protected request."""

    user_id: str
    role: str  # 'admin' | 'technician' | 'customer' | 'manager'
    email: str
    name: str
    customer_id: str | None = None

    def to_claims(self) -> dict:
        claims = {
            "id": self.user_id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
        }
        if self.customer_id:
            claims["customer_id"] = self.customer_id
        return claims

    @classmethod
    def from_user(cls, user: User, customer_id: str | None = None) -> "AuthContext":
        return cls(
            user_id=user.id,
            role=user.role,
            email=user.email,
            name=user.name,
            customer_id=customer_id if customer_id is not None else user.customer_id,
        )


def hash_password(plain: str) -> str:
    if len(plain.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    password = plain.encode("utf-8")
    if len(password) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(password, hashed.encode("utf-8"))


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalars().first()


async def authenticate(db: AsyncSession, email: str, password: str) -> User | None:
    """Return the user when email and password match, else None."""
    user = await get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


async def resolve_customer_id(db: AsyncSession, user: User) -> str | None:
    """Customer link for a login token.

    Customer identities registered before their Customer record existed are
    matched on the customer's contact email.
    """
    if user.customer_id or user.role != CUSTOMER:
        return user.customer_id
    result = await db.execute(
        select(Customer.id).where(Customer.contact_email == user.email).limit(1)
    )
    return result.scalars().first()


async def register_user(
    db: AsyncSession, email: str, password: str, name: str,
    role: str | None = None, customer_id: str | None = None,
) -> User:
    """Create a self-registered identity.

    Only customer and technician roles can be chosen here; anything else falls
    back to customer. Technicians never carry a customer link.
    """
    role = role if role in SELF_REGISTRATION_ROLES else CUSTOMER
    if role == TECHNICIAN:
        customer_id = None

    return await create_user(db, email, password, name, role, customer_id)


async def create_user(
    db: AsyncSession, email: str, password: str, name: str,
    role: str, customer_id: str | None = None,
) -> User:
    """Insert an identity with any role. Raises DuplicateEmail if the email is taken."""
    if await get_user_by_email(db, email) is not None:
        raise DuplicateEmail()

    if customer_id is not None and await db.get(Customer, customer_id) is None:
        raise ValidationError("customerId does not reference an existing customer")

    user = User(
        email=email,
        password_hash=hash_password(password),
        name=name,
        role=role,
        customer_id=customer_id,
    )
    try:
        async with db.begin_nested():
            db.add(user)
    except IntegrityError:
        raise DuplicateEmail()
    await db.commit()
    await db.refresh(user)
    logger.info("Created user %s with role %s", email, role)
    return user


async def change_password(db: AsyncSession, user_id: str, current_password: str, new_password: str) -> None:
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"New password must be at least {MIN_PASSWORD_LENGTH} characters")

    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    if not verify_password(current_password, user.password_hash):
        raise InvalidCredentials("Current password is incorrect")

    user.password_hash = hash_password(new_password)
    await db.commit()
