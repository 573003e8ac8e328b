from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from liftcare.errors import InvalidOrExpiredToken
from liftcare.services.auth import AuthContext
from liftcare.services.tokens import TokenConfigurationError, TokenService

SECRET = "unit-test-secret"


def _auth(**overrides) -> AuthContext:
    fields = dict(user_id="u1", role="customer", email="c@test.com", name="Cust", customer_id="c1")
    fields.update(overrides)
    return AuthContext(**fields)


def test_issue_and_verify_roundtrip():
    service = TokenService(SECRET)
    verified = service.verify(service.issue(_auth()))
    assert verified == _auth()


def test_claims_omit_missing_customer_id():
    service = TokenService(SECRET)
    token = service.issue(_auth(role="admin", customer_id=None))
    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert "customer_id" not in claims
    assert claims["role"] == "admin"


def test_token_expires_after_ttl():
    service = TokenService(SECRET)
    claims = jwt.decode(service.issue(_auth()), SECRET, algorithms=["HS256"])
    assert claims["exp"] - claims["iat"] == 8 * 3600


def test_expired_token_rejected():
    past = datetime.now(timezone.utc) - timedelta(hours=9)
    token = jwt.encode(
        {"id": "u1", "role": "admin", "iat": past, "exp": past + timedelta(hours=8)},
        SECRET, algorithm="HS256",
    )
    with pytest.raises(InvalidOrExpiredToken):
        TokenService(SECRET).verify(token)


def test_wrong_signature_rejected():
    token = TokenService("another-secret").issue(_auth())
    with pytest.raises(InvalidOrExpiredToken):
        TokenService(SECRET).verify(token)


def test_malformed_token_rejected():
    with pytest.raises(InvalidOrExpiredToken):
        TokenService(SECRET).verify("not-a-jwt")


def test_token_without_role_rejected():
    token = jwt.encode({"id": "u1"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidOrExpiredToken):
        TokenService(SECRET).verify(token)


def test_missing_secret_fails_at_construction():
    with pytest.raises(TokenConfigurationError):
        TokenService("")
