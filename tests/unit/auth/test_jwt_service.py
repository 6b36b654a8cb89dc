import uuid
from datetime import datetime, timedelta, timezone

import jwt  # PyJWT
import pytest

from studybuddy.core.config import Settings
from studybuddy.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTError,
    JWTService,
    TokenExpiredError,
)
from studybuddy.infrastructure.persistence.models import AccountModel

SECRET_KEY = "unit-test-secret-key-of-sufficient-length"


@pytest.fixture
def jwt_service():
    return JWTService(secret_key=SECRET_KEY)


@pytest.fixture
def account():
    return AccountModel(id="acc-123", email="a@x.com", password_hash="x")


class TestJWTService:

    def test_issue_has_exactly_the_four_claims(self, jwt_service, account):
        """Issued tokens carry id, email, jti and exp and nothing else."""
        token = jwt_service.issue(account)

        decoded = jwt.decode(token, SECRET_KEY, algorithms=["HS256"])

        assert set(decoded) == {"id", "email", "jti", "exp"}
        assert decoded["id"] == "acc-123"
        assert decoded["email"] == "a@x.com"
        uuid.UUID(decoded["jti"])

    def test_issue_uses_hs256(self, jwt_service, account):
        token = jwt_service.issue(account)

        assert jwt.get_unverified_header(token)["alg"] == "HS256"
        assert token.count(".") == 2

    def test_issue_default_lifetime_is_24_hours(self, jwt_service, account):
        now = datetime(2030, 1, 1, tzinfo=timezone.utc)

        token = jwt_service.issue(account, now=now)

        decoded = jwt.decode(
            token, SECRET_KEY, algorithms=["HS256"], options={"verify_exp": False}
        )
        assert decoded["exp"] == int((now + timedelta(hours=24)).timestamp())

    def test_issue_fresh_jti_each_time(self, jwt_service, account):
        first = jwt_service.decode(jwt_service.issue(account))
        second = jwt_service.decode(jwt_service.issue(account))

        assert first["jti"] != second["jti"]

    def test_decode_token_valid(self, jwt_service, account):
        payload = jwt_service.decode(jwt_service.issue(account))

        assert payload["id"] == account.id
        assert payload["email"] == account.email

    def test_decode_claims_round_trip(self, jwt_service, account):
        claims = jwt_service.decode_claims(jwt_service.issue(account))

        assert claims.id == account.id
        assert claims.email == account.email
        assert claims.expires_at > datetime.now(timezone.utc)

    def test_decode_token_invalid(self, jwt_service):
        with pytest.raises(InvalidTokenError):
            jwt_service.decode("invalid_token")

    def test_decode_rejects_other_secret(self, jwt_service, account):
        other = JWTService(secret_key="a-completely-different-secret-value!!")
        token = other.issue(account)

        with pytest.raises(InvalidTokenError):
            jwt_service.decode(token)

    def test_decode_rejects_tampered_payload(self, jwt_service, account):
        header, _, signature = jwt_service.issue(account).split(".")
        forged_payload = jwt.encode(
            {"id": "someone-else", "email": "e@x.com", "jti": "j", "exp": 4102444800},
            "some-other-signing-key-also-32-bytes-long",
            algorithm="HS256",
        ).split(".")[1]

        with pytest.raises(InvalidTokenError):
            jwt_service.decode(f"{header}.{forged_payload}.{signature}")

    def test_decode_rejects_unsigned_token(self, jwt_service):
        token = jwt.encode(
            {"id": "acc-123", "email": "a@x.com", "jti": "j", "exp": 4102444800},
            None,
            algorithm="none",
        )

        with pytest.raises(InvalidTokenError):
            jwt_service.decode(token)

    def test_decode_requires_exp(self, jwt_service):
        token = jwt.encode({"id": "acc-123", "email": "a@x.com"}, SECRET_KEY, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            jwt_service.decode(token)

    def test_valid_just_before_expiry(self, jwt_service, account):
        token = jwt_service.issue(account, expires_delta=timedelta(seconds=30))

        assert jwt_service.decode(token)["id"] == account.id

    def test_expired_just_after_expiry(self, jwt_service, account):
        token = jwt_service.issue(account, expires_delta=timedelta(seconds=-1))

        with pytest.raises(TokenExpiredError):
            jwt_service.decode(token)

    def test_expired_and_invalid_share_a_base(self):
        assert issubclass(TokenExpiredError, JWTError)
        assert issubclass(InvalidTokenError, JWTError)


class TestPeekClaims:

    def test_peek_ignores_signature(self, account):
        other = JWTService(secret_key="a-completely-different-secret-value!!")
        token = other.issue(account)

        claims = JWTService(secret_key=SECRET_KEY).peek_claims(token)

        assert claims is not None
        assert claims.id == account.id

    def test_peek_ignores_expiry(self, jwt_service, account):
        token = jwt_service.issue(account, expires_delta=timedelta(hours=-1))

        assert jwt_service.peek_claims(token).id == account.id

    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
    def test_peek_unparseable_returns_none(self, jwt_service, token):
        assert jwt_service.peek_claims(token) is None


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        JWTService(secret_key="")


def test_from_settings_uses_configured_secret_and_lifetime(account):
    settings = Settings(secret_key=SECRET_KEY, access_token_expire_hours=2)

    service = JWTService.from_settings(settings)
    token = service.issue(account, now=datetime(2030, 1, 1, tzinfo=timezone.utc))

    decoded = jwt.decode(token, SECRET_KEY, algorithms=["HS256"], options={"verify_exp": False})
    assert decoded["exp"] == int(datetime(2030, 1, 1, 2, tzinfo=timezone.utc).timestamp())


def test_repr_does_not_leak_secret(jwt_service):
    assert SECRET_KEY not in repr(jwt_service)


def test_from_settings_uses_configured_algorithm(account):
    service = JWTService.from_settings(Settings(secret_key=SECRET_KEY, jwt_algorithm="HS256"))

    assert service.algorithm == "HS256"
    assert jwt.get_unverified_header(service.issue(account))["alg"] == "HS256"


def test_unsupported_algorithm_rejected():
    with pytest.raises(ValueError, match="Unsupported signing algorithm"):
        JWTService(secret_key=SECRET_KEY, algorithm="HS512")
