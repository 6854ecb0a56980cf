from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from hotel_reservation.shared.domain import UnauthorizedException
from hotel_reservation.user.infrastructure import (
    BcryptPasswordHasher,
    JoseTokenService,
)


class TestJoseTokenService:
    def test_issue_and_validate(self, create_user):
        service = JoseTokenService("secret", ttl=timedelta(hours=4))

        claims = service.validate(service.issue(create_user(user_id="user-1")))

        assert claims.user_id == "user-1"
        assert claims.email == "kyrie@example.org"
        assert claims.expires_at > datetime.now(timezone.utc)

    def test_expired_token(self, create_user):
        issued_at = datetime.now(timezone.utc) - timedelta(hours=5)
        service = JoseTokenService(
            "secret", ttl=timedelta(hours=4), clock=lambda: issued_at
        )
        token = service.issue(create_user())

        with pytest.raises(UnauthorizedException, match="Token is expired"):
            service.validate(token)

    def test_token_signed_with_other_secret(self, create_user):
        token = JoseTokenService("other-secret").issue(create_user())

        with pytest.raises(UnauthorizedException, match="Invalid token"):
            JoseTokenService("secret").validate(token)

    def test_malformed_token(self):
        with pytest.raises(UnauthorizedException, match="Invalid token"):
            JoseTokenService("secret").validate("not-a-token")

    def test_token_without_expiry(self):
        token = jwt.encode({"sub": "user-1"}, "secret", algorithm="HS256")

        with pytest.raises(UnauthorizedException):
            JoseTokenService("secret").validate(token)


class TestBcryptPasswordHasher:
    @pytest.fixture
    def hasher(self):
        return BcryptPasswordHasher(rounds=4)

    def test_hash_verifies(self, hasher):
        digest = hasher.hash("uncle_drew11")

        assert digest != "uncle_drew11"
        assert hasher.verify("uncle_drew11", digest)

    def test_wrong_password(self, hasher):
        assert not hasher.verify("wrong", hasher.hash("uncle_drew11"))

    def test_malformed_digest(self, hasher):
        assert not hasher.verify("uncle_drew11", "not-a-digest")

    def test_multibyte_password_at_byte_limit(self, hasher):
        password = "パスワード" * 4 + "パスワー"

        assert hasher.verify(password, hasher.hash(password))
