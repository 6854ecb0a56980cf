from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from hotel_reservation.shared.domain import UnauthorizedException
from hotel_reservation.user.domain.entity import User
from hotel_reservation.user.domain.service import TokenClaims, TokenService

ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JoseTokenService(TokenService):
    """python-jose による HS256 JWT の発行・検証"""

    def __init__(
        self,
        secret: str,
        ttl: timedelta = timedelta(hours=4),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    def issue(self, user: User) -> str:
        expires_at = self._clock() + self._ttl
        claims = {
            "sub": str(user.id),
            "email": str(user.email),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def validate(self, token: str) -> TokenClaims:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require_exp": True},
            )
        except ExpiredSignatureError as e:
            raise UnauthorizedException("Token is expired") from e
        except JWTError as e:
            raise UnauthorizedException("Invalid token") from e

        user_id = claims.get("sub")
        if not user_id:
            raise UnauthorizedException("Invalid token")

        return TokenClaims(
            user_id=user_id,
            email=claims.get("email", ""),
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        )
