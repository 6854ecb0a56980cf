from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta

from hotel_reservation.shared.utils.secrets import get_secret


@dataclass(frozen=True)
class Settings:
    """実行時設定

    コールドスタート時に一度だけ組み立て、各リポジトリ・サービスへ明示的に渡す。
    """

    table_name: str
    jwt_secret_arn: str | None = None
    jwt_secret: str | None = None
    token_ttl: timedelta = timedelta(hours=4)
    bcrypt_rounds: int = 12
    default_page: int = 1
    default_limit: int = 10
    booking_max_attempts: int = 3

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """環境変数から設定を読み込む"""
        env = os.environ if environ is None else environ
        return cls(
            table_name=env["TABLE_NAME"],
            jwt_secret_arn=env.get("JWT_SECRET_ARN") or None,
            jwt_secret=env.get("JWT_SECRET") or None,
            token_ttl=timedelta(hours=float(env.get("TOKEN_TTL_HOURS", "4"))),
            bcrypt_rounds=int(env.get("BCRYPT_ROUNDS", "12")),
            default_page=int(env.get("DEFAULT_PAGE", "1")),
            default_limit=int(env.get("DEFAULT_LIMIT", "10")),
            booking_max_attempts=int(env.get("BOOKING_MAX_ATTEMPTS", "3")),
        )

    def resolve_jwt_secret(self) -> str:
        """JWT 署名鍵を取得する（JWT_SECRET が優先、なければ Secrets Manager）"""
        if self.jwt_secret:
            return self.jwt_secret
        if self.jwt_secret_arn:
            return get_secret(self.jwt_secret_arn)
        raise RuntimeError("Either JWT_SECRET or JWT_SECRET_ARN must be set")
