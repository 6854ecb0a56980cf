from datetime import timedelta
from unittest.mock import patch

import pytest

from hotel_reservation.shared.config import Settings


class TestSettings:
    def test_from_env_defaults(self):
        settings = Settings.from_env({"TABLE_NAME": "table"})

        assert settings.table_name == "table"
        assert settings.token_ttl == timedelta(hours=4)
        assert settings.default_page == 1
        assert settings.default_limit == 10
        assert settings.booking_max_attempts == 3
        assert settings.jwt_secret is None

    def test_from_env_overrides(self):
        settings = Settings.from_env(
            {
                "TABLE_NAME": "table",
                "TOKEN_TTL_HOURS": "1",
                "DEFAULT_LIMIT": "50",
                "BOOKING_MAX_ATTEMPTS": "5",
            }
        )

        assert settings.token_ttl == timedelta(hours=1)
        assert settings.default_limit == 50
        assert settings.booking_max_attempts == 5

    def test_table_name_is_required(self):
        with pytest.raises(KeyError):
            Settings.from_env({})

    def test_jwt_secret_takes_precedence(self):
        settings = Settings(table_name="t", jwt_secret="local", jwt_secret_arn="arn")

        assert settings.resolve_jwt_secret() == "local"

    def test_jwt_secret_loaded_from_secrets_manager(self):
        settings = Settings(table_name="t", jwt_secret_arn="arn:secret")

        with patch(
            "hotel_reservation.shared.config.get_secret", return_value="remote"
        ) as mock_get_secret:
            assert settings.resolve_jwt_secret() == "remote"

        mock_get_secret.assert_called_once_with("arn:secret")

    def test_missing_jwt_secret_raises(self):
        with pytest.raises(RuntimeError):
            Settings(table_name="t").resolve_jwt_secret()
