"""Unit tests for skillboard.core.config.Settings validation."""

import unittest

from pydantic import ValidationError

from support import make_settings


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = make_settings()
        self.assertEqual(settings.APP_ENV, "dev")
        self.assertEqual(settings.API_PREFIX, "/api")
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 10080)
        self.assertEqual(settings.PORT, 5000)
        self.assertEqual(settings.LOG_LEVEL, "INFO")

    def test_secret_is_not_exposed_in_repr(self) -> None:
        self.assertNotIn("test-jwt-secret", repr(make_settings()))


class TestSettingsValidation(unittest.TestCase):
    def test_postgres_and_sqlite_urls_accepted(self) -> None:
        self.assertEqual(
            make_settings(DATABASE_URL=" postgresql://u:p@db:5432/x ").DATABASE_URL,
            "postgresql://u:p@db:5432/x",
        )
        self.assertEqual(make_settings(DATABASE_URL="sqlite:///tmp.db").DATABASE_URL, "sqlite:///tmp.db")

    def test_other_database_url_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mongodb://localhost/skillboard")
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="  ")

    def test_empty_jwt_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_SECRET="   ")

    def test_expire_minutes_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            make_settings(JWT_EXPIRE_MINUTES=43201)

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(BCRYPT_ROUNDS=3)

    def test_port_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(PORT=70000)

    def test_log_level_normalized(self) -> None:
        self.assertEqual(make_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            make_settings(LOG_LEVEL="loud")

    def test_api_prefix(self) -> None:
        self.assertEqual(make_settings(API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            make_settings(API_PREFIX="api")
