"""Unit tests for app.core.config.Settings validation."""

import unittest

from pydantic import ValidationError

from app.core.config import DEFAULT_JWT_SECRET, Settings


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": "a-long-enough-secret-for-hmac-signing",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        s = _settings()
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(s.JWT_ALGORITHM, "HS256")
        self.assertEqual(s.PASSWORD_MIN_LENGTH, 6)
        self.assertIn(s.IDENTITY_FIELD, ("username", "email"))


class TestSettingsValidation(unittest.TestCase):
    def test_database_url_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://root@localhost/expenses")
        self.assertEqual(
            _settings(DATABASE_URL=" postgresql://u:p@db/expenses ").DATABASE_URL,
            "postgresql://u:p@db/expenses",
        )

    def test_empty_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="   ")

    def test_default_secret_rejected_in_prod(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(APP_ENV="prod", JWT_SECRET=DEFAULT_JWT_SECRET)
        self.assertEqual(_settings(APP_ENV="dev", JWT_SECRET=DEFAULT_JWT_SECRET).APP_ENV, "dev")

    def test_asymmetric_algorithm_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_ALGORITHM="RS256")

    def test_expiry_bounds(self) -> None:
        for minutes in (0, 10081):
            with self.subTest(minutes=minutes), self.assertRaises(ValidationError):
                _settings(JWT_EXPIRE_MINUTES=minutes)

    def test_bcrypt_rounds_bounds(self) -> None:
        for rounds in (3, 16):
            with self.subTest(rounds=rounds), self.assertRaises(ValidationError):
                _settings(BCRYPT_ROUNDS=rounds)

    def test_password_length_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(PASSWORD_MIN_LENGTH=10, PASSWORD_MAX_LENGTH=8)

    def test_api_prefix(self) -> None:
        self.assertEqual(_settings(API_PREFIX="/api/").API_PREFIX, "/api")
        self.assertEqual(_settings(API_PREFIX="").API_PREFIX, "")
        with self.assertRaises(ValidationError):
            _settings(API_PREFIX="api")


class TestCorsOrigins(unittest.TestCase):
    def test_dev_allows_all_by_default(self) -> None:
        self.assertEqual(_settings(APP_ENV="dev").cors_origins, ["*"])

    def test_prod_allows_none_by_default(self) -> None:
        self.assertEqual(_settings(APP_ENV="prod").cors_origins, [])

    def test_explicit_origins(self) -> None:
        s = _settings(CORS_ORIGINS=["https://expenses.example.com"])
        self.assertEqual(s.cors_origins, ["https://expenses.example.com"])


if __name__ == "__main__":
    unittest.main()
