"""Unit tests for app.core.security: bcrypt hashing and JWT issue/verify."""

import base64
import json
import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.config import settings
from app.core.security import (
    BadSignatureError,
    MalformedTokenError,
    TokenExpiredError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
    verify_password_dummy,
)


def _b64url(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


class TestPasswordHashing(unittest.TestCase):
    def test_round_trip(self) -> None:
        hashed = hash_password("secret1")
        self.assertTrue(verify_password("secret1", hashed))

    def test_other_password_does_not_verify(self) -> None:
        hashed = hash_password("secret1")
        self.assertFalse(verify_password("secret2", hashed))
        self.assertFalse(verify_password("", hashed))

    def test_hash_is_salted_and_self_describing(self) -> None:
        first = hash_password("same-password")
        second = hash_password("same-password")
        self.assertNotEqual(first, second)
        self.assertTrue(first.startswith("$2"))
        self.assertIn(f"${settings.BCRYPT_ROUNDS:02d}$", first)
        self.assertNotIn("same-password", first)

    def test_unicode_password(self) -> None:
        hashed = hash_password("pässwörd-✓")
        self.assertTrue(verify_password("pässwörd-✓", hashed))
        self.assertFalse(verify_password("passwords", hashed))

    def test_malformed_stored_hash_is_false_not_error(self) -> None:
        self.assertFalse(verify_password("secret1", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("secret1", ""))

    def test_dummy_verification_returns_nothing(self) -> None:
        self.assertIsNone(verify_password_dummy("whatever"))


class TestCreateAccessToken(unittest.TestCase):
    def test_claims(self) -> None:
        now = datetime.now(UTC)
        token = create_access_token(42, extra_claims={"role": "admin"}, now=now)
        claims = decode_access_token(token)
        self.assertEqual(claims["sub"], "42")
        self.assertEqual(claims["role"], "admin")
        self.assertEqual(claims["exp"] - claims["iat"], settings.JWT_EXPIRE_MINUTES * 60)

    def test_default_ttl_is_one_hour(self) -> None:
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 60)

    def test_extra_claims_cannot_replace_reserved_claims(self) -> None:
        token = create_access_token(
            7, extra_claims={"sub": "1", "exp": 9999999999, "role": "user"}
        )
        claims = decode_access_token(token)
        self.assertEqual(claims["sub"], "7")
        self.assertLess(claims["exp"], 9999999999)

    def test_token_never_contains_password_material(self) -> None:
        token = create_access_token(3, extra_claims={"role": "user"})
        payload = jwt.decode(token, options={"verify_signature": False})
        self.assertEqual(set(payload), {"sub", "iat", "exp", "role"})


class TestTokenValidityWindow(unittest.TestCase):
    def test_valid_before_expiry(self) -> None:
        issued = datetime.now(UTC) - timedelta(minutes=59)
        token = create_access_token(1, ttl=timedelta(hours=1), now=issued)
        self.assertEqual(decode_access_token(token)["sub"], "1")

    def test_expired_at_ttl(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=1)
        token = create_access_token(1, ttl=timedelta(hours=1), now=issued)
        with self.assertRaises(TokenExpiredError):
            decode_access_token(token)

    def test_expired_well_past_ttl(self) -> None:
        issued = datetime.now(UTC) - timedelta(days=2)
        token = create_access_token(1, ttl=timedelta(hours=1), now=issued)
        with self.assertRaises(TokenExpiredError):
            decode_access_token(token)


class TestTokenTampering(unittest.TestCase):
    def setUp(self) -> None:
        self.token = create_access_token(5, extra_claims={"role": "user"})

    def test_modified_signature(self) -> None:
        header, payload, signature = self.token.split(".")
        i = len(signature) // 2
        flipped = "A" if signature[i] != "A" else "B"
        tampered = ".".join([header, payload, signature[:i] + flipped + signature[i + 1 :]])
        with self.assertRaises(BadSignatureError):
            decode_access_token(tampered)

    def test_modified_payload(self) -> None:
        header, _, signature = self.token.split(".")
        claims = jwt.decode(self.token, options={"verify_signature": False})
        claims["role"] = "admin"
        tampered = ".".join([header, _b64url(claims), signature])
        with self.assertRaises(BadSignatureError):
            decode_access_token(tampered)

    def test_wrong_secret(self) -> None:
        now = datetime.now(UTC)
        forged = jwt.encode(
            {"sub": "5", "iat": now, "exp": now + timedelta(hours=1)},
            "some-other-secret-of-sufficient-length",
            algorithm="HS256",
        )
        with self.assertRaises(BadSignatureError):
            decode_access_token(forged)


class TestMalformedTokens(unittest.TestCase):
    def test_garbage(self) -> None:
        for value in ("", "abc", "a.b.c", "not a token at all"):
            with self.subTest(value=value), self.assertRaises(MalformedTokenError):
                decode_access_token(value)

    def test_missing_subject(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"iat": now, "exp": now + timedelta(hours=1)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(MalformedTokenError):
            decode_access_token(token)

    def test_unsigned_token_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "1", "iat": now, "exp": now + timedelta(hours=1)},
            None,
            algorithm="none",
        )
        with self.assertRaises(MalformedTokenError):
            decode_access_token(token)


if __name__ == "__main__":
    unittest.main()
