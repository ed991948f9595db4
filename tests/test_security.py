"""Unit tests for portfolio.core.security: bcrypt hashing and JWT issue/verify."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from portfolio.core.config import settings
from portfolio.core.security import (
    ExpiredTokenError,
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    def test_hash_verifies_and_is_salted(self) -> None:
        h1 = hash_password("admin123")
        h2 = hash_password("admin123")
        self.assertNotEqual(h1, h2)
        self.assertNotIn("admin123", h1)
        self.assertTrue(verify_password("admin123", h1))
        self.assertTrue(verify_password("admin123", h2))

    def test_wrong_password_rejected(self) -> None:
        h = hash_password("admin123")
        self.assertFalse(verify_password("admin124", h))

    def test_garbage_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("admin123", "not-a-bcrypt-hash"))


class TestAccessToken(unittest.TestCase):
    def test_round_trip_returns_user_id(self) -> None:
        token = create_access_token(42)
        self.assertIsInstance(token, str)
        self.assertTrue(token)
        self.assertEqual(decode_access_token(token), 42)

    def test_expiry_is_24_hours_after_issue(self) -> None:
        now = datetime.now(UTC).replace(microsecond=0)
        token = create_access_token(1, now=now)
        payload = jwt.decode(token, options={"verify_signature": False})
        self.assertEqual(payload["exp"] - payload["iat"], 24 * 3600)
        self.assertEqual(payload["sub"], "1")

    def test_accepted_just_before_expiry(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=23, minutes=59)
        token = create_access_token(7, now=issued)
        self.assertEqual(decode_access_token(token), 7)

    def test_rejected_after_expiry(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=24, seconds=5)
        token = create_access_token(7, now=issued)
        with self.assertRaises(ExpiredTokenError):
            decode_access_token(token)

    def test_expired_is_an_invalid_token(self) -> None:
        self.assertTrue(issubclass(ExpiredTokenError, InvalidTokenError))

    def test_foreign_signature_rejected(self) -> None:
        forged = jwt.encode(
            {"sub": "1", "exp": datetime.now(UTC) + timedelta(hours=1)},
            "some-other-secret",
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(InvalidTokenError) as ctx:
            decode_access_token(forged)
        self.assertNotIsInstance(ctx.exception, ExpiredTokenError)

    def test_swapped_payload_rejected(self) -> None:
        header, _, signature = create_access_token(1).split(".")
        _, other_payload, _ = create_access_token(2).split(".")
        with self.assertRaises(InvalidTokenError):
            decode_access_token(f"{header}.{other_payload}.{signature}")

    def test_malformed_token_rejected(self) -> None:
        for token in ("", "abc", "a.b.c", "Bearer x.y.z"):
            with self.subTest(token=token):
                with self.assertRaises(InvalidTokenError):
                    decode_access_token(token)

    def test_non_integer_subject_rejected(self) -> None:
        token = jwt.encode(
            {"sub": "admin", "exp": datetime.now(UTC) + timedelta(hours=1)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(InvalidTokenError):
            decode_access_token(token)

    def test_missing_expiry_rejected(self) -> None:
        token = jwt.encode(
            {"sub": "1"},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(InvalidTokenError):
            decode_access_token(token)


if __name__ == "__main__":
    unittest.main()
