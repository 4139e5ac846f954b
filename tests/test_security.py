"""Unit tests for app.core.security: bcrypt password hashing and JWT issue/verify."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.security import (
    PASSWORD_MAX_BYTES,
    TOKEN_TTL_SECONDS,
    create_access_token,
    hash_password,
    password_length_ok,
    token_from_authorization,
    user_id_from_authorization,
    verify_access_token,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    """hash_password / verify_password."""

    def test_verify_matches_own_hash(self) -> None:
        digest = hash_password("dark-roast-42")
        self.assertTrue(verify_password("dark-roast-42", digest))

    def test_other_password_does_not_verify(self) -> None:
        digest = hash_password("dark-roast-42")
        self.assertFalse(verify_password("light-roast-42", digest))
        self.assertFalse(verify_password("", digest))

    def test_salt_differs_per_call(self) -> None:
        first = hash_password("same-password")
        second = hash_password("same-password")
        self.assertNotEqual(first, second)
        self.assertTrue(verify_password("same-password", first))
        self.assertTrue(verify_password("same-password", second))

    def test_cost_factor_is_ten(self) -> None:
        digest = hash_password("dark-roast-42")
        self.assertTrue(digest.startswith("$2b$10$"))

    def test_malformed_digest_returns_false(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("anything", ""))

    def test_password_at_byte_limit_verifies(self) -> None:
        password = "a" * PASSWORD_MAX_BYTES
        self.assertTrue(verify_password(password, hash_password(password)))

    def test_password_over_byte_limit_is_refused(self) -> None:
        with self.assertRaises(ValueError):
            hash_password("a" * (PASSWORD_MAX_BYTES + 1))

    def test_shared_prefix_does_not_verify(self) -> None:
        stored = hash_password("a" * PASSWORD_MAX_BYTES)
        self.assertFalse(verify_password("a" * PASSWORD_MAX_BYTES + "Y" * 10, stored))

    def test_length_check_counts_bytes(self) -> None:
        self.assertTrue(password_length_ok("\u00e9" * 36))
        self.assertFalse(password_length_ok("\u00e9" * 37))
        self.assertFalse(password_length_ok("short"))


class TestAccessToken(unittest.TestCase):
    """create_access_token / verify_access_token."""

    def test_round_trip_returns_user_id(self) -> None:
        token = create_access_token(42)
        self.assertEqual(verify_access_token(token), 42)

    def test_subject_and_expiry(self) -> None:
        token = create_access_token(5)
        payload = jwt.decode(token, options={"verify_signature": False})
        self.assertEqual(payload["sub"], "5")
        self.assertEqual(payload["exp"] - payload["iat"], TOKEN_TTL_SECONDS)
        self.assertEqual(TOKEN_TTL_SECONDS, 3600)

    def test_expired_token_is_invalid(self) -> None:
        issued = datetime.now(UTC) - timedelta(seconds=TOKEN_TTL_SECONDS + 5)
        token = create_access_token(7, now=issued)
        self.assertIsNone(verify_access_token(token))

    def test_token_signed_with_other_secret_is_invalid(self) -> None:
        now = datetime.now(UTC)
        forged = jwt.encode(
            {"sub": "7", "iat": now, "exp": now + timedelta(hours=1)},
            "some-other-secret",
            algorithm="HS256",
        )
        self.assertIsNone(verify_access_token(forged))

    def test_garbage_token_is_invalid(self) -> None:
        self.assertIsNone(verify_access_token("not.a.jwt"))
        self.assertIsNone(verify_access_token(""))


class TestAuthorizationHeader(unittest.TestCase):
    """token_from_authorization / user_id_from_authorization."""

    def test_bearer_prefix_is_stripped(self) -> None:
        token = create_access_token(3)
        self.assertEqual(token_from_authorization(f"Bearer {token}"), token)
        self.assertEqual(user_id_from_authorization(f"Bearer {token}"), 3)

    def test_prefix_is_case_insensitive(self) -> None:
        token = create_access_token(3)
        self.assertEqual(user_id_from_authorization(f"bearer {token}"), 3)

    def test_token_without_prefix_fails(self) -> None:
        token = create_access_token(3)
        self.assertIsNone(user_id_from_authorization(token))

    def test_value_shorter_than_prefix_fails(self) -> None:
        self.assertIsNone(user_id_from_authorization("Bear"))
        self.assertIsNone(user_id_from_authorization(""))
        self.assertIsNone(user_id_from_authorization(None))

    def test_prefix_only_fails(self) -> None:
        self.assertIsNone(user_id_from_authorization("Bearer "))


if __name__ == "__main__":
    unittest.main()
