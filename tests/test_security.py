"""Unit tests for offbase_admin.core.security: bcrypt hashing and the session token codec."""

import string
import unittest
from datetime import UTC, datetime, timedelta

import jwt

from offbase_admin.core.security import (
    SessionSecretMissingError,
    SessionTokenCodec,
    hash_password,
    verify_password,
)

SECRET = "test-secret-that-is-long-enough-for-hs256-0123456789"
BASE64URL_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"


def _codec(secret: str | None = SECRET) -> SessionTokenCodec:
    return SessionTokenCodec(secret, algorithm="HS256", expire_hours=24)


class TestPasswordHashing(unittest.TestCase):
    """hash_password salts per call; verify_password never raises."""

    @classmethod
    def setUpClass(cls) -> None:
        cls.digest = hash_password("correct horse battery staple")

    def test_verify_accepts_matching_password(self) -> None:
        self.assertTrue(verify_password("correct horse battery staple", self.digest))

    def test_verify_rejects_wrong_password(self) -> None:
        self.assertFalse(verify_password("wrong password", self.digest))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("correct horse battery staple"), self.digest)

    def test_malformed_digest_returns_false(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("anything", ""))
        self.assertFalse(verify_password("anything", None))

    def test_digest_is_not_plaintext(self) -> None:
        self.assertNotIn("correct horse", self.digest)
        self.assertTrue(self.digest.startswith("$2"))


class TestTokenRoundTrip(unittest.TestCase):
    """verify(issue(claims)) returns the claims plus timestamps before expiry."""

    def test_round_trip_preserves_claims(self) -> None:
        codec = _codec()
        token = codec.issue("0b5c6f1e-1111-4222-8333-444455556666", "admin@example.com", True)
        claims = codec.verify(token)
        self.assertIsNotNone(claims)
        self.assertEqual(claims.id, "0b5c6f1e-1111-4222-8333-444455556666")
        self.assertEqual(claims.email, "admin@example.com")
        self.assertTrue(claims.is_super_admin)

    def test_elevated_flag_defaults_to_false(self) -> None:
        codec = _codec()
        claims = codec.verify(codec.issue("a1", "a@example.com"))
        self.assertIsNotNone(claims)
        self.assertFalse(claims.is_super_admin)

    def test_expiry_is_24_hours_after_issue(self) -> None:
        codec = _codec()
        claims = codec.verify(codec.issue("a1", "a@example.com"))
        self.assertEqual(claims.expires_at - claims.issued_at, timedelta(hours=24))
        self.assertLessEqual(
            abs((claims.issued_at - datetime.now(UTC)).total_seconds()), 5
        )

    def test_token_is_cookie_safe(self) -> None:
        token = _codec().issue("a1", "a@example.com")
        for forbidden in (" ", ";", ",", '"', "\\"):
            self.assertNotIn(forbidden, token)


class TestTokenRejection(unittest.TestCase):
    """Any tampering, expiry, wrong secret or missing secret yields None, never an exception."""

    def test_expired_token_is_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "id": "a1",
                "email": "a@example.com",
                "is_super_admin": False,
                "iat": now - timedelta(hours=25),
                "exp": now - timedelta(hours=1),
            },
            SECRET,
            algorithm="HS256",
        )
        self.assertIsNone(_codec().verify(token))

    def test_every_altered_character_invalidates_token(self) -> None:
        codec = _codec()
        token = codec.issue("a1", "a@example.com")
        for i, c in enumerate(token):
            if c == ".":
                continue
            for replacement in BASE64URL_ALPHABET.replace(c, ""):
                tampered = token[:i] + replacement + token[i + 1 :]
                self.assertIsNone(
                    codec.verify(tampered),
                    f"position {i} altered to {replacement!r} still verified",
                )

    def test_wrong_secret_is_rejected(self) -> None:
        token = _codec("another-secret-of-sufficient-length-abcdefghijkl").issue("a1", "a@example.com")
        self.assertIsNone(_codec().verify(token))

    def test_garbage_is_rejected(self) -> None:
        codec = _codec()
        for token in ("", "abc", "a.b.c", "...", "not a token at all"):
            self.assertIsNone(codec.verify(token))
        self.assertIsNone(codec.verify(None))

    def test_unsigned_token_is_rejected(self) -> None:
        token = jwt.encode(
            {"id": "a1", "email": "a@example.com", "iat": 0, "exp": 32503680000},
            "",
            algorithm="none",
        )
        self.assertIsNone(_codec().verify(token))

    def test_missing_identity_claim_is_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"email": "a@example.com", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        self.assertIsNone(_codec().verify(token))


class TestMissingSecret(unittest.TestCase):
    """A codec without a secret fails closed."""

    def test_verify_rejects_everything(self) -> None:
        token = _codec().issue("a1", "a@example.com")
        self.assertIsNone(_codec(None).verify(token))
        self.assertIsNone(_codec("").verify(token))

    def test_issue_raises(self) -> None:
        with self.assertRaises(SessionSecretMissingError):
            _codec(None).issue("a1", "a@example.com")

    def test_configured_flag(self) -> None:
        self.assertTrue(_codec().configured)
        self.assertFalse(_codec(None).configured)


if __name__ == "__main__":
    unittest.main()
