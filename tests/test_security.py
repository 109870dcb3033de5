"""Tests for password hashing and session token signing."""

from __future__ import annotations

import time
import unittest
from datetime import timedelta

from jose import jwt

from shortfeed.config import settings
from shortfeed.core import security


class PasswordHashTests(unittest.TestCase):

    def test_hash_and_verify(self) -> None:
        hashed = security.get_password_hash("secret1")

        self.assertNotEqual(hashed, "secret1")
        self.assertTrue(security.verify_password("secret1", hashed))
        self.assertFalse(security.verify_password("secret2", hashed))

    def test_verify_against_missing_or_garbage_hash(self) -> None:
        self.assertFalse(security.verify_password("secret1", ""))
        self.assertFalse(security.verify_password("secret1", "not-a-hash"))


class SessionTokenTests(unittest.TestCase):

    def test_roundtrip(self) -> None:
        token = security.create_session_token({"sub": "alice", "uid": 3})
        payload = security.decode_session_token(token)

        self.assertEqual(payload["sub"], "alice")
        self.assertEqual(payload["uid"], 3)
        self.assertIn("exp", payload)

    def test_expired_token_is_rejected(self) -> None:
        token = security.create_session_token({"sub": "alice", "uid": 3}, expires_delta=timedelta(seconds=-1))
        self.assertIsNone(security.decode_session_token(token))

    def test_token_signed_with_other_key_is_rejected(self) -> None:
        forged = jwt.encode({"sub": "mallory", "uid": 1}, "not-the-secret", algorithm=settings.ALGORITHM)
        self.assertIsNone(security.decode_session_token(forged))

    def test_default_lifetime_is_session_expiry(self) -> None:
        before = time.time()
        token = security.create_session_token({"sub": "alice", "uid": 3})
        lifetime = jwt.get_unverified_claims(token)["exp"] - before

        self.assertAlmostEqual(lifetime, settings.SESSION_EXPIRE_DAYS * 24 * 3600, delta=5)
