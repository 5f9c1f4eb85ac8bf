# tests/test_security.py
import time

import pytest
from jose import JWTError, jwt

from portfolio.core.config import settings
from portfolio.core.security import (
    create_session_token,
    get_session_user_id,
    hash_password,
    sanitize_input,
    verify_password,
    verify_session_token,
)


class TestPasswordHashing:
    """Test password hashing with bcrypt"""

    def test_hash_password(self):
        """Test password hashing"""
        password = "SecurePassword123!"
        hashed = hash_password(password)

        assert hashed != password
        assert hashed.startswith("$2b$")
        assert len(hashed) == 60

    def test_verify_password_correct(self):
        """Test password verification with correct password"""
        hashed = hash_password("SecurePassword123!")

        assert verify_password("SecurePassword123!", hashed) is True

    def test_verify_password_incorrect(self):
        """Test password verification with incorrect password"""
        hashed = hash_password("SecurePassword123!")

        assert verify_password("WrongPassword", hashed) is False

    def test_same_password_different_hashes(self):
        """Salted hashes differ for the same password"""
        assert hash_password("SamePassword") != hash_password("SamePassword")

    def test_verify_password_malformed_hash(self):
        """A stored value that is not a bcrypt hash never verifies"""
        assert verify_password("anything", "not-a-hash") is False


class TestSessionTokens:
    """Test session token creation and verification"""

    def test_create_session_token(self):
        """Token carries the user id and a 7 day lifetime"""
        token = create_session_token(42)
        payload = verify_session_token(token)

        assert payload["sub"] == "42"
        assert payload["exp"] - payload["iat"] == 7 * 24 * 3600

    def test_expired_token(self):
        """Expired tokens are rejected"""
        token = create_session_token(42, expires_delta=-10)

        with pytest.raises(JWTError):
            verify_session_token(token)

    def test_token_signed_with_other_secret(self):
        """Tokens signed with a different secret are rejected"""
        now = int(time.time())
        forged = jwt.encode({"sub": "1", "iat": now, "exp": now + 60}, "other-secret", algorithm="HS256")

        with pytest.raises(JWTError):
            verify_session_token(forged)

    def test_get_session_user_id(self):
        """Valid tokens resolve to an integer user id"""
        assert get_session_user_id(create_session_token(7)) == 7

    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
    def test_get_session_user_id_unusable(self, token):
        """Missing or malformed tokens resolve to None"""
        assert get_session_user_id(token) is None

    def test_get_session_user_id_without_subject(self):
        """A validly signed token without a subject is unusable"""
        now = int(time.time())
        token = jwt.encode({"iat": now, "exp": now + 60}, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGO)

        assert get_session_user_id(token) is None


class TestSanitizeInput:

    def test_strips_null_bytes_and_whitespace(self):
        assert sanitize_input("  hello\x00 world  ") == "hello world"

    def test_empty(self):
        assert sanitize_input("") == ""
