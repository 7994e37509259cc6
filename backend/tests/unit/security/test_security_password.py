"""
Unit tests for password hashing.
"""

from notevault.security.password import hash_password, needs_update, verify_password


class TestPasswordHashing:
    def test_hash_is_not_plain_text(self):
        hashed = hash_password("password123")
        assert hashed != "password123"
        assert hashed.startswith("$bcrypt-sha256$")

    def test_verify_correct_password(self):
        hashed = hash_password("password123")
        assert verify_password("password123", hashed) is True

    def test_verify_wrong_password(self):
        hashed = hash_password("password123")
        assert verify_password("password124", hashed) is False

    def test_same_password_hashes_differently(self):
        assert hash_password("password123") != hash_password("password123")

    def test_long_password_not_truncated(self):
        base = "x" * 72
        hashed = hash_password(base + "a")
        assert verify_password(base + "b", hashed) is False

    def test_empty_hash(self):
        assert verify_password("password123", "") is False

    def test_unrecognised_hash(self):
        assert verify_password("password123", "not-a-hash") is False

    def test_fresh_hash_needs_no_update(self):
        assert needs_update(hash_password("password123")) is False
