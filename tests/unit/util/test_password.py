"""Unit tests for PasswordHasher."""

from sitehost.config import AuthSettings
from sitehost.util.password import PasswordHasher


class TestPasswordHasher:
    """Tests for PasswordHasher."""

    def test_round_trip(self):
        hasher = PasswordHasher(AuthSettings(bcrypt_rounds=4))

        password_hash = hasher.hash("hunter22")

        assert hasher.verify("hunter22", password_hash)
        assert not hasher.verify("hunter23", password_hash)

    def test_hashes_are_salted(self):
        hasher = PasswordHasher(AuthSettings(bcrypt_rounds=4))

        assert hasher.hash("hunter22") != hasher.hash("hunter22")

    def test_malformed_hash_does_not_match(self):
        hasher = PasswordHasher(AuthSettings(bcrypt_rounds=4))

        assert not hasher.verify("hunter22", "not-a-bcrypt-hash")
