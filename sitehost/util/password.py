"""Password hashing utilities."""

import bcrypt

from sitehost.config import AuthSettings


class PasswordHasher:
    """bcrypt password hashing.

    Both operations are CPU bound on purpose; async callers should run them
    in a worker thread.
    """

    def __init__(self, settings: AuthSettings) -> None:
        self.rounds = settings.bcrypt_rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            bcrypt hash as text
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Args:
            password: Plaintext password to verify
            password_hash: Stored bcrypt hash

        Returns:
            True if the password matches, False otherwise (including malformed hashes)
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False
