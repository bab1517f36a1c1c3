"""Domain layer errors.

These cross layer boundaries inside the core (repository and storage to
service). The provisioning service turns them into ``SignupError`` values
before anything reaches a caller.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class UsernameTakenError(DomainError):
    """Raised when a site with the same username already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already taken: {username}")


class PersistenceError(DomainError):
    """Raised when the site store fails for reasons other than a conflict."""

    pass


class StorageError(DomainError):
    """Raised when site files cannot be provisioned or removed."""

    def __init__(self, username: str, reason: str):
        self.username = username
        self.reason = reason
        super().__init__(f"Storage failure for site {username}: {reason}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCredentialsError(DomainError):
    """Raised when sign-in credentials do not match a site.

    The message never says which part was wrong.
    """

    def __init__(self) -> None:
        super().__init__("Invalid login")
