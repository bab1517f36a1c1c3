"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans repositories and
    storage rather than belonging to a single entity.
    """

    pass
