"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base for use cases: a request model in, a response model out."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        """Run the use case."""
