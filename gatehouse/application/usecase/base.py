"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from gatehouse.domain.error import InvalidOperationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_uuid(value: str, field: str) -> UUID:
    """Parse an identifier supplied by a caller.

    Raises:
        InvalidOperationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except ValueError:
        raise InvalidOperationError(f"Invalid {field}: {value}", field=field)
