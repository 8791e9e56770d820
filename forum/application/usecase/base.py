"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation: parses the request's string IDs, calls the
    domain services and shapes the response model.

    Domain errors propagate unchanged; the interface layer maps them.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
