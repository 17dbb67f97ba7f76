"""Base types shared by remote service connectors."""

from dataclasses import dataclass
from typing import Any


@dataclass
class ConnectorResponse:
    """Standardized response from connector API calls."""

    data: Any
    status_code: int
    headers: dict[str, str]
    raw_response: dict[str, Any] | list[Any] | None = None


class ConnectorError(Exception):
    """Base exception for connector errors."""

    def __init__(self, message: str, status_code: int | None = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
