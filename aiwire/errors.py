"""Errors raised by API calls."""

from __future__ import annotations


class APIError(Exception):
    """Base class for every API failure."""


class RequestError(APIError):
    """The HTTP transport failed."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"RequestError: {cause}")


class CustomError(APIError):
    """The API reported a failure with a message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"APIError: {message}")