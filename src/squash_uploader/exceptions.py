"""Exceptions raised by the Squash uploader.

Every failure of a transmission surfaces as a single ``UploaderError``
subclass. Nothing here is caught or retried by the uploader itself.
"""

from __future__ import annotations

from typing import Any


class UploaderError(Exception):
    """Base exception for uploader errors.

    Args:
        message: Human-readable error description
        status_code: HTTP status code if applicable
        cause: Original exception that caused this error

    Attributes:
        message: Error message
        status_code: HTTP status code (or None)
        cause: Original exception (or None)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (status: {self.status_code})"
        return self.message


class ConfigurationError(UploaderError):
    """Invalid uploader configuration.

    Raised for option values of the wrong type at construction and for
    success criteria that are neither a status class nor a status code
    when a batch is dispatched.
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.value = value


class TransportError(UploaderError):
    """The request could not be completed at the network level.

    Also raised when the URL cannot be parsed into a request.
    """

    pass


class NetworkError(TransportError):
    """Network-level error occurred.

    Examples:
        - Connection refused
        - DNS lookup failed
        - TLS handshake or certificate verification failed
    """

    pass


class TimeoutError(TransportError):
    """Connection or response did not arrive within the configured timeout.

    Examples:
        - Connect timeout (``open_timeout`` elapsed)
        - Read timeout (``read_timeout`` elapsed)
    """

    pass


class UnexpectedResponseError(UploaderError):
    """A response matched none of the configured success criteria.

    The remaining bodies of the batch are not sent.
    """

    def __init__(self, status_code: int, url: str | None = None) -> None:
        super().__init__(
            f"Unexpected response from Squash host: {status_code}",
            status_code=status_code,
        )
        self.url = url

    def __str__(self) -> str:
        return self.message
