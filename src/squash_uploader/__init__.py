"""Squash uploader.

Delivers JSON-encoded failure records to a Squash host over HTTP POST, with
configurable timeouts, TLS verification and success criteria.
"""

from squash_uploader.config import UploaderConfig
from squash_uploader.exceptions import (
    ConfigurationError,
    NetworkError,
    TimeoutError,
    TransportError,
    UnexpectedResponseError,
    UploaderError,
)
from squash_uploader.matchers import LiteralCodeMatcher, StatusClass, StatusClassMatcher
from squash_uploader.transport import BatchSender, RequestsBatchSender
from squash_uploader.uploader import Uploader

__version__ = "1.0.0"

__all__ = [
    "BatchSender",
    "ConfigurationError",
    "LiteralCodeMatcher",
    "NetworkError",
    "RequestsBatchSender",
    "StatusClass",
    "StatusClassMatcher",
    "TimeoutError",
    "TransportError",
    "UnexpectedResponseError",
    "Uploader",
    "UploaderConfig",
    "UploaderError",
]
