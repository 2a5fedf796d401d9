"""Transport layer for the Squash uploader.

This package handles HTTP communication with no knowledge of success
criteria. It is responsible for:
- Opening one session per batch
- Connect and read timeouts
- TLS verification and its bypass
- Network error translation
"""

from squash_uploader.transport.base import BatchSender
from squash_uploader.transport.http import RequestsBatchSender

__all__ = [
    "BatchSender",
    "RequestsBatchSender",
]
