"""Shared fixtures for uploader tests."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field

import pytest

from squash_uploader.config import UploaderConfig


@dataclass
class SentRequest:
    url: str
    headers: dict[str, str]
    body: bytes


@dataclass
class RecordingSender:
    """In-memory ``BatchSender`` answering with scripted status codes.

    Requests are recorded only when the consumer pulls the next status,
    mirroring the lazy behaviour required of real transports.
    """

    statuses: list[int] = field(default_factory=list)
    default_status: int = 200
    requests: list[SentRequest] = field(default_factory=list)
    configs: list[UploaderConfig] = field(default_factory=list)
    closed: bool = False

    def send(
        self,
        url: str,
        headers: Mapping[str, str],
        bodies: Sequence[bytes],
        config: UploaderConfig,
    ) -> Iterator[int]:
        self.configs.append(config)
        try:
            for body in bodies:
                self.requests.append(SentRequest(url, dict(headers), body))
                if self.statuses:
                    yield self.statuses.pop(0)
                else:
                    yield self.default_status
        finally:
            self.closed = True


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()
