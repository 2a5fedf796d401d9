"""Uploader that delivers records to a Squash host.

The uploader JSON-encodes a record, POSTs it to ``host + path`` and decides
from the response status whether delivery succeeded. Network access goes
through a ``BatchSender``, so the transport can be replaced without touching
the uploader.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from squash_uploader.config import UploaderConfig
from squash_uploader.exceptions import UnexpectedResponseError
from squash_uploader.matchers import is_success, resolve_matchers
from squash_uploader.transport import BatchSender, RequestsBatchSender

logger = structlog.get_logger(__name__)

JSON_HEADERS: Mapping[str, str] = {"Content-Type": "application/json"}


class Uploader:
    """Communicates with the Squash API.

    Created once per destination host and reused for any number of
    transmissions. Holds no state between calls.

    Args:
        host: Scheme and host name of the Squash server (e.g.
            "https://squash.mycompany.com"). Not validated here; a malformed
            value fails when a request is dispatched.
        options: Overrides for the default configuration. Recognized keys are
            ``open_timeout``, ``read_timeout``, ``skip_verification`` and
            ``success_criteria``; other keys are kept but ignored.
        sender: Transport used to POST batches (default:
            ``RequestsBatchSender``)

    Raises:
        ConfigurationError: If a recognized option has an invalid value

    Example:
        >>> uploader = Uploader("https://squash.example.com", {"read_timeout": 30})
        >>> uploader.transmit("/api/1.0/notify", {"class_name": "RuntimeError"})
    """

    def __init__(
        self,
        host: str,
        options: Mapping[str, Any] | UploaderConfig | None = None,
        *,
        sender: BatchSender | None = None,
    ) -> None:
        self._host = host
        self._config = UploaderConfig.from_options(options)
        self._sender: BatchSender = sender or RequestsBatchSender()

    @property
    def host(self) -> str:
        return self._host

    @property
    def config(self) -> UploaderConfig:
        return self._config

    def transmit(self, path: str, record: Mapping[str, Any]) -> None:
        """Transmit one record to Squash.

        Args:
            path: Path portion of the URL, with leading slash
            record: Data to JSON-serialize and place in the request body

        Raises:
            TypeError: If the record is not JSON-serializable
            ValueError: If the record holds NaN or infinite floats
            UploaderError: If delivery fails
        """
        body = json.dumps(
            record, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
        self.post_batch(self._host + path, JSON_HEADERS, [body.encode("utf-8")])

    def post_batch(
        self,
        url: str,
        headers: Mapping[str, str],
        bodies: Sequence[bytes],
    ) -> None:
        """POST each body to ``url`` as a separate request.

        Bodies are sent in order over one connection, each after the previous
        response has arrived. They are never concatenated. The first response
        that matches no success criterion ends the batch.

        Args:
            url: Absolute URL to POST to
            headers: Headers attached to every request
            bodies: Request bodies, one request each

        Raises:
            ConfigurationError: If a success criterion is not a status class
                or status code. Raised before any request is sent.
            TransportError: If a request cannot be completed
            UnexpectedResponseError: If a response matches no success criterion
        """
        matchers = resolve_matchers(self._config.success_criteria)
        statuses = self._sender.send(url, headers, bodies, self._config)

        try:
            for index, status_code in enumerate(statuses):
                if not is_success(matchers, status_code):
                    logger.warning(
                        "Unexpected response from Squash host",
                        url=url,
                        status_code=status_code,
                        index=index,
                        batch_size=len(bodies),
                    )
                    raise UnexpectedResponseError(status_code, url=url)

                logger.debug(
                    "Squash host accepted request",
                    url=url,
                    status_code=status_code,
                    index=index,
                )
        finally:
            close = getattr(statuses, "close", None)
            if close is not None:
                close()
