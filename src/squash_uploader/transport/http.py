"""HTTP transport built on requests.

Each batch gets its own session, so the connection is opened once for the
batch and released when the batch finishes or is abandoned. No retrying
adapter is mounted; a failed request is final.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence

import requests
import structlog

from squash_uploader.config import UploaderConfig
from squash_uploader.exceptions import NetworkError, TimeoutError, TransportError

logger = structlog.get_logger(__name__)


class RequestsBatchSender:
    """Default ``BatchSender`` using a ``requests.Session`` per batch.

    TLS is used when the URL scheme is ``https``. Redirects are not followed,
    so a 3xx response is classified like any other status.

    Args:
        session_factory: Callable returning a fresh session (default:
            ``requests.Session``)

    Example:
        >>> sender = RequestsBatchSender()
        >>> for status in sender.send(url, headers, [b"{}"], UploaderConfig()):
        ...     print(status)
        201
    """

    def __init__(
        self, session_factory: Callable[[], requests.Session] | None = None
    ) -> None:
        self._session_factory = session_factory or requests.Session

    def send(
        self,
        url: str,
        headers: Mapping[str, str],
        bodies: Sequence[bytes],
        config: UploaderConfig,
    ) -> Iterator[int]:
        """POST each body as its own request, yielding every status code.

        Args:
            url: Absolute URL to POST to
            headers: Headers attached to every request
            bodies: Request bodies, one request each
            config: Timeouts and TLS verification for the connection

        Yields:
            Status code of each response, in body order

        Raises:
            TimeoutError: If the connect or read timeout elapses
            NetworkError: If the connection fails
            TransportError: For malformed URLs and other request errors
        """
        if not bodies:
            return

        if config.skip_verification and url.lower().startswith("https://"):
            logger.warning("TLS peer verification disabled", url=url)

        request_headers = dict(headers)

        with self._session_factory() as session:
            for index, body in enumerate(bodies):
                payload = body.encode("utf-8") if isinstance(body, str) else body
                logger.debug(
                    "Posting request body",
                    url=url,
                    index=index,
                    size=len(payload),
                )
                response = self._post(session, url, request_headers, payload, config)
                yield response.status_code

    @staticmethod
    def _post(
        session: requests.Session,
        url: str,
        headers: dict[str, str],
        payload: bytes,
        config: UploaderConfig,
    ) -> requests.Response:
        try:
            return session.post(
                url,
                data=payload,
                headers=headers,
                timeout=config.timeout,
                verify=config.verify,
                allow_redirects=False,
            )

        except requests.exceptions.Timeout as e:
            raise TimeoutError(
                message=f"Request to {url} timed out",
                cause=e,
            ) from e

        except requests.exceptions.ConnectionError as e:
            raise NetworkError(
                message=f"Connection failed: {str(e)}",
                cause=e,
            ) from e

        except requests.exceptions.RequestException as e:
            raise TransportError(
                message=f"Transport error: {str(e)}",
                cause=e,
            ) from e
