"""Transport boundary for the uploader.

The uploader never talks to the network itself. It hands a batch to a
``BatchSender`` and classifies the status codes the sender yields, which lets
tests and alternate environments substitute their own transport.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from squash_uploader.config import UploaderConfig


class BatchSender(Protocol):
    """Protocol for objects that POST a batch of bodies to one URL.

    Implementations must send lazily: the request for body ``n + 1`` is not
    sent until the consumer asks for the next status code. Closing the
    returned iterator abandons the rest of the batch.

    Example:
        >>> sender: BatchSender = RequestsBatchSender()
        >>> statuses = sender.send(url, {"X-Foo": "Bar"}, [b"one", b"two"], config)
        >>> next(statuses)
        200
    """

    def send(
        self,
        url: str,
        headers: Mapping[str, str],
        bodies: Sequence[bytes],
        config: UploaderConfig,
    ) -> Iterator[int]:
        """POST each body to ``url`` in order.

        Args:
            url: Absolute URL to POST to
            headers: Headers attached to every request
            bodies: Request bodies, one request each
            config: Timeouts and TLS verification for the connection

        Returns:
            Iterator over the status code of each response

        Raises:
            TransportError: If a request cannot be completed
        """
        ...
