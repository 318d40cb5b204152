"""Transport interface.

Transports must be swappable; services depend on this interface only.
A transport holds connections until closed; use it as a context manager.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Self

QueryParams = Sequence[tuple[str, str]]


class Transport(ABC):
    """Interface for read-only access to the CMS REST API."""

    @abstractmethod
    def get(self, path: str, params: QueryParams = ()) -> dict[str, Any]:
        """Return the decoded JSON body of ``GET <base>/<path>?<params>``.

        Raises:
            TransportError: On a non-2xx response or a network failure.
            MalformedResponseError: If the body is not a JSON object.
        """
        ...

    def close(self) -> None:
        """Release any held connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
