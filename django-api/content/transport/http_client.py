"""requests-backed implementation of the Transport.

Every call goes through one pre-configured session bound to the CMS API base
URL. Errors are mapped to TransportError and never retried.
"""

import logging
from typing import Any

import requests
from django.conf import settings

from content.domain.errors import MalformedResponseError, TransportError
from content.transport.interfaces import QueryParams, Transport

logger = logging.getLogger(__name__)


class StrapiClient(Transport):
    """Transport talking to a Strapi-style REST API."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def get(self, path: str, params: QueryParams = ()) -> dict[str, Any]:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, list(params))
        try:
            response = self._session.get(url, params=list(params), timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        if not response.ok:
            raise TransportError(
                f"CMS returned {response.status_code} for {url}",
                status=response.status_code,
                body=response.text,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"Body of {url} is not JSON") from exc
        if not isinstance(payload, dict):
            raise MalformedResponseError(f"Body of {url} is not a JSON object")
        return payload

    def close(self) -> None:
        self._session.close()


def build_client() -> StrapiClient:
    """Build a client from the STRAPI_* settings.

    Each client owns one session, which is not shared between threads.
    """
    return StrapiClient(
        base_url=f"{settings.STRAPI_URL.rstrip('/')}/api",
        token=settings.STRAPI_API_TOKEN or None,
        timeout=settings.STRAPI_TIMEOUT,
    )
