"""Request manager for fetching pages.

The request manager is responsible for:
- Validating page URLs before any network activity
- Maintaining the HTTP client (httpx.Client)
- Translating transport failures into TransientException subclasses
- Converting HTTP responses to Response objects
"""

from __future__ import annotations

import logging
import re
from typing import Any

import httpx

from deviantscrape.common.exceptions import (
    HTMLResponseAssumptionException,
    InvalidURLException,
    RequestTimeoutException,
    UnableToConnectException,
)
from deviantscrape.data_types import Response

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "deviantscrape/1.0"

URL_PATTERN = re.compile(
    r"^https?://[a-z0-9]+([\-.][a-z0-9]+)*\.[a-z]{2,5}(:[0-9]{1,5})?(/.*)?$",
    re.IGNORECASE,
)


def validate_url(url: Any) -> str:
    """Return ``url`` if it is an absolute http(s) URL with a named host.

    Raises:
        InvalidURLException: Otherwise.
    """
    if not isinstance(url, str) or not URL_PATTERN.match(url):
        raise InvalidURLException(url)
    return url


class SyncRequestManager:
    """Fetches pages over HTTP with httpx.

    Example::

        with SyncRequestManager(timeout=30.0) as manager:
            response = manager.fetch("http://today.deviantart.com/")
    """

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        verify: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the request manager.

        Args:
            timeout: Request timeout in seconds. None means no timeout (default).
            user_agent: User-Agent header sent with every request.
            verify: Verify TLS certificates.
            transport: Optional httpx transport, e.g. httpx.MockTransport.
        """
        self.timeout = timeout
        self._client = httpx.Client(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            verify=verify,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> SyncRequestManager:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def fetch(self, url: str) -> Response:
        """Fetch a page and return the Response.

        Args:
            url: Absolute http(s) URL.

        Returns:
            Response containing the HTTP response data.

        Raises:
            InvalidURLException: If the URL fails validation.
            RequestTimeoutException: If the request times out.
            UnableToConnectException: If the server cannot be reached.
            HTMLResponseAssumptionException: If server returns 5xx status code.
        """
        validate_url(url)
        logger.debug("GET %s", url)

        try:
            http_response = self._client.get(url)
        except httpx.TimeoutException as e:
            raise RequestTimeoutException(
                url=url, timeout_seconds=self.timeout
            ) from e
        except httpx.TransportError as e:
            raise UnableToConnectException(url, str(e)) from e

        if http_response.status_code >= 500:
            raise HTMLResponseAssumptionException(
                status_code=http_response.status_code,
                expected_codes=[200],
                url=url,
            )

        return Response(
            status_code=http_response.status_code,
            headers=dict(http_response.headers),
            content=http_response.content,
            text=http_response.text,
            url=url,
        )
