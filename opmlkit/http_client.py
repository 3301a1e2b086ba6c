import contextlib
import functools
import logging
from collections.abc import Iterator

import httpx

from opmlkit.config import get_settings

logger = logging.getLogger(__name__)


class Client:
    """Handles HTTP GET requests.

    Responses are returned whatever their status code.
    """

    def __init__(
        self,
        headers: dict | None = None,
        *,
        follow_redirects: bool | None = None,
        timeout: float | None = None,
        **kwargs,
    ) -> None:
        settings = get_settings()

        if settings.user_agent:
            headers = {"User-Agent": settings.user_agent} | (headers or {})

        if timeout is None:
            timeout = settings.http_timeout

        if timeout is not None:
            kwargs["timeout"] = timeout

        self._client = httpx.Client(
            headers=headers,
            follow_redirects=(
                settings.follow_redirects
                if follow_redirects is None
                else follow_redirects
            ),
            **kwargs,
        )

    @contextlib.contextmanager
    def stream(
        self, url: str, headers: dict | None = None, **kwargs
    ) -> Iterator[httpx.Response]:
        """Does an HTTP GET request and returns a stream."""
        with self._client.stream("GET", url, headers=headers, **kwargs) as response:
            logger.debug("GET %s: %s", url, response.status_code)
            yield response

    def close(self) -> None:
        """Closes underlying connections."""
        self._client.close()


@functools.cache
def get_client(**kwargs) -> Client:
    """Returns Client instance"""
    return Client(**kwargs)
