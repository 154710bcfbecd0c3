"""HTTP fetching for URL sources."""

from dataclasses import dataclass

import httpx

from ..logging_config import get_logger
from .exceptions import ContentTooLargeError, FetchError

logger = get_logger(__name__)


@dataclass(frozen=True)
class FetchedResource:
    """Body and response details of a successful GET."""

    content: bytes
    url: str
    content_type: str | None = None
    encoding: str | None = None


class ArticleFetcher:
    """Fetch a URL with a bounded timeout and a browser User-Agent.

    No retries: a timeout, transport failure or non-success status becomes a
    FetchError on the first attempt.
    """

    def __init__(
        self,
        timeout_seconds: float,
        user_agent: str,
        max_content_size_bytes: int,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            timeout_seconds: Total request timeout
            user_agent: User-Agent header (some origins reject empty agents)
            max_content_size_bytes: Bodies larger than this are rejected
            client: Optional externally managed client (not closed here)
        """
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self.max_content_size_bytes = max_content_size_bytes
        self._client = client

    async def fetch(self, url: str) -> FetchedResource:
        """GET the URL and return its body.

        Raises:
            FetchError: On timeout, transport error or non-2xx status
            ContentTooLargeError: If the body exceeds the size limit
        """
        if self._client is not None:
            return await self._fetch(self._client, url)

        async with httpx.AsyncClient(
            timeout=self.timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
        ) as client:
            return await self._fetch(client, url)

    async def _fetch(self, client: httpx.AsyncClient, url: str) -> FetchedResource:
        try:
            response = await client.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout_seconds,
                follow_redirects=True,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning("fetch_timeout", url=url, timeout_seconds=self.timeout_seconds)
            raise FetchError(f"Timeout fetching {url}: {e}") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("fetch_http_error", url=url, status_code=status)
            raise FetchError(f"HTTP error {status} fetching {url}", status_code=status) from e
        except httpx.RequestError as e:
            logger.warning("fetch_request_error", url=url, error=str(e))
            raise FetchError(f"Request error fetching {url}: {e}") from e

        content_length = len(response.content)
        if content_length > self.max_content_size_bytes:
            raise ContentTooLargeError(
                f"Content size {content_length} exceeds limit {self.max_content_size_bytes}"
            )

        return FetchedResource(
            content=response.content,
            url=str(response.url),
            content_type=response.headers.get("content-type"),
            encoding=response.charset_encoding,
        )
