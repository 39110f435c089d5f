import httpx
from typing import Optional

from dashboard.core.config import settings
from dashboard.schemas import FailureKind, FetchFailure, FetchOutcome, FetchRequest

from .base import build_headers, classify_body

class AsyncFetcher:
    """
    Suspend-capable fetch primitive built on httpx.AsyncClient.

    Use as an async context manager so the client is closed after the run:

        async with AsyncFetcher() as fetcher:
            outcome = await fetcher.fetch(request)
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "AsyncFetcher":
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=settings.REQUEST_TIMEOUT,
                follow_redirects=True,
            )
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, request: FetchRequest) -> FetchOutcome:
        if self._client is None:
            raise RuntimeError("AsyncFetcher used outside of 'async with'")

        headers = build_headers(request.headers)
        try:
            async with self._client.stream("GET", request.url, headers=headers) as response:
                chunks = [chunk async for chunk in response.aiter_text()]
                status = response.status_code
        except httpx.TimeoutException as e:
            return FetchFailure(kind=FailureKind.TIMEOUT, message=str(e) or "request timed out")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return FetchFailure(kind=FailureKind.TRANSPORT, message=str(e))

        return classify_body(status, "".join(chunks))
