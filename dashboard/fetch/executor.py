import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from dashboard.core.config import settings
from dashboard.schemas import FailureKind, FetchFailure, FetchOutcome, FetchRequest

from .base import BaseFetcher

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[FetchOutcome], None]

class FetchExecutor:
    """
    Runs a blocking fetcher on a thread pool.

    Exposes the same primitive two ways: as a future (promise style) and
    as a callback invoked with the outcome once it settles (callback style).
    Futures handed out here always settle with a FetchOutcome, even when
    the fetcher itself misbehaves and raises.
    """

    def __init__(self, fetcher: BaseFetcher, max_workers: Optional[int] = None):
        self.fetcher = fetcher
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers or settings.MAX_WORKERS,
            thread_name_prefix="fetch",
        )

    def __enter__(self) -> "FetchExecutor":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def submit(self, request: FetchRequest) -> "Future[FetchOutcome]":
        return self._pool.submit(self._fetch, request)

    def fetch_with_callback(self, request: FetchRequest, callback: OutcomeCallback) -> None:
        def deliver(future: "Future[FetchOutcome]") -> None:
            try:
                outcome = future.result()
            except Exception as e:
                outcome = _unexpected(e)
            callback(outcome)

        self.submit(request).add_done_callback(deliver)

    def shutdown(self, wait: bool = True) -> None:
        # Losers of a race may still be running; they finish without observers.
        self._pool.shutdown(wait=wait)

    def _fetch(self, request: FetchRequest) -> FetchOutcome:
        try:
            return self.fetcher.fetch(request)
        except Exception as e:
            logger.exception("fetcher raised for %s", request.url)
            return _unexpected(e)

def _unexpected(error: Exception) -> FetchFailure:
    return FetchFailure(kind=FailureKind.TRANSPORT, message=f"{type(error).__name__}: {error}")
