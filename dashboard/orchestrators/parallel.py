"""
Join-all over fetch outcomes.

Both variants launch every fetch before waiting on any of them, return the
payloads in request order when all succeed, and fail fast: the first failure
observed is returned immediately and the still-pending siblings are
cancelled. asyncio tasks are cancelled outright; a thread future can only be
cancelled before it starts running, otherwise it finishes unobserved.
"""
import asyncio
import logging
from concurrent.futures import Future, as_completed
from typing import Awaitable, List, Sequence, Union

from dashboard.schemas import FetchFailure, FetchOutcome, ParallelSuccess

logger = logging.getLogger(__name__)

ParallelOutcome = Union[ParallelSuccess, FetchFailure]

def gather_futures(futures: Sequence["Future[FetchOutcome]"]) -> ParallelOutcome:
    """Block until every future succeeded, or until the first failure settles."""
    futures = list(futures)
    for future in as_completed(futures):
        outcome = future.result()
        if not outcome.ok:
            cancelled = sum(1 for f in futures if f.cancel())
            logger.debug("join-all failed fast (%s), cancelled %d pending", outcome.kind.value, cancelled)
            return outcome
    return ParallelSuccess(payloads=tuple(f.result().payload for f in futures))

async def gather_async(awaitables: Sequence[Awaitable[FetchOutcome]]) -> ParallelOutcome:
    """Await every fetch concurrently, or return the first failure and cancel the rest."""
    tasks: List["asyncio.Future[FetchOutcome]"] = [asyncio.ensure_future(a) for a in awaitables]
    try:
        for next_settled in asyncio.as_completed(tasks):
            outcome = await next_settled
            if not outcome.ok:
                logger.debug("join-all failed fast (%s)", outcome.kind.value)
                return outcome
        return ParallelSuccess(payloads=tuple(t.result().payload for t in tasks))
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
