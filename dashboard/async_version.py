"""
Async/await version of the dashboard.

Weather and news are fetched in parallel, then a supplementary weather
fetch runs on its own. That last fetch is optional: its failure is
rendered locally and does not touch what was already displayed. The
footer is always printed.
"""
import asyncio
import logging
from typing import Optional

from dashboard.core.endpoints import news_request, weather_request
from dashboard.core.logs import configure_logging
from dashboard.fetch.async_fetcher import AsyncFetcher
from dashboard.orchestrators.parallel import gather_async
from dashboard.views.dashboard import (
    display_error,
    display_footer,
    display_header,
    display_news,
    display_weather,
    extract_articles,
)

VERSION = "Async/Await"

logger = logging.getLogger(__name__)

async def _run_with(fetcher: AsyncFetcher) -> None:
    outcome = await gather_async([
        fetcher.fetch(weather_request()),
        fetcher.fetch(news_request()),
    ])
    if not outcome.ok:
        display_error("Async/Await Run", outcome)
        return

    weather, news = outcome.payloads
    display_weather(weather, "Async/Await")
    display_news(extract_articles(news), "Async/Await")

    additional = await fetcher.fetch(weather_request())
    if additional.ok:
        display_weather(additional.payload, "Async/Await - Additional Fetch")
    else:
        display_error("Additional Weather Fetch", additional)

async def run(fetcher: Optional[AsyncFetcher] = None) -> None:
    display_header(VERSION)
    try:
        async with (fetcher or AsyncFetcher()) as active:
            await _run_with(active)
    except Exception as e:
        # Fetch failures arrive as outcomes; this only sees unexpected faults.
        logger.exception("async run failed")
        display_error("Async/Await Run", e)
    finally:
        display_footer(VERSION)

def main() -> None:
    configure_logging()
    asyncio.run(run())

if __name__ == "__main__":
    main()
