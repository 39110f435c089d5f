"""
Promise version of the dashboard, built on concurrent.futures.

Three independent sections:
1. a sequential chain (weather, then news) resolved as one future
2. join-all: weather and news in parallel, rendered in request order
3. race: weather and news in parallel, the first to settle wins
"""
import logging
from typing import Optional

from dashboard.core.endpoints import news_request, weather_request
from dashboard.core.logs import configure_logging
from dashboard.fetch.base import BaseFetcher
from dashboard.fetch.executor import FetchExecutor
from dashboard.fetch.requests_fetcher import RequestsFetcher
from dashboard.orchestrators.parallel import gather_futures
from dashboard.orchestrators.race import race_futures, render_race_winner
from dashboard.orchestrators.sequential import SequentialOrchestrator, SequentialState, Stage
from dashboard.views.dashboard import (
    display_error,
    display_header,
    display_news,
    display_notice,
    display_weather,
    extract_articles,
)

VERSION = "Promise"

logger = logging.getLogger(__name__)

def run_sequential_chain(executor: FetchExecutor) -> None:
    def chain_error(context: str, failure) -> None:
        # One handler for every link, like a trailing .catch()
        display_error("Sequential Chain", failure)

    stages = [
        Stage(
            name="Weather Fetch",
            request=weather_request(),
            on_success=lambda payload: display_weather(payload, "Promise - Sequential"),
        ),
        Stage(
            name="News Fetch",
            request=news_request(),
            on_success=lambda payload: display_news(extract_articles(payload), "Promise - Sequential"),
        ),
    ]
    chain = SequentialOrchestrator(stages, dispatch=executor.fetch_with_callback, on_error=chain_error)
    result = chain.run().result()
    if result.state is SequentialState.DONE:
        display_notice("✅  Sequential promise chain complete.")

def run_all(executor: FetchExecutor) -> None:
    outcome = gather_futures([executor.submit(weather_request()), executor.submit(news_request())])
    if not outcome.ok:
        display_error("Promise.all", outcome)
        return

    weather, news = outcome.payloads
    display_notice("--- Promise.all() Results (Parallel Fetch) ---")
    display_weather(weather, "Promise.all")
    display_news(extract_articles(news), "Promise.all")

def run_race(executor: FetchExecutor) -> None:
    outcome = race_futures([executor.submit(weather_request()), executor.submit(news_request())])
    if outcome.ok:
        display_notice("--- Promise.race() Winner (First Response) ---")
    render_race_winner(outcome, "Promise.race")

def run(fetcher: Optional[BaseFetcher] = None) -> None:
    display_header(VERSION)
    with FetchExecutor(fetcher or RequestsFetcher()) as executor:
        run_sequential_chain(executor)
        run_all(executor)
        run_race(executor)
    logger.info("promise run finished")

def main() -> None:
    configure_logging()
    run()

if __name__ == "__main__":
    main()
