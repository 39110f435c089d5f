"""
Callback version of the dashboard.

Weather, then news, then weather again. Each fetch is dispatched from the
previous fetch's completion callback, and a failure at any stage stops the
ones after it.
"""
import logging
import threading
from typing import Optional

from dashboard.core.endpoints import news_request, weather_request
from dashboard.core.logs import configure_logging
from dashboard.fetch.base import BaseFetcher
from dashboard.fetch.executor import FetchExecutor
from dashboard.fetch.requests_fetcher import RequestsFetcher
from dashboard.orchestrators.sequential import SequentialOrchestrator, SequentialResult, SequentialState, Stage
from dashboard.views.dashboard import display_footer, display_header, display_news, display_weather, extract_articles

VERSION = "Callback"

logger = logging.getLogger(__name__)

def build_stages() -> list:
    return [
        Stage(
            name="Weather Fetch",
            request=weather_request(),
            on_success=lambda payload: display_weather(payload, "Callback"),
        ),
        Stage(
            name="News Fetch",
            request=news_request(),
            on_success=lambda payload: display_news(extract_articles(payload), "Callback"),
        ),
        Stage(
            name="Second Weather Fetch",
            request=weather_request(),
            on_success=lambda payload: display_weather(payload, "Callback - Second Fetch"),
        ),
    ]

def run(fetcher: Optional[BaseFetcher] = None) -> SequentialResult:
    display_header(VERSION)

    finished = threading.Event()
    results = []

    def on_finished(result: SequentialResult) -> None:
        if result.state is SequentialState.DONE:
            display_footer(VERSION)
        results.append(result)
        finished.set()

    with FetchExecutor(fetcher or RequestsFetcher()) as executor:
        orchestrator = SequentialOrchestrator(build_stages(), dispatch=executor.fetch_with_callback)
        orchestrator.start(on_finished=on_finished)
        finished.wait()

    logger.info("callback run finished: %s", results[0].state.value)
    return results[0]

def main() -> None:
    configure_logging()
    run()

if __name__ == "__main__":
    main()
