import threading
import time
from typing import Dict, List, Tuple

import pytest

from dashboard.core import config
from dashboard.core.endpoints import build_news_url, build_weather_url
from dashboard.fetch.base import BaseFetcher
from dashboard.schemas import FailureKind, FetchFailure, FetchOutcome, FetchRequest, FetchSuccess

WEATHER_PAYLOAD = {"current_weather": {"temperature": 22, "windspeed": 8.3}}
NEWS_PAYLOAD = {"status": "ok", "totalResults": 2, "articles": [{"title": "X"}, {"title": "Y"}]}

class ScriptedFetcher(BaseFetcher):
    """
    Test double for the blocking fetcher.
    Each URL maps to a list of (delay_seconds, outcome) steps, consumed in order;
    the last step repeats once the list runs out.
    """

    def __init__(self, script: Dict[str, List[Tuple[float, FetchOutcome]]]):
        self.script = script
        self.calls: List[str] = []
        self._lock = threading.Lock()

    def fetch(self, request: FetchRequest) -> FetchOutcome:
        with self._lock:
            seen = self.calls.count(request.url)
            self.calls.append(request.url)
        steps = self.script[request.url]
        delay, outcome = steps[min(seen, len(steps) - 1)]
        if delay:
            time.sleep(delay)
        return outcome

    def call_count(self, url: str) -> int:
        return self.calls.count(url)

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Pin settings that affect URLs and headers, restore afterwards"""
    originals = {
        "CITY": config.settings.CITY,
        "NEWS_API_KEY": config.settings.NEWS_API_KEY,
        "USER_AGENT": config.settings.USER_AGENT,
    }
    config.settings.CITY = "Pretoria"
    config.settings.NEWS_API_KEY = "test-key"
    config.settings.USER_AGENT = "AsyncWeatherNewsDashboard/1.0"

    yield

    for key, value in originals.items():
        setattr(config.settings, key, value)

@pytest.fixture
def weather_url() -> str:
    return build_weather_url()

@pytest.fixture
def news_url() -> str:
    return build_news_url()

def success(payload) -> FetchSuccess:
    return FetchSuccess(payload=payload)

def failure(kind: FailureKind = FailureKind.TRANSPORT, message: str = "connection refused") -> FetchFailure:
    return FetchFailure(kind=kind, message=message)
