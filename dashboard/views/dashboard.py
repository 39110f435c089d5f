"""
Console presentation for the dashboard.

Pure formatting of already-fetched data: normal output goes to stdout,
errors to stderr. Nothing here raises on malformed or partial payloads;
anything that does not fit the expected shape renders as "unavailable".
"""
import sys
from typing import Any, List, Union

from pydantic import ValidationError

from dashboard.core.config import settings
from dashboard.schemas import FetchFailure, NewsApiResponse, NewsArticle, WeatherPayload

BANNER = "=" * 50

def _prefix(label: str) -> str:
    return f"[{label}] " if label else ""

def display_header(version: str) -> None:
    print(f"\n{BANNER}")
    print("🌦️  Async Weather & News Dashboard")
    print(f"📋  Version: {version}")
    print(f"{BANNER}\n")

def display_footer(version: str) -> None:
    print(f"\n{BANNER}")
    print(f"✅  {version} — Complete")
    print(f"{BANNER}\n")

def display_notice(message: str) -> None:
    print(f"\n{message}")

def display_weather(payload: Any, label: str = "") -> None:
    """Print temperature and wind speed, or a notice when current_weather is missing"""
    prefix = _prefix(label)
    try:
        weather = WeatherPayload.model_validate(payload).current_weather if isinstance(payload, dict) else None
    except ValidationError:
        weather = None

    if weather is not None:
        print(f"{prefix}🌡️  Temperature in {settings.CITY}: {_value(weather.temperature)}°C")
        print(f"{prefix}💨  Wind Speed: {_value(weather.windspeed)} km/h")
    else:
        print(f"{prefix}⚠️  Weather data unavailable.")

def extract_articles(payload: Any) -> List[Any]:
    """Accept either a NewsAPI envelope or a bare list of articles."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        try:
            return NewsApiResponse.model_validate(payload).articles
        except ValidationError:
            return []
    return []

def display_news(articles: Any, label: str = "") -> None:
    """Print headlines as a numbered list"""
    prefix = _prefix(label)
    articles = articles if isinstance(articles, list) else []

    if not articles:
        print(f"{prefix}⚠️  No news articles available.")
        return

    print(f"\n{prefix}📰  Top News Headlines:")
    for index, raw in enumerate(articles, start=1):
        print(f"   {index}. {_title(raw)}")

def display_error(context: str, error: Union[FetchFailure, BaseException, str]) -> None:
    """Print a one-line error to stderr with the failing operation as context"""
    if isinstance(error, FetchFailure):
        detail = f"{error.kind.value}: {error.message}"
    else:
        detail = str(error)
    print(f"❌  Error [{context}]: {detail}", file=sys.stderr)

def _title(raw: Any) -> str:
    if not isinstance(raw, dict):
        return "(untitled)"
    try:
        title = NewsArticle.model_validate(raw).title
    except ValidationError:
        title = raw.get("title") if isinstance(raw.get("title"), str) else None
    return title or "(untitled)"

def _value(number: Any) -> str:
    return "n/a" if number is None else str(number)
