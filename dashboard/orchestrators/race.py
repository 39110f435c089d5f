"""
First-settlement race over fetch outcomes.

A failure settling first wins the race just like a success would. The
loser is cancelled where the pool allows it; either way its outcome is
never read. The winner is identified by the shape of its payload, since
both fetches return plain JSON.
"""
import logging
from concurrent.futures import FIRST_COMPLETED, Future, wait
from enum import Enum
from typing import Any, Sequence

from dashboard.schemas import FetchOutcome
from dashboard.views.dashboard import (
    display_error,
    display_news,
    display_notice,
    display_weather,
    extract_articles,
)

logger = logging.getLogger(__name__)

class PayloadKind(str, Enum):
    WEATHER = "weather"
    ARTICLES = "articles"
    UNKNOWN = "unknown"

def race_futures(futures: Sequence["Future[FetchOutcome]"]) -> FetchOutcome:
    """Return the outcome of whichever future settles first."""
    futures = list(futures)
    done, pending = wait(futures, return_when=FIRST_COMPLETED)
    for loser in pending:
        loser.cancel()
    # Several may settle in the same instant; pick deterministically.
    winner = next(f for f in futures if f in done)
    logger.debug("race settled with %d pending", len(pending))
    return winner.result()

def classify_payload(payload: Any) -> PayloadKind:
    if isinstance(payload, dict):
        if payload.get("current_weather"):
            return PayloadKind.WEATHER
        if isinstance(payload.get("articles"), list):
            return PayloadKind.ARTICLES
        return PayloadKind.UNKNOWN
    if isinstance(payload, list):
        return PayloadKind.ARTICLES
    return PayloadKind.UNKNOWN

def render_race_winner(outcome: FetchOutcome, label: str = "Promise.race") -> PayloadKind:
    """Render the race winner and return what kind of payload won."""
    if not outcome.ok:
        display_error(label, outcome)
        return PayloadKind.UNKNOWN

    kind = classify_payload(outcome.payload)
    if kind is PayloadKind.WEATHER:
        display_notice("🏆  Weather API responded first!")
        display_weather(outcome.payload, label)
    elif kind is PayloadKind.ARTICLES:
        display_notice("🏆  News API responded first!")
        display_news(extract_articles(outcome.payload), label)
    else:
        display_notice(f"🏆  Unclassified response won the race: {_preview(outcome.payload)}")
    return kind

def _preview(payload: Any, limit: int = 200) -> str:
    text = repr(payload)
    return text[:limit] + "..." if len(text) > limit else text
