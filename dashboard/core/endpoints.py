"""
URL construction for the two upstream APIs.

Builders are pure string functions; the request factories wrap them into
FetchRequest objects carrying any headers the API needs.
"""
from typing import Dict, Optional
from urllib.parse import urlencode

from dashboard.core.config import settings
from dashboard.schemas import FetchRequest

def build_weather_url(latitude: Optional[float] = None, longitude: Optional[float] = None) -> str:
    """
    Build the Open-Meteo current weather URL.
    Example: build_weather_url(-25.7479, 28.2293)
    -> https://api.open-meteo.com/v1/forecast?latitude=-25.7479&longitude=28.2293&current_weather=true
    """
    params = {
        "latitude": settings.LATITUDE if latitude is None else latitude,
        "longitude": settings.LONGITUDE if longitude is None else longitude,
        "current_weather": "true",
    }
    return f"{settings.WEATHER_API_BASE}?{urlencode(params)}"

def build_news_url(country: Optional[str] = None, page_size: Optional[int] = None) -> str:
    """Build the NewsAPI top headlines URL. The API key is never part of the URL."""
    params = {
        "country": country or settings.NEWS_COUNTRY,
        "pageSize": page_size or settings.NEWS_PAGE_SIZE,
    }
    return f"{settings.NEWS_API_BASE}{settings.NEWS_TOP_HEADLINES_PATH}?{urlencode(params)}"

def news_headers() -> Dict[str, str]:
    """Headers required by NewsAPI for server-side requests"""
    if not settings.NEWS_API_KEY:
        return {}
    return {"X-Api-Key": settings.NEWS_API_KEY}

def weather_request(latitude: Optional[float] = None, longitude: Optional[float] = None) -> FetchRequest:
    return FetchRequest(url=build_weather_url(latitude, longitude))

def news_request(country: Optional[str] = None, page_size: Optional[int] = None) -> FetchRequest:
    return FetchRequest(url=build_news_url(country, page_size), headers=news_headers())
