import os
from typing import Optional

class Settings:
    # Weather API (Open-Meteo, no key required)
    WEATHER_API_BASE: str = os.getenv("WEATHER_API_BASE", "https://api.open-meteo.com/v1/forecast")
    LATITUDE: float = float(os.getenv("LATITUDE", "-25.7479"))
    LONGITUDE: float = float(os.getenv("LONGITUDE", "28.2293"))
    CITY: str = os.getenv("CITY", "Pretoria")

    # News API (NewsAPI.org, key sent as X-Api-Key header)
    NEWS_API_BASE: str = os.getenv("NEWS_API_BASE", "https://newsapi.org/v2")
    NEWS_TOP_HEADLINES_PATH: str = os.getenv("NEWS_TOP_HEADLINES_PATH", "/top-headlines")
    NEWS_API_KEY: Optional[str] = os.getenv("NEWS_API_KEY")
    NEWS_COUNTRY: str = os.getenv("NEWS_COUNTRY", "us")
    NEWS_PAGE_SIZE: int = int(os.getenv("NEWS_PAGE_SIZE", "5"))

    # HTTP
    USER_AGENT: str = os.getenv("USER_AGENT", "AsyncWeatherNewsDashboard/1.0")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "30"))

    # Thread pool used by the callback and promise versions
    MAX_WORKERS: int = int(os.getenv("MAX_WORKERS", "4"))

    # Logging goes to stderr so it never mixes with the dashboard output
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

settings = Settings()
