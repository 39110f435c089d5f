from urllib.parse import parse_qs, urlparse

from dashboard.core import config
from dashboard.core.endpoints import build_news_url, build_weather_url, news_request, weather_request

class TestUrlBuilders:
    """Unit tests for URL construction"""

    def test_weather_url_has_coordinates(self):
        url = build_weather_url(-25.7479, 28.2293)
        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        assert parsed.netloc == "api.open-meteo.com"
        assert query["latitude"] == ["-25.7479"]
        assert query["longitude"] == ["28.2293"]
        assert query["current_weather"] == ["true"]

    def test_news_url_has_country_and_page_size(self):
        url = build_news_url("za", 3)
        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        assert parsed.path.endswith("/top-headlines")
        assert query == {"country": ["za"], "pageSize": ["3"]}

    def test_api_key_never_in_query(self):
        assert "test-key" not in build_news_url()

class TestRequests:
    """Unit tests for the request factories"""

    def test_weather_request_has_no_extra_headers(self):
        assert weather_request().headers == {}

    def test_news_request_sends_key_as_header(self):
        request = news_request()
        assert request.headers == {"X-Api-Key": "test-key"}

    def test_news_request_without_key(self):
        config.settings.NEWS_API_KEY = None
        assert news_request().headers == {}
