import pytest
from conftest import NEWS_PAYLOAD, WEATHER_PAYLOAD, ScriptedFetcher, failure, success

from dashboard.fetch.executor import FetchExecutor
from dashboard.orchestrators.race import PayloadKind, classify_payload, race_futures, render_race_winner
from dashboard.schemas import FailureKind, FetchRequest

REQ_A = FetchRequest(url="https://api.example/weather")
REQ_B = FetchRequest(url="https://api.example/news")

class TestRaceFutures:
    """First settlement wins"""

    def test_earlier_success_wins_and_loser_is_never_rendered(self, capsys):
        fetcher = ScriptedFetcher({
            REQ_A.url: [(0.01, success(WEATHER_PAYLOAD))],
            REQ_B.url: [(0.05, success(NEWS_PAYLOAD))],
        })
        with FetchExecutor(fetcher) as executor:
            outcome = race_futures([executor.submit(REQ_A), executor.submit(REQ_B)])
            kind = render_race_winner(outcome)
        # executor has shut down: the loser has settled by now

        out = capsys.readouterr().out
        assert outcome.payload == WEATHER_PAYLOAD
        assert kind is PayloadKind.WEATHER
        assert "Weather API responded first!" in out
        assert "Top News Headlines" not in out
        assert "News API responded first!" not in out

    def test_earlier_failure_settles_the_race(self, capsys):
        fetcher = ScriptedFetcher({
            REQ_A.url: [(0.005, failure(FailureKind.TRANSPORT, "Connection reset by peer"))],
            REQ_B.url: [(0.05, success(NEWS_PAYLOAD))],
        })
        with FetchExecutor(fetcher) as executor:
            outcome = race_futures([executor.submit(REQ_A), executor.submit(REQ_B)])
            render_race_winner(outcome)

        captured = capsys.readouterr()
        assert outcome.ok is False
        assert outcome.kind is FailureKind.TRANSPORT
        assert "❌  Error [Promise.race]: TransportError: Connection reset by peer" in captured.err
        assert "Top News Headlines" not in captured.out

    def test_request_order_is_irrelevant(self):
        fetcher = ScriptedFetcher({
            REQ_A.url: [(0.3, success(WEATHER_PAYLOAD))],
            REQ_B.url: [(0.0, success(NEWS_PAYLOAD))],
        })
        with FetchExecutor(fetcher) as executor:
            outcome = race_futures([executor.submit(REQ_A), executor.submit(REQ_B)])

        assert outcome.payload == NEWS_PAYLOAD

class TestWinnerClassification:
    """Winner identified by payload shape"""

    @pytest.mark.parametrize("payload, expected", [
        (WEATHER_PAYLOAD, PayloadKind.WEATHER),
        (NEWS_PAYLOAD, PayloadKind.ARTICLES),
        ({"status": "ok", "articles": []}, PayloadKind.ARTICLES),
        ([{"title": "X"}], PayloadKind.ARTICLES),
        ({"latitude": 1.0}, PayloadKind.UNKNOWN),
        ({"current_weather": None}, PayloadKind.UNKNOWN),
        ("pong", PayloadKind.UNKNOWN),
        (None, PayloadKind.UNKNOWN),
    ])
    def test_classify(self, payload, expected):
        assert classify_payload(payload) is expected

    def test_news_winner_renders_headlines(self, capsys):
        kind = render_race_winner(success(NEWS_PAYLOAD))
        out = capsys.readouterr().out
        assert kind is PayloadKind.ARTICLES
        assert "News API responded first!" in out
        assert "   1. X" in out

    def test_unclassified_winner_does_not_crash(self, capsys):
        kind = render_race_winner(success({"unexpected": True}))
        out = capsys.readouterr().out
        assert kind is PayloadKind.UNKNOWN
        assert "Unclassified response won the race" in out
