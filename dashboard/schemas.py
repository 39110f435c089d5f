from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

class FetchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra headers merged on top of the defaults")

class FailureKind(str, Enum):
    TRANSPORT = "TransportError"
    HTTP = "HttpError"
    PARSE = "ParseError"
    TIMEOUT = "TimeoutError"

class FetchSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    payload: Any

    @property
    def ok(self) -> bool:
        return True

class FetchFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        return False

FetchOutcome = Union[FetchSuccess, FetchFailure]

class ParallelSuccess(BaseModel):
    """Aggregate success of a join-all: payloads in request order, not completion order"""
    model_config = ConfigDict(frozen=True)

    payloads: Tuple[Any, ...]

    @property
    def ok(self) -> bool:
        return True

# Display-side views of the upstream payloads. The fetch layer never
# validates against these; only the dashboard view does, leniently.
# Only rendered fields are typed; the rest pass through untouched so a
# stray value in an unrelated field never hides what can be shown.

class CurrentWeather(BaseModel):
    model_config = ConfigDict(extra="allow")

    temperature: Optional[Union[int, float]] = Field(None, description="Temperature in Celsius")
    windspeed: Optional[Union[int, float]] = Field(None, description="Wind speed in km/h")
    weathercode: Any = Field(None, description="WMO weather interpretation code")
    time: Any = None

class WeatherPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    current_weather: Optional[CurrentWeather] = None
    latitude: Any = None
    longitude: Any = None

class NewsArticle(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    source: Any = None
    author: Any = None
    description: Any = None
    url: Any = None
    publishedAt: Any = None

class NewsApiResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: Any = None
    totalResults: Any = None
    articles: List[Any] = Field(default_factory=list)
