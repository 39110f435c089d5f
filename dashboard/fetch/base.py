import json
from typing import Dict, Optional

from dashboard.core.config import settings
from dashboard.schemas import FailureKind, FetchFailure, FetchOutcome, FetchRequest, FetchSuccess

IDENTITY_HEADER = "User-Agent"

def build_headers(extra: Optional[Dict[str, str]] = None, user_agent: Optional[str] = None) -> Dict[str, str]:
    """
    Merge caller headers on top of the identifying header.
    Caller headers add new keys but never replace User-Agent (case-insensitive).
    """
    headers = {
        key: value
        for key, value in (extra or {}).items()
        if key.lower() != IDENTITY_HEADER.lower()
    }
    headers[IDENTITY_HEADER] = user_agent or settings.USER_AGENT
    return headers

def classify_body(status_code: int, body: str) -> FetchOutcome:
    """Turn a fully drained response into a FetchOutcome."""
    if status_code >= 400:
        return FetchFailure(
            kind=FailureKind.HTTP,
            message=f"HTTP request failed with status {status_code}: {body}",
        )
    try:
        return FetchSuccess(payload=json.loads(body))
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; pathologically nested bodies overflow the decoder
        return FetchFailure(kind=FailureKind.PARSE, message=str(e))

class BaseFetcher:
    def fetch(self, request: FetchRequest) -> FetchOutcome:
        raise NotImplementedError
