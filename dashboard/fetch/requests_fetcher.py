import threading
from typing import List, Optional

import requests

from dashboard.core.config import settings
from dashboard.schemas import FailureKind, FetchFailure, FetchOutcome, FetchRequest

from .base import BaseFetcher, build_headers, classify_body

class RequestsFetcher(BaseFetcher):
    """
    Blocking fetcher. Safe to call from several worker threads at once:
    each thread gets its own requests.Session unless one is injected.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout_sec: Optional[float] = None):
        self._session = session
        self._timeout = timeout_sec if timeout_sec is not None else settings.REQUEST_TIMEOUT
        self._local = threading.local()
        self._opened: List[requests.Session] = []
        self._lock = threading.Lock()

    def session(self) -> requests.Session:
        """Session for the calling thread"""
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._opened.append(session)
        return session

    def fetch(self, request: FetchRequest) -> FetchOutcome:
        headers = build_headers(request.headers)
        try:
            resp = self.session().get(request.url, headers=headers, timeout=self._timeout, stream=True)
            try:
                body = _drain(resp)
            finally:
                resp.close()
        except requests.Timeout as e:
            return FetchFailure(kind=FailureKind.TIMEOUT, message=str(e))
        except requests.RequestException as e:
            return FetchFailure(kind=FailureKind.TRANSPORT, message=str(e))

        return classify_body(int(resp.status_code), body)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
        with self._lock:
            opened, self._opened = self._opened, []
        for session in opened:
            session.close()

def _drain(resp: requests.Response) -> str:
    # Bodies arrive in chunks; the outcome is built only from the whole body.
    resp.encoding = resp.encoding or "utf-8"
    chunks = [chunk for chunk in resp.iter_content(chunk_size=8192, decode_unicode=True) if chunk]
    return "".join(chunks)
