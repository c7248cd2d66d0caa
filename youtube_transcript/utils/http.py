from typing import Any, Dict, Optional
import requests
from youtube_transcript.config import settings
from youtube_transcript.utils.retry import transport_retry

def get_session(session: Optional[requests.Session] = None) -> requests.Session:
    return session if session is not None else requests.Session()

def build_headers(lang: Optional[str] = None, **extra: str) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    if lang:
        headers['Accept-Language'] = lang
    headers.update(extra)
    return headers

@transport_retry()
def http_get(session: requests.Session, url: str, headers: Dict[str, str]) -> requests.Response:
    return session.get(url, headers=headers, timeout=settings.REQUEST_TIMEOUT)

@transport_retry()
def http_post(session: requests.Session, url: str, payload: Dict[str, Any], headers: Dict[str, str]) -> requests.Response:
    return session.post(url, json=payload, headers=headers, timeout=settings.REQUEST_TIMEOUT)
