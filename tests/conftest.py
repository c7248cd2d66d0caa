import json as jsonlib
from typing import Any, Dict, List, Optional, Tuple

import pytest

VIDEO_ID = "dQw4w9WgXcQ"
TRACK_EN = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en"
TRACK_FR = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=fr"
WATCH_URL = f"https://www.youtube.com/watch?v={VIDEO_ID}"
PLAYER_URL = "https://www.youtube.com/youtubei/v1/player"

TIMED_TEXT = '<text start="1.5" dur="2.0">Hello</text><text start="3.5" dur="1.0">World</text>'

def tracklist(*tracks: Tuple[str, str]) -> Dict[str, Any]:
    return {"captionTracks": [{"languageCode": code, "baseUrl": url, "kind": "asr"} for code, url in tracks]}

def watch_page(captions: Optional[Dict[str, Any]]) -> str:
    blob = jsonlib.dumps({"playerCaptionsTracklistRenderer": captions})
    return (
        '<html><script>var ytInitialPlayerResponse = {"playabilityStatus":{"status":"OK"},'
        f'"captions":{blob},"videoDetails":{{"videoId":"{VIDEO_ID}"}}}};</script></html>'
    )

class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200, payload: Any = None):
        self.text = text
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._payload is not None:
            return self._payload
        return jsonlib.loads(self.text)

class FakeSession:
    """Serves canned responses keyed by (method, url) and records every call."""

    def __init__(self, routes: Optional[Dict[Tuple[str, str], FakeResponse]] = None):
        self.routes = routes or {}
        self.calls: List[Dict[str, Any]] = []

    def _respond(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        try:
            return self.routes[(method, url)]
        except KeyError:
            raise AssertionError(f"Unexpected request: {method} {url}")

    def get(self, url: str, headers: Dict[str, str], timeout: float) -> FakeResponse:
        return self._respond("GET", url, headers=headers, timeout=timeout)

    def post(self, url: str, json: Dict[str, Any], headers: Dict[str, str], timeout: float) -> FakeResponse:
        return self._respond("POST", url, json=json, headers=headers, timeout=timeout)

    def calls_to(self, method: str, url: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["method"] == method and c["url"] == url]

@pytest.fixture
def session() -> FakeSession:
    return FakeSession()

class ClosingFakeSession(FakeSession):
    """FakeSession usable as `with requests.Session() as s`, tracking close()."""

    def __init__(self, routes: Optional[Dict[Tuple[str, str], FakeResponse]] = None):
        super().__init__(routes)
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "ClosingFakeSession":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
