from typing import Any, Dict, Optional
from youtube_transcript.config import settings
from youtube_transcript.core.parsing import TRACKLIST_KEY
from youtube_transcript.core.strategy import CaptionStrategy
from youtube_transcript.models.transcript import TranscriptConfig
from youtube_transcript.utils.http import build_headers, http_post

class InnerTubeStrategy(CaptionStrategy):
    """Private player API used by the web client; returns captions as plain JSON."""

    method = "InnerTube API"

    def build_payload(self, video_id: str) -> Dict[str, Any]:
        return {
            "context": {
                "client": {
                    "clientName": settings.INNERTUBE_CLIENT_NAME,
                    "clientVersion": settings.INNERTUBE_CLIENT_VERSION,
                    "userAgent": settings.USER_AGENT,
                }
            },
            "videoId": video_id,
        }

    def fetch_captions(self, video_id: str, config: TranscriptConfig) -> Optional[Dict[str, Any]]:
        headers = build_headers(
            config.lang,
            **{
                'Content-Type': 'application/json',
                'Origin': settings.ORIGIN,
                'Referer': settings.WATCH_URL.format(video_id=video_id),
            }
        )
        resp = http_post(self.session, settings.INNERTUBE_PLAYER_URL, self.build_payload(video_id), headers)
        data = resp.json()
        captions = data.get("captions") if isinstance(data, dict) else None
        if not isinstance(captions, dict):
            return None
        return captions.get(TRACKLIST_KEY)
