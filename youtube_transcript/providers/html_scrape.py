from typing import Any, Dict, Optional
from youtube_transcript.config import settings
from youtube_transcript.core.parsing import extract_captions_json
from youtube_transcript.core.strategy import CaptionStrategy
from youtube_transcript.models.transcript import TranscriptConfig
from youtube_transcript.utils.http import build_headers, http_get

class HtmlScrapingStrategy(CaptionStrategy):
    method = "HTML scraping"

    def fetch_captions(self, video_id: str, config: TranscriptConfig) -> Optional[Dict[str, Any]]:
        url = settings.WATCH_URL.format(video_id=video_id)
        headers = build_headers(config.lang, **{'User-Agent': settings.USER_AGENT})
        resp = http_get(self.session, url, headers)
        return extract_captions_json(resp.text, video_id)
