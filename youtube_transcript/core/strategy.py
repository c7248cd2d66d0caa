from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import requests
from youtube_transcript.core.errors import TranscriptError
from youtube_transcript.core.processor import process_captions
from youtube_transcript.models.transcript import TranscriptConfig, TranscriptResult
from youtube_transcript.utils.http import get_session
from youtube_transcript.utils.logger import logger

class CaptionStrategy(ABC):
    method: str = ""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = get_session(session)

    @abstractmethod
    def fetch_captions(self, video_id: str, config: TranscriptConfig) -> Optional[Dict[str, Any]]:
        """Return the playerCaptionsTracklistRenderer mapping, or None when absent."""
        pass

    def get_transcript(self, video_id: str, config: TranscriptConfig) -> TranscriptResult:
        logger.info(f"Fetching transcript for {video_id} via {self.method}...")
        captions = self.fetch_captions(video_id, config)
        segments = process_captions(captions, video_id, config, self.session)
        if not segments:
            raise TranscriptError.empty_transcript(video_id, self.method)
        logger.info(f"Got {len(segments)} segments via {self.method}")
        return segments
