from enum import Enum
from typing import Any, Dict, List, Optional

class ErrorKind(str, Enum):
    IDENTIFIER_RESOLUTION_FAILED = "identifier_resolution_failed"
    TOO_MANY_REQUESTS = "too_many_requests"
    VIDEO_UNAVAILABLE = "video_unavailable"
    TRANSCRIPT_DISABLED = "transcript_disabled"
    TRANSCRIPT_NOT_AVAILABLE = "transcript_not_available"
    LANGUAGE_NOT_AVAILABLE = "language_not_available"
    EMPTY_TRANSCRIPT = "empty_transcript"

class TranscriptError(Exception):
    """Every classified retrieval failure; callers branch on ``kind``."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        video_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(f"[YoutubeTranscript] {message}")
        self.kind = kind
        self.video_id = video_id
        self.details = details or {}

    @property
    def message(self) -> str:
        return str(self)

    @classmethod
    def identifier_resolution_failed(cls, value: str) -> "TranscriptError":
        return cls(
            ErrorKind.IDENTIFIER_RESOLUTION_FAILED,
            "Impossible to retrieve Youtube video ID.",
            details={"input": value},
        )

    @classmethod
    def too_many_requests(cls, video_id: Optional[str] = None) -> "TranscriptError":
        return cls(
            ErrorKind.TOO_MANY_REQUESTS,
            "YouTube is receiving too many requests from this IP and now requires solving a captcha to continue",
            video_id,
        )

    @classmethod
    def video_unavailable(cls, video_id: str) -> "TranscriptError":
        return cls(ErrorKind.VIDEO_UNAVAILABLE, f"The video is no longer available ({video_id})", video_id)

    @classmethod
    def transcript_disabled(cls, video_id: str) -> "TranscriptError":
        return cls(ErrorKind.TRANSCRIPT_DISABLED, f"Transcript is disabled on this video ({video_id})", video_id)

    @classmethod
    def transcript_not_available(cls, video_id: str, status_code: Optional[int] = None) -> "TranscriptError":
        details = {"status_code": status_code} if status_code is not None else {}
        return cls(
            ErrorKind.TRANSCRIPT_NOT_AVAILABLE,
            f"No transcripts are available for this video ({video_id})",
            video_id,
            details,
        )

    @classmethod
    def language_not_available(cls, lang: str, available: List[str], video_id: str) -> "TranscriptError":
        return cls(
            ErrorKind.LANGUAGE_NOT_AVAILABLE,
            f"No transcripts are available in {lang} this video ({video_id}). "
            f"Available languages: {', '.join(available)}",
            video_id,
            {"requested": lang, "available": list(available)},
        )

    @classmethod
    def empty_transcript(cls, video_id: str, method: str) -> "TranscriptError":
        return cls(
            ErrorKind.EMPTY_TRANSCRIPT,
            f"The transcript file URL returns an empty response using {method} ({video_id})",
            video_id,
            {"method": method},
        )
