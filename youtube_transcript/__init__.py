from youtube_transcript.core.errors import ErrorKind, TranscriptError
from youtube_transcript.core.identifiers import retrieve_video_id
from youtube_transcript.models.transcript import CaptionTrack, TranscriptConfig, TranscriptResult, TranscriptSegment
from youtube_transcript.transcript import fetch_transcript

__version__ = "0.1.0"

__all__ = [
    "CaptionTrack",
    "ErrorKind",
    "TranscriptConfig",
    "TranscriptError",
    "TranscriptResult",
    "TranscriptSegment",
    "fetch_transcript",
    "retrieve_video_id",
]
