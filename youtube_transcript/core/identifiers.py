import re
from youtube_transcript.core.errors import TranscriptError

VIDEO_ID_LENGTH = 11

# watch?v=, youtu.be/, /embed/, /e/, /v/, /shorts/ and /user/.../ID shapes
RE_YOUTUBE = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?|shorts)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})",
    re.IGNORECASE,
)

def retrieve_video_id(value: str) -> str:
    """Return the 11-character video ID from a bare ID or any known URL shape."""
    if len(value) == VIDEO_ID_LENGTH:
        return value
    m = RE_YOUTUBE.search(value)
    if m:
        return m.group(1)
    raise TranscriptError.identifier_resolution_failed(value)
