from youtube_transcript.models.transcript import CaptionTrack, TranscriptConfig, TranscriptResult, TranscriptSegment

__all__ = ["CaptionTrack", "TranscriptConfig", "TranscriptResult", "TranscriptSegment"]
