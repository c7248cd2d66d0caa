import re
from typing import Any, Dict, List, Optional
import requests
from pydantic import ValidationError
from youtube_transcript.config import settings
from youtube_transcript.core.errors import TranscriptError
from youtube_transcript.core.parsing import parse_timed_text
from youtube_transcript.models.transcript import CaptionTrack, TranscriptConfig, TranscriptResult, TranscriptSegment
from youtube_transcript.utils.http import build_headers, http_get
from youtube_transcript.utils.logger import logger

RE_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

def _to_float(value: str) -> float:
    # Leading-number semantics: "1.5s" -> 1.5, "" -> nan
    m = RE_LEADING_FLOAT.match(value)
    return float(m.group(0)) if m else float("nan")

def _language_code(track: Any) -> Optional[str]:
    return track.get("languageCode") if isinstance(track, dict) else None

def select_track(tracks: List[Any], video_id: str, lang: Optional[str] = None) -> CaptionTrack:
    """Pick the track for `lang`, or the first one; only the chosen track has to be well-formed."""
    if lang:
        matches = [t for t in tracks if _language_code(t) == lang]
        if not matches:
            available = [str(_language_code(t)) for t in tracks]
            raise TranscriptError.language_not_available(lang, available, video_id)
        selected = matches[0]
    else:
        selected = tracks[0]
    try:
        return CaptionTrack.model_validate(selected)
    except ValidationError:
        raise TranscriptError.transcript_not_available(video_id)

def process_captions(
    captions: Optional[Dict[str, Any]],
    video_id: str,
    config: TranscriptConfig,
    session: requests.Session,
) -> TranscriptResult:
    """
    Turn a captions tracklist into timed segments.

    Validates the tracklist, picks the requested (or default) track, downloads
    its timed-text XML and parses it. An empty list is a valid result here;
    deciding what an empty transcript means is left to the calling strategy.
    """
    if captions is None:
        raise TranscriptError.transcript_disabled(video_id)

    if not isinstance(captions, dict) or "captionTracks" not in captions:
        raise TranscriptError.transcript_not_available(video_id)

    tracks = list(captions["captionTracks"] or [])
    if not tracks:
        if config.lang:
            raise TranscriptError.language_not_available(config.lang, [], video_id)
        raise TranscriptError.transcript_not_available(video_id)

    track = select_track(tracks, video_id, config.lang)
    logger.debug(f"Selected caption track '{track.language_code}' for {video_id}")

    headers = build_headers(config.lang, **{'User-Agent': settings.USER_AGENT})
    resp = http_get(session, track.base_url, headers)
    if not resp.ok:
        logger.warning(f"Caption track download failed for {video_id}: HTTP {resp.status_code}")
        raise TranscriptError.transcript_not_available(video_id, resp.status_code)

    # "" is reported as requested even though it selects the default track
    lang = config.lang if config.lang is not None else str(_language_code(tracks[0]))
    return [
        TranscriptSegment(text=text, duration=_to_float(dur), offset=_to_float(start), lang=lang)
        for start, dur, text in parse_timed_text(resp.text)
    ]
