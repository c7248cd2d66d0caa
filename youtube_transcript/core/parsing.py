"""
Parsing of watch-page HTML and timed-text XML.

The markers below track the current layout of the watch page; when YouTube
changes it, this module is the only place that needs updating.
"""
import json
import re
from typing import Any, Dict, List, Optional, Tuple
from youtube_transcript.core.errors import TranscriptError

CAPTIONS_MARKER = '"captions":'
VIDEO_DETAILS_MARKER = ',"videoDetails'
RECAPTCHA_MARKER = 'class="g-recaptcha"'
PLAYABILITY_MARKER = '"playabilityStatus":'
TRACKLIST_KEY = "playerCaptionsTracklistRenderer"

RE_XML_TRANSCRIPT = re.compile(r'<text start="([^"]*)" dur="([^"]*)">([^<]*)</text>')

def extract_captions_json(html: str, video_id: str) -> Optional[Dict[str, Any]]:
    """
    Locate the captions blob embedded in a watch page.

    Raises TranscriptError when the page has no captions blob at all. A blob
    that fails to decode is returned as None and left to the processor.
    """
    parts = html.split(CAPTIONS_MARKER)
    if len(parts) <= 1:
        if RECAPTCHA_MARKER in html:
            raise TranscriptError.too_many_requests(video_id)
        if PLAYABILITY_MARKER not in html:
            raise TranscriptError.video_unavailable(video_id)
        raise TranscriptError.transcript_disabled(video_id)

    fragment = parts[1].split(VIDEO_DETAILS_MARKER)[0].replace("\n", "")
    try:
        data = json.loads(fragment)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    return data.get(TRACKLIST_KEY)

def parse_timed_text(body: str) -> List[Tuple[str, str, str]]:
    """(start, dur, text) for every <text> element, in document order, text untouched."""
    return RE_XML_TRANSCRIPT.findall(body)
