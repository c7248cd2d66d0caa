from typing import Optional, Union
import requests
from youtube_transcript.core.errors import ErrorKind, TranscriptError
from youtube_transcript.core.identifiers import retrieve_video_id
from youtube_transcript.models.transcript import TranscriptConfig, TranscriptResult
from youtube_transcript.providers.html_scrape import HtmlScrapingStrategy
from youtube_transcript.providers.innertube import InnerTubeStrategy
from youtube_transcript.utils.logger import logger

def fetch_transcript(
    video: str,
    config: Optional[Union[TranscriptConfig, dict]] = None,
    *,
    lang: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> TranscriptResult:
    """
    Fetch the timed captions of a YouTube video.

    `video` is a watch/short/embed URL or a bare 11-character ID. The watch
    page is scraped first; only an empty transcript from it triggers the
    InnerTube API fallback. Any other TranscriptError is raised as-is.
    A session created here is closed before returning.
    """
    if config is None:
        config = TranscriptConfig(lang=lang)
    elif isinstance(config, dict):
        config = TranscriptConfig.model_validate(config)
    if lang is not None:
        config = config.model_copy(update={"lang": lang})

    video_id = retrieve_video_id(video)

    if session is None:
        with requests.Session() as own_session:
            return _fetch_with_fallback(video_id, config, own_session)
    return _fetch_with_fallback(video_id, config, session)

def _fetch_with_fallback(video_id: str, config: TranscriptConfig, session: requests.Session) -> TranscriptResult:
    try:
        return HtmlScrapingStrategy(session).get_transcript(video_id, config)
    except TranscriptError as e:
        if e.kind is not ErrorKind.EMPTY_TRANSCRIPT:
            raise
        logger.warning(f"{e} Falling back to InnerTube API...")

    return InnerTubeStrategy(session).get_transcript(video_id, config)
