from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type, before_sleep_log
import logging
import requests
from youtube_transcript.config import settings
from youtube_transcript.utils.logger import logger

def transport_retry():
    # Only connection-level failures; classified transcript errors are final.
    return retry(
        stop=stop_after_attempt(max(settings.MAX_RETRIES, 1)),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((
            requests.exceptions.ConnectionError,
            requests.exceptions.Timeout,
        )),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True
    )
