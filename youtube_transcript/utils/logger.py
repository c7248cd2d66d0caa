import logging
from rich.logging import RichHandler
from youtube_transcript.config import settings

def setup_logger(name: str = "youtube_transcript") -> logging.Logger:
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        log.addHandler(handler)
    # Own handler only; a host app's root handlers would print every record again.
    log.propagate = False
    return log

logger = setup_logger()
