import logging
from rich.logging import RichHandler
from caption_extractor.config import settings

def setup_logger(name: str = "caption_extractor") -> logging.Logger:
    # Library logger: configure our own namespace only, never the root logger
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        log.addHandler(handler)
    log.propagate = False
    return log

logger = setup_logger()
