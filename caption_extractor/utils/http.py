from typing import Callable, Optional
import requests
from caption_extractor.config import settings
from caption_extractor.errors import FetchError
from caption_extractor.utils.logger import logger
from caption_extractor.utils.retry import http_retry

Fetcher = Callable[[str], str]

def default_headers() -> dict:
    return {
        'User-Agent': settings.USER_AGENT,
        'Accept-Language': settings.ACCEPT_LANGUAGE,
    }

@http_retry()
def _get(url: str, session: requests.Session) -> str:
    resp = session.get(url, headers=default_headers(), timeout=settings.REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.text

def fetch_text(url: str, session: Optional[requests.Session] = None) -> str:
    """GET ``url`` and return the body as text, raising FetchError once retries are exhausted."""
    logger.debug(f"GET {url}")
    try:
        if session is not None:
            return _get(url, session)
        with requests.Session() as own_session:
            return _get(url, own_session)
    except requests.exceptions.RequestException as e:
        raise FetchError(url, e) from e
