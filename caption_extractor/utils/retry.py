from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests
from caption_extractor.config import settings

def http_retry():
    return retry(
        stop=stop_after_attempt(settings.MAX_RETRIES),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(requests.exceptions.RequestException),
        reraise=True
    )
