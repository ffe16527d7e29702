from typing import Callable, List, Optional
import requests
from caption_extractor.config import settings
from caption_extractor.core.source import CaptionSource
from caption_extractor.errors import ProxyConfigurationError
from caption_extractor.models.request import SubtitleRequest
from caption_extractor.models.transcript import SubtitleEntry
from caption_extractor.models.video import VideoDetails
from caption_extractor.parsers.manifest import extract_caption_tracks
from caption_extractor.parsers.metadata import extract_description, extract_title
from caption_extractor.parsers.tracks import select_track
from caption_extractor.parsers.transcript import parse_transcript
from caption_extractor.utils.http import Fetcher, fetch_text
from caption_extractor.utils.logger import logger

Warn = Callable[[str], None]

class YouTubeCaptionProvider(CaptionSource):
    """Reads caption tracks from the mobile watch page and downloads their timed-text documents.

    ``fetcher`` is any callable returning the body of a URL as text; by default
    pages are retrieved with ``requests`` through :func:`fetch_text`.
    """

    def __init__(self, fetcher: Optional[Fetcher] = None, session: Optional[requests.Session] = None):
        self.session = session
        self._fetcher = fetcher

    def fetch(self, url: str) -> str:
        if self._fetcher is not None:
            return self._fetcher(url)
        return fetch_text(url, session=self.session)

    def watch_url(self, video_id: str) -> str:
        return f"https://m.{settings.YOUTUBE_HOST}/watch?v={video_id}"

    def page_url(self, request: SubtitleRequest) -> str:
        url = self.watch_url(request.video_id)
        if request.proxy is None:
            return url
        try:
            proxied = request.proxy(url)
        except Exception as e:
            raise ProxyConfigurationError(f"Proxy function failed for {url}: {e}") from e
        if not isinstance(proxied, str) or not proxied.strip():
            raise ProxyConfigurationError(f"Proxy function returned no usable URL for {url}: {proxied!r}")
        return proxied

    def get_page_html(self, request: SubtitleRequest, warn: Optional[Warn] = None) -> Optional[str]:
        if request.page_html is not None:
            return request.page_html
        if not request.video_id:
            (warn or logger.warning)("No video ID provided")
            return None
        url = self.page_url(request)
        logger.info(f"Fetching watch page for {request.video_id}...")
        return self.fetch(url)

    def get_subtitles_download_url(self, request: SubtitleRequest) -> Optional[str]:
        if request.caption_download_url:
            return request.caption_download_url
        warn = request.on_warning or logger.warning
        markup = self.get_page_html(request, warn)
        if markup is None:
            return None
        return self._select_track_url(markup, request, warn)

    def get_subtitles(self, request: SubtitleRequest) -> List[SubtitleEntry]:
        url = self.get_subtitles_download_url(request)
        if not url:
            return []
        return self._download_subtitles(url, request)

    def get_video_details(self, request: SubtitleRequest) -> VideoDetails:
        warn = request.on_warning or logger.warning
        markup = self.get_page_html(request, warn)
        if markup is None:
            details = VideoDetails()
        else:
            details = VideoDetails(title=extract_title(markup), description=extract_description(markup))

        url = request.caption_download_url
        if not url and markup is not None:
            url = self._select_track_url(markup, request, warn)
        if url:
            details.subtitles = self._download_subtitles(url, request)
        return details

    def _select_track_url(self, markup: str, request: SubtitleRequest, warn: Warn) -> Optional[str]:
        tracks = extract_caption_tracks(markup, on_warning=warn)
        if tracks is None:
            return None
        track = select_track(tracks, request.lang)
        if track is None:
            warn(f"Could not find {request.lang} captions for {request.video_id}")
            return None
        logger.debug(f"Selected caption track {track.vss_id}")
        return track.base_url

    def _download_subtitles(self, url: str, request: SubtitleRequest) -> List[SubtitleEntry]:
        document = self.fetch(url)
        entries = parse_transcript(document, on_warning=request.on_warning)
        logger.info(f"Parsed {len(entries)} subtitle entries.")
        return entries
