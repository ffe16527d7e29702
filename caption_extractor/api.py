"""Library entry points.

Each function accepts either a ready :class:`SubtitleRequest` or its fields as
keyword arguments::

    get_subtitles(video_id="dQw4w9WgXcQ", lang="de")
"""
from typing import List, Optional
from caption_extractor.models.request import SubtitleRequest
from caption_extractor.models.transcript import SubtitleEntry
from caption_extractor.models.video import VideoDetails
from caption_extractor.providers.youtube import YouTubeCaptionProvider
from caption_extractor.utils.http import Fetcher

def _build_request(request: Optional[SubtitleRequest], options: dict) -> SubtitleRequest:
    if request is None:
        return SubtitleRequest(**options)
    if options:
        return SubtitleRequest(**{**dict(request), **options})
    return request

def get_subtitles_download_url(request: Optional[SubtitleRequest] = None, fetcher: Optional[Fetcher] = None, **options) -> Optional[str]:
    return YouTubeCaptionProvider(fetcher).get_subtitles_download_url(_build_request(request, options))

def get_subtitles(request: Optional[SubtitleRequest] = None, fetcher: Optional[Fetcher] = None, **options) -> List[SubtitleEntry]:
    return YouTubeCaptionProvider(fetcher).get_subtitles(_build_request(request, options))

def get_video_details(request: Optional[SubtitleRequest] = None, fetcher: Optional[Fetcher] = None, **options) -> VideoDetails:
    return YouTubeCaptionProvider(fetcher).get_video_details(_build_request(request, options))
