from typing import Callable, Optional
from pydantic import BaseModel, ConfigDict, Field
from caption_extractor.config import settings

class SubtitleRequest(BaseModel):
    """Everything one subtitle lookup needs.

    ``page_html`` skips the watch-page download, ``caption_download_url`` skips
    manifest extraction and track selection, and ``proxy`` rewrites the
    watch-page URL before it is fetched. ``on_warning`` receives the message
    for every recoverable condition (missing captions, skipped lines); the
    package logger is used when it is not set.
    """

    model_config = ConfigDict(extra="forbid")

    video_id: Optional[str] = None
    lang: str = Field(default_factory=lambda: settings.DEFAULT_LANG)
    page_html: Optional[str] = None
    caption_download_url: Optional[str] = None
    proxy: Optional[Callable[[str], str]] = None
    on_warning: Optional[Callable[[str], None]] = None
