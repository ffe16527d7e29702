from abc import ABC, abstractmethod
from typing import List, Optional
from caption_extractor.models.request import SubtitleRequest
from caption_extractor.models.transcript import SubtitleEntry
from caption_extractor.models.video import VideoDetails

class CaptionSource(ABC):
    @abstractmethod
    def get_subtitles_download_url(self, request: SubtitleRequest) -> Optional[str]:
        """Resolve the transcript document URL for the requested language."""
        pass

    @abstractmethod
    def get_subtitles(self, request: SubtitleRequest) -> List[SubtitleEntry]:
        """Get the timed subtitle entries."""
        pass

    @abstractmethod
    def get_video_details(self, request: SubtitleRequest) -> VideoDetails:
        """Get title, description and subtitle entries."""
        pass
