from typing import List
from pydantic import BaseModel, Field
from caption_extractor.models.transcript import SubtitleEntry

NO_TITLE = "No title found"
NO_DESCRIPTION = "No description found"

class VideoDetails(BaseModel):
    title: str = NO_TITLE
    description: str = NO_DESCRIPTION
    subtitles: List[SubtitleEntry] = Field(default_factory=list)
