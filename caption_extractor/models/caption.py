from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class CaptionTrack(BaseModel):
    """One caption track advertised by the watch page's ``captionTracks`` manifest."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    base_url: Optional[str] = Field(default=None, alias="baseUrl")
    vss_id: Optional[str] = Field(default=None, alias="vssId")
