import json
import re
from typing import Callable, List, Optional
from pydantic import ValidationError
from caption_extractor.models.caption import CaptionTrack
from caption_extractor.utils.logger import logger

CAPTIONS_MARKER = "captionTracks"
CAPTION_TRACKS_RE = re.compile(r'"captionTracks":\s*?((\[.*?\]),)')

def extract_caption_tracks(markup: str, on_warning: Optional[Callable[[str], None]] = None) -> Optional[List[CaptionTrack]]:
    """Return the caption tracks embedded in a watch page, or None when there are none to read.

    A page without the ``captionTracks`` marker has no captions at all; a page
    with the marker whose array cannot be matched or decoded is reported
    separately but also yields None.
    """
    warn = on_warning or logger.warning

    if CAPTIONS_MARKER not in markup:
        warn("No captions found in page markup")
        return None

    m = CAPTION_TRACKS_RE.search(markup)
    if not m:
        warn("Failed to extract captionTracks from page markup")
        return None

    try:
        raw = json.loads(m.group(2))
    except json.JSONDecodeError as e:
        warn(f"Failed to decode captionTracks JSON: {e}")
        return None
    if not isinstance(raw, list):
        warn("captionTracks is not a JSON array")
        return None

    tracks = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            tracks.append(CaptionTrack.model_validate(item))
        except ValidationError as e:
            warn(f"Ignoring unreadable caption track record: {e.error_count()} invalid field(s)")
    logger.debug(f"Found {len(tracks)} caption track(s)")
    return tracks
