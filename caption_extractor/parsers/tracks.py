from typing import Iterable, Optional, Sequence
from caption_extractor.models.caption import CaptionTrack

def _first(tracks: Iterable[CaptionTrack], predicate) -> Optional[CaptionTrack]:
    return next((t for t in tracks if t.vss_id and predicate(t.vss_id)), None)

def select_track(tracks: Sequence[CaptionTrack], lang: str) -> Optional[CaptionTrack]:
    """Pick the track for ``lang``: manual (``.en``), then auto-generated (``a.en``), then any ``.en`` variant."""
    manual = f".{lang}"
    auto = f"a.{lang}"
    track = (
        _first(tracks, lambda vss: vss == manual)
        or _first(tracks, lambda vss: vss == auto)
        or _first(tracks, lambda vss: manual in vss)
    )
    if track is None or not track.base_url:
        return None
    return track
