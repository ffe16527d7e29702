import html
import re
from typing import Callable, List, Optional
from caption_extractor.models.transcript import SubtitleEntry
from caption_extractor.utils.logger import logger

XML_PROLOG = '<?xml version="1.0" encoding="utf-8" ?><transcript>'
ROOT_CLOSE = '</transcript>'
SEGMENT_CLOSE = '</text>'

START_RE = re.compile(r'start="(\d+(?:\.\d+)?)"')
DUR_RE = re.compile(r'dur="(\d+(?:\.\d+)?)"')
OPEN_TAG_RE = re.compile(r'<text[^>]*>')
AMP_RE = re.compile(r'&amp;', re.IGNORECASE)
TAG_RE = re.compile(r'</?[^>]+(>|$)')
# A decoded "<" followed by whitespace is a less-than sign, not a tag
DECODED_TAG_RE = re.compile(r'<(?![\s<])/?[^>]*(>|$)')

def strip_tags(text: str) -> str:
    return TAG_RE.sub('', text)

def clean_text(segment: str) -> str:
    """Turn one raw ``<text ...>body`` segment into plain text.

    Decoding can uncover escaped markup such as ``&lt;b&gt;``, so tags are
    stripped again after ``html.unescape``.
    """
    body = OPEN_TAG_RE.sub('', segment, count=1)
    body = AMP_RE.sub('&', body)
    body = strip_tags(body)
    return DECODED_TAG_RE.sub('', html.unescape(body))

def parse_transcript(document: str, on_warning: Optional[Callable[[str], None]] = None) -> List[SubtitleEntry]:
    warn = on_warning or logger.warning
    body = document.replace(XML_PROLOG, '', 1).replace(ROOT_CLOSE, '', 1)

    entries = []
    for line in body.split(SEGMENT_CLOSE):
        if not line.strip():
            continue
        start = START_RE.search(line)
        dur = DUR_RE.search(line)
        if not start or not dur:
            warn(f"Failed to extract start or duration from line: {line}")
            continue
        entries.append(SubtitleEntry(start=start.group(1), dur=dur.group(1), text=clean_text(line)))
    return entries
