import html
import re
from typing import Optional
from caption_extractor.models.video import NO_DESCRIPTION, NO_TITLE

TITLE_RE = re.compile(r'<meta name="title" content="([^"]*|[^"]*[^&]quot;[^"]*)">')
DESCRIPTION_RE = re.compile(r'<meta name="description" content="([^"]*|[^"]*[^&]quot;[^"]*)">')

def _meta_content(pattern: re.Pattern, markup: str) -> Optional[str]:
    m = pattern.search(markup)
    return html.unescape(m.group(1)) if m else None

def extract_title(markup: str) -> str:
    title = _meta_content(TITLE_RE, markup)
    return NO_TITLE if title is None else title

def extract_description(markup: str) -> str:
    description = _meta_content(DESCRIPTION_RE, markup)
    return NO_DESCRIPTION if description is None else description
