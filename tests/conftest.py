import pytest

WATCH_PAGE = (
    '<html><head>'
    '<meta name="title" content="Caption &amp; Test">'
    '<meta name="description" content="A video about captions">'
    '</head><body><script>var ytInitialPlayerResponse = {"captions":'
    '{"playerCaptionsTracklistRenderer":{"captionTracks":['
    '{"baseUrl":"https://example.com/api/timedtext?lang=fr","vssId":".fr","languageCode":"fr"},'
    '{"baseUrl":"https://example.com/api/timedtext?lang=en&kind=asr","vssId":"a.en","languageCode":"en"}'
    '],"audioTracks":[]}}};</script></body></html>'
)

TRANSCRIPT = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="0.5" dur="1.25">Hello &amp;amp; welcome</text>'
    '<text start="1.75" dur="2">It&amp;#39;s a test</text>'
    '</transcript>'
)


class FakeFetcher:
    """Serves canned bodies by URL and records every request."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        if url not in self.pages:
            raise KeyError(url)
        return self.pages[url]


@pytest.fixture
def warnings_seen():
    return []


@pytest.fixture
def fetcher():
    return FakeFetcher({
        "https://m.youtube.com/watch?v=abc123def45": WATCH_PAGE,
        "https://example.com/api/timedtext?lang=en&kind=asr": TRANSCRIPT,
        "https://example.com/api/timedtext?lang=fr": '<text start="9" dur="1">Bonjour</text>',
    })
