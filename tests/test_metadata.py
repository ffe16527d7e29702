from caption_extractor.models.video import NO_DESCRIPTION, NO_TITLE
from caption_extractor.parsers.metadata import extract_description, extract_title


def test_title_without_description():
    markup = '<meta name="title" content="X"><meta name="keywords" content="a, b">'
    assert extract_title(markup) == "X"
    assert extract_description(markup) == NO_DESCRIPTION


def test_entities_are_decoded():
    markup = '<meta name="description" content="Tom &amp; Jerry &#39;live&#39;">'
    assert extract_description(markup) == "Tom & Jerry 'live'"
    assert extract_title(markup) == NO_TITLE


def test_empty_content_is_not_a_placeholder():
    markup = '<meta name="title" content=""><meta name="description" content="">'
    assert extract_title(markup) == ""
    assert extract_description(markup) == ""
