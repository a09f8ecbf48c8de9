import pytest
import brokenlinks.services.linkcheck.extractor as ex
from brokenlinks.services.linkcheck.models import CrawlError, ErrorKind
from brokenlinks.services.linkcheck.extractor import extract_links

PAGE = b"""
<html><head>
  <link rel="stylesheet" href="/style.css">
  <script src="/app.js"></script>
  <script>inline()</script>
</head><body>
  <a href="/one">one</a>
  <a href="#top">top</a>
  <a href="/two#part">two</a>
  <a name="anchor-only">no href</a>
  <img src="logo.png">
</body></html>
"""

def test_sources_in_fixed_order_without_fragments():
    assert list(extract_links(PAGE)) == ["/one", "/app.js", "logo.png", "/style.css"]

def test_candidates_can_be_iterated_twice():
    links = extract_links(PAGE)
    assert list(links) == list(links)

def test_empty_document_has_no_links():
    assert list(extract_links(b"")) == []

def test_only_stylesheet_links_are_followed():
    body = (
        b'<link rel="preconnect" href="https://fonts.gstatic.com">'
        b'<link rel="alternate" href="/feed.xml">'
        b'<link rel="Stylesheet preload" href="/s.css">'
        b'<link href="/no-rel.css">'
    )
    assert list(extract_links(body)) == ["/s.css"]

def test_unparseable_markup_is_a_parse_error(monkeypatch):
    def broken_parser(*args, **kwargs):
        raise ValueError("bad markup")

    monkeypatch.setattr(ex, "BeautifulSoup", broken_parser)
    with pytest.raises(CrawlError) as exc:
        extract_links(b"<a href='/x'>")
    assert exc.value.kind is ErrorKind.PARSE
    assert "bad markup" in exc.value.detail
