from typing import Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup

from .models import CrawlError, ErrorKind

# (tag, attribute, required rel) triples whose values are followed, in scan order
LINK_SOURCES: List[Tuple[str, str, Optional[str]]] = [
    ("a", "href", None),
    ("script", "src", None),
    ("img", "src", None),
    ("link", "href", "stylesheet"),
]


def _has_rel(el, rel: str) -> bool:
    # bs4 hands back rel as a list of tokens
    values = el.get("rel") or []
    if isinstance(values, str):
        values = values.split()
    return rel in (v.lower() for v in values)


class LinkCandidates:
    """Raw link values of one parsed document.

    The markup is parsed once; every iteration walks the parsed tree again,
    so the sequence can be consumed more than once.
    """

    def __init__(self, body: bytes, sources: List[Tuple[str, str, Optional[str]]] = LINK_SOURCES):
        try:
            self.soup = BeautifulSoup(body, "html.parser")
        except Exception as exc:
            raise CrawlError(ErrorKind.PARSE, f"html parse failed: {exc}") from exc
        self.sources = sources

    def __iter__(self) -> Iterator[str]:
        for tag, attr, rel in self.sources:
            for el in self.soup.find_all(tag):
                if rel is not None and not _has_rel(el, rel):
                    continue
                value = el.get(attr)
                if not isinstance(value, str):
                    continue
                # fragment links point back at a resource already covered
                if "#" in value:
                    continue
                yield value


def extract_links(body: bytes) -> LinkCandidates:
    return LinkCandidates(body)
