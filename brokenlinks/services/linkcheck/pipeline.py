from __future__ import annotations

from typing import Callable

from brokenlinks.core.logging import get_logger
from .extractor import extract_links
from .fetcher import Fetcher
from .models import CrawlError, ErrorKind, FetchResult, Outcome
from .resolver import resolve, same_host

logger = get_logger("brokenlinks.pipeline")

Submit = Callable[[str], None]


def _require_success(result: FetchResult) -> None:
    if not result.ok:
        raise CrawlError(
            ErrorKind.HTTP_STATUS, f"HTTP {result.status_code}", status=result.status_code
        )


class LinkChecker:
    """Per-URL pipeline bound to one crawl.

    ``site`` is the URL whose host counts as internal. It starts as the seed
    and moves to wherever the seed redirects, so ``example.com`` answering
    with ``www.example.com`` still gets its pages expanded. The seed is the
    only URL in flight until it submits its links, so the switch happens
    before any other page is classified.
    """

    def __init__(self, seed: str, fetcher: Fetcher):
        self.seed = seed
        self.site = seed
        self.fetcher = fetcher

    def __call__(self, url: str, submit: Submit) -> Outcome:
        try:
            return self._check(url, submit)
        except CrawlError as err:
            return Outcome.failure(url, err)

    def _check(self, url: str, submit: Submit) -> Outcome:
        result = self.fetcher.fetch(url)
        _require_success(result)
        if url == self.seed and result.url != self.site:
            logger.info("%s redirects to %s, following that host", url, result.url)
            self.site = result.url

        # internal is decided where the page ended up, which is also where its links resolve
        if not (same_host(result.url, self.site) and result.is_html):
            return Outcome.success(url, result.status_code)

        if not result.has_body:
            result = self.fetcher.fetch_body(url)
            _require_success(result)
            if not same_host(result.url, self.site):
                return Outcome.success(url, result.status_code)

        found = 0
        for raw in extract_links(result.body):
            link = resolve(raw, result.url)
            if link is not None:
                submit(link)
                found += 1
        logger.debug("%s: %d links", url, found)
        return Outcome.success(url, result.status_code, size=len(result.body))


def check_url(url: str, base: str, fetcher: Fetcher, submit: Submit) -> Outcome:
    """Run the pipeline once for ``url`` within the site rooted at ``base``."""
    return LinkChecker(base, fetcher)(url, submit)
