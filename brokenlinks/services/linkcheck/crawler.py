from __future__ import annotations

from typing import Optional

from brokenlinks.core import http
from brokenlinks.core.logging import get_logger
from .dispatcher import Dispatcher, OnOutcome
from .fetcher import Fetcher
from .models import CrawlReport, InvalidBaseURL
from .pipeline import LinkChecker
from .resolver import resolve

logger = get_logger("brokenlinks.crawler")


def parse_base(url: str) -> str:
    base = resolve(url, url)
    if base is None:
        raise InvalidBaseURL(f"invalid base URL: {url!r}")
    return base


def crawl(
    url: str,
    timeout: float = 10.0,
    workers: int = 4,
    request_timeout: float = 30.0,
    verify: bool = True,
    on_outcome: Optional[OnOutcome] = None,
) -> CrawlReport:
    """Check every link reachable from ``url``; external links are checked, not followed."""
    base = parse_base(url)
    logger.info("crawling %s with %d workers", base, workers)
    with http.client(
        timeout=request_timeout, verify=verify, max_connections=workers
    ) as client:
        fetcher = Fetcher(client)
        dispatcher = Dispatcher(
            LinkChecker(base, fetcher),
            workers=workers,
            timeout=timeout,
            stall_timeout=3 * request_timeout,
            on_outcome=on_outcome,
        )
        return dispatcher.run(base)
