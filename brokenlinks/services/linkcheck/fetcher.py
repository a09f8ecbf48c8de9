from __future__ import annotations

import httpx

from brokenlinks.core.logging import get_logger
from .models import CrawlError, ErrorKind, FetchResult

logger = get_logger("brokenlinks.fetcher")


def _result(response: httpx.Response, with_body: bool) -> FetchResult:
    return FetchResult(
        url=str(response.url),
        status_code=response.status_code,
        headers=response.headers,
        body=response.content if with_body else None,
    )


class Fetcher:
    """HEAD first, GET when the server cannot answer a HEAD at all.

    Only request-level failures (connect, read, protocol, redirect loops)
    trigger the GET. A 4xx/5xx answer to the HEAD is a real response and is
    returned as is.
    """

    def __init__(self, client: httpx.Client):
        self.client = client

    def fetch(self, url: str) -> FetchResult:
        try:
            return _result(self.client.head(url), with_body=False)
        except httpx.RequestError as exc:
            logger.debug("HEAD %s failed (%s), retrying with GET", url, exc)
        return self._get(url)

    def fetch_body(self, url: str) -> FetchResult:
        return self._get(url)

    def _get(self, url: str) -> FetchResult:
        try:
            response = self.client.get(url)
        except httpx.DecodingError as exc:
            raise CrawlError(ErrorKind.IO, f"body decode failed: {exc}") from exc
        except httpx.RequestError as exc:
            raise CrawlError(ErrorKind.TRANSPORT, _describe(exc)) from exc
        return _result(response, with_body=True)


def _describe(exc: httpx.RequestError) -> str:
    text = str(exc) or type(exc).__name__
    return f"{type(exc).__name__}: {text}"
