from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

import httpx


class ErrorKind(str, enum.Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http-status"
    PARSE = "parse"
    IO = "io"


class CrawlError(Exception):
    """A per-URL failure; caught at the pipeline boundary and turned into a KO."""

    def __init__(self, kind: ErrorKind, detail: str, status: Optional[int] = None):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail
        self.status = status


class InvalidBaseURL(ValueError):
    pass


@dataclass
class FetchResult:
    url: str
    status_code: int
    headers: httpx.Headers
    body: Optional[bytes] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def has_body(self) -> bool:
        return self.body is not None

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    @property
    def is_html(self) -> bool:
        return "text/html" in self.content_type.lower()


@dataclass
class Outcome:
    url: str
    ok: bool
    status: Optional[int] = None
    error: Optional[ErrorKind] = None
    detail: str = ""
    size: Optional[int] = None

    @classmethod
    def success(cls, url: str, status: int, size: Optional[int] = None) -> "Outcome":
        return cls(url=url, ok=True, status=status, size=size)

    @classmethod
    def failure(cls, url: str, err: CrawlError) -> "Outcome":
        return cls(url=url, ok=False, status=err.status, error=err.kind, detail=err.detail)

    def line(self) -> str:
        if self.ok:
            return f"OK {self.url}" + (f" {self.size}" if self.size is not None else "")
        return f"KO {self.url} {self.detail}"


@dataclass
class CrawlReport:
    base: str
    outcomes: List[Outcome] = field(default_factory=list)
    visited: int = 0
    elapsed: float = 0.0
    quiescent: bool = False
    abandoned: int = 0

    @property
    def broken(self) -> List[Outcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def bytes_parsed(self) -> int:
        return sum(o.size or 0 for o in self.outcomes)
