from typing import Optional
from urllib.parse import urldefrag, urljoin, urlsplit, urlunsplit

SCHEMES = ("http", "https")

def _absolute(raw: str) -> Optional[str]:
    try:
        parts = urlsplit(raw)
    except ValueError:
        return None
    return raw if parts.scheme and parts.netloc else None

def resolve(raw: str, base: str) -> Optional[str]:
    """Turn an attribute value into an absolute http(s) URL, or None.

    ``raw`` is first read as an absolute URL, otherwise joined onto ``base``.
    Anything that does not end up with an http/https scheme and a host
    (``mailto:``, ``javascript:``, ``data:``, malformed hosts) is rejected.
    No network access happens here.
    """
    raw = raw.strip()
    if not raw:
        return None
    url = _absolute(raw)
    if url is None:
        try:
            url = urljoin(base, raw)
        except ValueError:
            return None
    try:
        parts = urlsplit(url)
        _ = parts.port  # raises on a non-numeric or out-of-range port
    except ValueError:
        return None
    scheme = parts.scheme.lower()
    if scheme not in SCHEMES or not parts.hostname:
        return None
    # lowercase the host, keep any userinfo as written
    at = parts.netloc.rfind("@") + 1
    netloc = parts.netloc[:at] + parts.netloc[at:].lower()
    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, parts.fragment))

def normalize_key(url: str) -> str:
    """Dedup identity: the URL without its fragment."""
    return urldefrag(url).url

def same_host(url: str, base: str) -> bool:
    return (urlsplit(url).hostname or "") == (urlsplit(base).hostname or "")
