from typing import Set

from .resolver import normalize_key


class Frontier:
    """Normalized keys already scheduled during one crawl.

    Not locked: the dispatcher's consumer thread is its only user.
    """

    def __init__(self):
        self._seen: Set[str] = set()

    def add(self, url: str) -> bool:
        key = normalize_key(url)
        if key in self._seen:
            return False
        self._seen.add(key)
        return True

    def __contains__(self, url: str) -> bool:
        return normalize_key(url) in self._seen

    def __len__(self) -> int:
        return len(self._seen)
