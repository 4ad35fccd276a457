from __future__ import annotations

from collections import deque
from typing import Deque, Optional, Set

from .models import START_REFERRER, FrontierEntry


class Frontier:
    """FIFO of pages to visit plus the visited set of one crawl run.

    A URL is rejected by ``try_enqueue`` while it is pending or once it has
    been visited, so it is fetched at most once per run.
    """

    def __init__(self) -> None:
        self._queue: Deque[FrontierEntry] = deque()
        self._pending: Set[str] = set()
        self._visited: Set[str] = set()

    def seed(self, url: str) -> None:
        self._queue.append(FrontierEntry(url, START_REFERRER))
        self._pending.add(url)

    def try_enqueue(self, url: str, referrer: str) -> bool:
        if url in self._visited or url in self._pending:
            return False
        self._queue.append(FrontierEntry(url, referrer))
        self._pending.add(url)
        return True

    def take_next(self) -> Optional[FrontierEntry]:
        if not self._queue:
            return None
        return self._queue.popleft()

    def mark_visited(self, url: str) -> None:
        self._visited.add(url)
        self._pending.discard(url)

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    def is_pending(self, url: str) -> bool:
        return url in self._pending

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def __len__(self) -> int:
        return len(self._queue)
