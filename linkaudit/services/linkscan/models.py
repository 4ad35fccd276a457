from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

START_REFERRER = "START_URL"
NO_TITLE = "No Title"


class RefKind(str, Enum):
    PAGE = "Page"
    IMAGE = "Image"


class CrawlState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


class LinkScanError(Exception):
    def __init__(self, url: str, detail: str = ""):
        super().__init__(f"{url}: {detail}" if detail else url)
        self.url = url
        self.detail = detail


class PageNotFound(LinkScanError):
    """The page answered 404. Reportable."""


class FetchError(LinkScanError):
    """Any other failure to retrieve or parse a page. Logged only."""


@dataclass(frozen=True, slots=True)
class FrontierEntry:
    url: str
    referrer: str = START_REFERRER


@dataclass(frozen=True, slots=True)
class PageResult:
    url: str
    title: str = NO_TITLE
    links: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class BrokenReference:
    kind: RefKind
    broken_url: str
    referrer: str
    page_title: Optional[str] = None


@dataclass(slots=True)
class CrawlStats:
    pages_visited: int = 0
    images_checked: int = 0
    pages_failed: int = 0
    images_unverified: int = 0


class Ledger:
    """Append-only, ordered record of broken references for one run."""

    def __init__(self) -> None:
        self._items: List[BrokenReference] = []

    def append(self, ref: BrokenReference) -> None:
        self._items.append(ref)

    def __iter__(self) -> Iterator[BrokenReference]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def records(self) -> tuple[BrokenReference, ...]:
        return tuple(self._items)
