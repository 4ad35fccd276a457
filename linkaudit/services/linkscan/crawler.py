from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from linkaudit.core import http

from .extractor import fetch_and_extract
from .frontier import Frontier
from .models import (
    BrokenReference,
    CrawlState,
    CrawlStats,
    FetchError,
    FrontierEntry,
    Ledger,
    PageNotFound,
    RefKind,
)
from .report import format_reference
from .scope import in_scope
from .verifier import CheckOutcome, broken_images, check_all

logger = logging.getLogger("linkaudit.crawler")


class Crawler:
    """Breadth-first crawl of every page under ``root_url``.

    Pages are fetched one at a time. The images of a page are checked
    concurrently and all of them settle before the next page is dequeued,
    so the frontier, visited set and ledger are only touched from ``run``.
    """

    def __init__(
        self,
        root_url: str,
        *,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
        limit: Optional[int] = None,
    ):
        self.root_url = root_url
        self.timeout = timeout
        self.user_agent = user_agent
        self.limit = limit
        self.frontier = Frontier()
        self.ledger = Ledger()
        self.stats = CrawlStats()
        self.state = CrawlState.IDLE
        self.frontier.seed(root_url)

    def _record(self, ref: BrokenReference) -> None:
        self.ledger.append(ref)
        logger.warning(format_reference(ref))

    async def run(self, client: Optional[httpx.AsyncClient] = None) -> Ledger:
        if self.state is not CrawlState.IDLE:
            raise RuntimeError("a Crawler instance runs once")
        self.state = CrawlState.RUNNING
        logger.info("Starting crawl from %s", self.root_url)
        try:
            if client is not None:
                await self._loop(client)
            else:
                async with http.async_client(
                    timeout=self.timeout, user_agent=self.user_agent
                ) as c:
                    await self._loop(c)
        finally:
            self.state = CrawlState.DONE
        return self.ledger

    async def _loop(self, client: httpx.AsyncClient) -> None:
        while True:
            if self.limit is not None and self.stats.pages_visited >= self.limit:
                logger.info("Page limit %d reached, stopping", self.limit)
                return
            entry = self.frontier.take_next()
            if entry is None:
                return
            if self.frontier.is_visited(entry.url):
                continue
            await self.crawl_page(client, entry)

    async def crawl_page(self, client: httpx.AsyncClient, entry: FrontierEntry) -> None:
        self.frontier.mark_visited(entry.url)
        self.stats.pages_visited += 1
        logger.info("Crawling: %s", entry.url)
        try:
            page = await fetch_and_extract(client, entry.url)
        except PageNotFound:
            self._record(BrokenReference(RefKind.PAGE, entry.url, entry.referrer))
            return
        except FetchError as e:
            self.stats.pages_failed += 1
            logger.error("Error crawling %s: %s", entry.url, e.detail)
            return

        for link in page.links:
            if in_scope(link, self.root_url):
                self.frontier.try_enqueue(link, entry.url)

        if not page.images:
            return
        outcomes = await check_all(client, page.images)
        self.stats.images_checked += len(outcomes)
        self.stats.images_unverified += sum(
            1 for _, o in outcomes if o is CheckOutcome.FAILED
        )
        for ref in broken_images(outcomes, page.url, page.title):
            self._record(ref)


def crawl(
    root_url: str,
    timeout: float = 10.0,
    user_agent: Optional[str] = None,
    limit: Optional[int] = None,
) -> Crawler:
    crawler = Crawler(root_url, timeout=timeout, user_agent=user_agent, limit=limit)
    asyncio.run(crawler.run())
    return crawler
