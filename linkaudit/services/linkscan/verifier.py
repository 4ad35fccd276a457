from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import List, Sequence, Tuple

import httpx

from .models import BrokenReference, RefKind

logger = logging.getLogger("linkaudit.verifier")


class CheckOutcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"


async def check_exists(client: httpx.AsyncClient, image_url: str) -> CheckOutcome:
    try:
        r = await client.head(image_url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("HEAD %s failed: %s", image_url, e)
        return CheckOutcome.FAILED
    if r.status_code == 404:
        return CheckOutcome.NOT_FOUND
    if r.is_success:
        return CheckOutcome.OK
    logger.debug("HEAD %s -> %s", image_url, r.status_code)
    return CheckOutcome.FAILED


async def check_all(
    client: httpx.AsyncClient, image_urls: Sequence[str]
) -> List[Tuple[str, CheckOutcome]]:
    """Check every URL concurrently and wait for all of them to settle."""
    results = await asyncio.gather(
        *(check_exists(client, u) for u in image_urls), return_exceptions=True
    )
    outcomes = []
    for url, res in zip(image_urls, results):
        if isinstance(res, BaseException):
            if not isinstance(res, Exception):
                raise res
            logger.error("Image check for %s crashed: %r", url, res)
            res = CheckOutcome.FAILED
        outcomes.append((url, res))
    return outcomes


def broken_images(
    outcomes: Sequence[Tuple[str, CheckOutcome]], owner_url: str, owner_title: str
) -> List[BrokenReference]:
    return [
        BrokenReference(RefKind.IMAGE, url, owner_url, owner_title)
        for url, outcome in outcomes
        if outcome is CheckOutcome.NOT_FOUND
    ]
