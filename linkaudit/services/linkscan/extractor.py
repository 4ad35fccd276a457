from __future__ import annotations

from typing import List
from urllib.parse import urldefrag, urljoin

import httpx
from bs4 import BeautifulSoup

from .models import NO_TITLE, FetchError, PageNotFound, PageResult

HTML_TYPES = ("text/html", "application/xhtml+xml")


def _is_html(response: httpx.Response) -> bool:
    ctype = response.headers.get("content-type")
    if not ctype:
        return True
    return ctype.split(";", 1)[0].strip().lower() in HTML_TYPES


def parse_page(html: str, url: str) -> PageResult:
    soup = BeautifulSoup(html, "html.parser")

    title = NO_TITLE
    tag = soup.find("title")
    if tag is not None:
        title = tag.get_text().strip() or NO_TITLE

    links: List[str] = []
    for a in soup.find_all("a"):
        href = a.get("href")
        if not href:
            continue
        link, _ = urldefrag(urljoin(url, href.strip()))
        links.append(link)

    images: List[str] = []
    for img in soup.find_all("img"):
        src = img.get("src")
        if not src or src.strip().lower().startswith("data:"):
            continue
        images.append(urljoin(url, src.strip()))

    return PageResult(url=url, title=title, links=links, images=images)


async def fetch_and_extract(client: httpx.AsyncClient, url: str) -> PageResult:
    """GET ``url`` and pull out its title, links and images.

    Raises PageNotFound on a 404 and FetchError on every other failure,
    including transport errors and bodies that cannot be parsed.
    """
    try:
        r = await client.get(url)
        r.raise_for_status()
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 404:
            raise PageNotFound(url, "404 Not Found") from e
        raise FetchError(url, f"HTTP {e.response.status_code}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(url, f"{type(e).__name__}: {e}") from e

    if not _is_html(r):
        return PageResult(url=url)
    try:
        return parse_page(r.text, url)
    except Exception as e:
        raise FetchError(url, f"unparseable body: {e}") from e
