from urllib.parse import urlparse


def in_scope(url: str, root_prefix: str) -> bool:
    # Literal string prefix: "/about-us/" is in scope for root "/about".
    return url.startswith(root_prefix)


def is_absolute_http(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
