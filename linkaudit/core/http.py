import httpx

BROWSER_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0 Safari/537.36"
)

def browser_headers(user_agent=None):
    return {
        "User-Agent": user_agent or BROWSER_UA,
        "Accept": "text/html,application/xhtml+xml,image/*,*/*;q=0.8",
        "Accept-Language": "en,es;q=0.9",
    }

def async_client(timeout=10.0, verify=True, follow_redirects=True, user_agent=None):
    return httpx.AsyncClient(
        timeout=timeout,
        verify=verify,
        follow_redirects=follow_redirects,
        headers=browser_headers(user_agent),
    )
