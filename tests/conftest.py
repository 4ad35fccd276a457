import sys
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def page():
    """Build a small HTML document from a title, hrefs and image srcs."""

    def _page(title=None, links=(), images=()):
        head = f"<title>{title}</title>" if title is not None else ""
        body = "".join(f'<a href="{h}">x</a>' for h in links)
        body += "".join(f'<img src="{s}">' for s in images)
        return f"<html><head>{head}</head><body>{body}</body></html>"

    return _page
