import sys
from pathlib import Path
import httpx
import pytest
import respx

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

BASE = "http://example.com/"


def html_head():
    return httpx.Response(200, headers={"content-type": "text/html; charset=utf-8"})


@pytest.fixture
def site():
    """A small mocked site: ``/`` links to ``/about`` (twice) and one external page."""
    with respx.mock(assert_all_called=False) as router:
        router.head(BASE).mock(return_value=html_head())
        router.get(BASE, name="home").mock(
            return_value=httpx.Response(
                200,
                html=(
                    '<a href="/about">About</a>'
                    '<a href="/about#x">About again</a>'
                    '<a href="http://external.com">Elsewhere</a>'
                ),
            )
        )
        router.head(f"{BASE}about").mock(return_value=html_head())
        router.get(f"{BASE}about").mock(
            return_value=httpx.Response(200, html="<p>nothing to see</p>")
        )
        router.head("http://external.com/").mock(return_value=html_head())
        router.get("http://external.com/", name="external_get").mock(
            return_value=httpx.Response(200, html='<a href="/deeper">deeper</a>')
        )
        yield router
