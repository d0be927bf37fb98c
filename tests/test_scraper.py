import pytest
import requests
import responses

from mediascrap.scraper import extract_hrefs, fetch_thread_hrefs

PAGE = """
<html><body>
<div class="fileinfo"><a href="/b/src/1.mp4">1.mp4</a></div>
<div class="fileinfo"><span><a href="/b/src/2.jpg">nested</a></span></div>
<div class="other"><a href="/b/src/3.webm">other</a></div>
<div class="fileinfo"><a>no link</a></div>
</body></html>
"""

THREAD_URL = "https://1500chan.org/b/res/111.html"


def test_extract_hrefs_selects_direct_children():
    assert extract_hrefs(PAGE) == ["/b/src/1.mp4", ""]


def test_extract_hrefs_empty_page():
    assert extract_hrefs("<html></html>") == []


def test_fetch_thread_hrefs():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, THREAD_URL, body=PAGE, content_type="text/html")
        hrefs = fetch_thread_hrefs(THREAD_URL)
        assert rsps.calls[0].request.headers["Cookie"] == "mc=1"
    assert hrefs == ["/b/src/1.mp4", ""]


def test_fetch_thread_hrefs_forbidden_domain():
    with pytest.raises(ValueError, match="forbidden domain"):
        fetch_thread_hrefs("https://example.com/b/res/1.html")


def test_fetch_thread_hrefs_http_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, THREAD_URL, status=404)
        with pytest.raises(requests.HTTPError):
            fetch_thread_hrefs(THREAD_URL)