"""Reading the media links out of a thread page."""

from __future__ import annotations

from urllib.parse import urlsplit

import requests
from bs4 import BeautifulSoup

from .paths import DOMAIN, SITE_COOKIES

PAGE_TIMEOUT = 10.0
_LINK_SELECTOR = ".fileinfo > a"


def extract_hrefs(html: str) -> list[str]:
    """Return the href of every link directly inside a ``.fileinfo`` element."""
    soup = BeautifulSoup(html, "html.parser")
    return [link.get("href", "") for link in soup.select(_LINK_SELECTOR)]


def fetch_thread_hrefs(url, session=None):
    """Download a thread page from the site and return its media links."""
    host = urlsplit(url).hostname
    if host != DOMAIN:
        raise ValueError(f"forbidden domain: {host}")
    get = session.get if session is not None else requests.get
    response = get(url, cookies=SITE_COOKIES, timeout=PAGE_TIMEOUT)
    response.raise_for_status()
    return extract_hrefs(response.text)