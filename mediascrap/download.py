"""Downloading a single media file with retries."""

from __future__ import annotations

import logging
import time

import requests

from .paths import SITE_COOKIES

MAX_RETRIES = 3
TIMEOUT = 120.0
INITIAL_DELAY = 3.0
_CHUNK_SIZE = 64 * 1024

log = logging.getLogger("mediascrap")


class DownloadError(Exception):
    """A file could not be downloaded or saved."""


def _save(response: requests.Response, path: str) -> None:
    try:
        out = open(path, "wb")
    except OSError as exc:
        raise DownloadError(f"error creating file {path}: {exc}") from exc
    with out:
        try:
            for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                out.write(chunk)
        except OSError as exc:
            raise DownloadError(f"error writing to file {path}: {exc}") from exc


def download_file(url, path, session=None, initial_delay=INITIAL_DELAY):
    """Fetch ``url`` into ``path``, retrying failed connections with backoff."""
    get = session.get if session is not None else requests.get
    delay = initial_delay
    attempt = 1
    while True:
        log.debug("attempting to download file. try number %d", attempt)
        try:
            response = get(url, cookies=SITE_COOKIES, stream=True, timeout=TIMEOUT)
        except requests.RequestException as exc:
            if attempt > MAX_RETRIES:
                log.debug("failed to download but retries exceeded")
                raise DownloadError(f"failed to download {url}: {exc}") from exc
            log.debug("failed to download, will retry")
            time.sleep(delay)
            delay *= 2
            attempt += 1
            continue
        with response:
            _save(response, path)
        return