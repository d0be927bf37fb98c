"""Site constants, URL and path building, and file system helpers."""

from __future__ import annotations

import os
import posixpath

DOMAIN = "1500chan.org"
SCHEME = "https://"
BASE_URL = f"{SCHEME}{DOMAIN}"
SITE_COOKIES = {"mc": "1"}


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _join(*elems: str) -> str:
    parts = [elem for elem in elems if elem]
    if not parts:
        return ""
    return _clean("/".join(parts))


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _join_url(*elems: str) -> str:
    path = _clean("/" + "/".join(elems))[1:]
    if elems and elems[-1].endswith("/") and not path.endswith("/"):
        path += "/"
    if path and not path.startswith("/"):
        path = "/" + path
    return BASE_URL + path


def build_path_from_url(url: str, folder: str) -> str:
    """Return the path inside ``folder`` named after the last element of ``url``."""
    return _join(folder, _base(url))


def build_thread_url(board: str, thread: str) -> str:
    """Return the URL of a thread page on a board."""
    return _join_url(board, "res", f"{thread}.html")


def build_download_location(location: str, board: str, thread: str) -> str:
    """Return the folder where the media of a thread is stored."""
    return _join(location, board, thread)


def build_url(relative_path: str) -> str:
    """Return the absolute site URL for a path relative to the site root."""
    return _join_url(relative_path)


def file_exists(path: str) -> bool:
    """Tell whether ``path`` exists; raise OSError when that cannot be told."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise OSError(f"error checking file {path}") from exc
    return True


def ensure_dir(path: str) -> None:
    """Create ``path`` and its parents if they are missing."""
    try:
        os.makedirs(path, mode=0o755, exist_ok=True)
    except OSError as exc:
        raise OSError(f"failed to create directory: {exc}") from exc