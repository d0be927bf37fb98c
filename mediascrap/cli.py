"""Command line entry point for downloading the media of a thread."""

from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed

import requests

from .download import download_file
from .formats import FileFormats
from .paths import (
    build_download_location,
    build_path_from_url,
    build_thread_url,
    build_url,
    ensure_dir,
    file_exists,
)
from .scraper import fetch_thread_hrefs
from .validation import validate_args, validate_href

REQUIRED = ("board", "thread", "formats", "location")
DEFAULT_PARALLELISM = 30

log = logging.getLogger("mediascrap")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mediascrap", allow_abbrev=False)
    parser.add_argument(
        "-board", "--board", default=None,
        help="Valid board name from 1500chan.org. Required",
    )
    parser.add_argument(
        "-thread", "--thread", default=None,
        help="Thread number must exist in the selected board. Required",
    )
    parser.add_argument(
        "-formats", "--formats", action="append", default=None,
        help="A list of file formats as a comma separated string. E.g.: jpg,mp4,webm. Required",
    )
    parser.add_argument(
        "-location", "--location", default=None,
        help="The location where the media will be saved. It is created if missing. Required",
    )
    parser.add_argument(
        "-verbose", "--verbose", action="store_true",
        help="Enable detailed logs. Disabled by default",
    )
    parser.add_argument(
        "-m", "--m", type=int, default=DEFAULT_PARALLELISM,
        help="How many files are downloaded at a time. Defaults to 30",
    )
    return parser


def parse_args(args):
    """Parse the options of the media scraping command."""
    namespace = _build_parser().parse_args(args)
    if namespace.formats is not None:
        namespace.formats = FileFormats(*namespace.formats)
    return namespace


def _configure_logging(verbose: bool) -> None:
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(levelname)-5s %(asctime)s %(message)s", "%Y/%m/%d %H:%M:%S")
        )
        log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.INFO)


def _fetch_one(url: str, folder: str, session: requests.Session) -> None:
    path = build_path_from_url(url, folder)
    if file_exists(path):
        log.debug("%s already exists, skipped", path)
        return
    download_file(url, path, session)


def run(args):
    """Download the selected media of a thread; return the download folder."""
    options = parse_args(args)
    provided = {name for name in REQUIRED if getattr(options, name) is not None}
    validate_args(REQUIRED, provided)
    if options.m == 0:
        raise ValueError("-m must not be zero")

    _configure_logging(options.verbose)
    log.debug("running media_scrap")

    thread_url = build_thread_url(options.board, options.thread)
    folder = build_download_location(options.location, options.board, options.thread)
    log.debug("thread url %s", thread_url)
    log.debug("download location %s", folder)
    ensure_dir(folder)

    with requests.Session() as session:
        urls = []
        for href in fetch_thread_hrefs(thread_url, session):
            if validate_href(options.board, href, options.formats):
                url = build_url(href)
                log.debug("selected for download %s", url)
                urls.append(url)

        workers = options.m if options.m > 0 else max(len(urls), 1)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(_fetch_one, url, folder, session) for url in urls]
            try:
                for future in as_completed(futures):
                    future.result()
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

    log.info("finished, files saved to %s", folder)
    return folder


def main(argv=None):
    """Dispatch to a subcommand; exit with a message on failure."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        raise SystemExit("expected at least one argument to be passed (the subcommand)")

    subcommand, rest = argv[0], list(argv[1:])
    if subcommand != "media_scrap":
        raise SystemExit(f"unknown command: {subcommand}")
    try:
        run(rest)
    except Exception as exc:
        raise SystemExit(str(exc)) from exc
    return 0


if __name__ == "__main__":
    sys.exit(main())