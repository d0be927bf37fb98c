# mediascrap

A command-line tool that downloads the media files attached to a thread on
1500chan.org. You pick the board, the thread and the file formats you want.
Files are saved under `<location>/<board>/<thread>/`, and files that are already
there are skipped.

## Installation

```
pip install .
```

## Usage

The command takes a subcommand, `media_scrap`, followed by its options:

```
mediascrap media_scrap -board b -thread 111 -formats jpg,mp4,webm -location ./archive
```

Every option can be written with one dash or two (`-board` or `--board`).

| Option      | Required | Description                                                                 |
|-------------|----------|-----------------------------------------------------------------------------|
| `-board`    | yes      | Name of the board the thread belongs to.                                    |
| `-thread`   | yes      | Thread number; it must exist on the chosen board.                           |
| `-formats`  | yes      | Comma separated list of file extensions, e.g. `jpg,mp4,webm`. May be repeated. |
| `-location` | yes      | Directory to save into. It is created if it does not exist.                 |
| `-verbose`  | no       | Print detailed progress logs.                                               |
| `-m`        | no       | How many files are downloaded at the same time. Defaults to 30. A negative value downloads all files at once; zero is rejected. |

How it works:

- The thread page `https://1500chan.org/<board>/res/<thread>.html` is fetched
  (with the site cookie `mc=1`). An HTTP error status stops the run.
- Every link directly inside a `.fileinfo` element is collected. A link is kept
  when it starts with `/<board>` and its extension is one of the chosen formats.
- Each kept file is saved under its own name in the download folder, unless a
  file of that name is already there.
- A download whose connection fails is retried up to three more times, waiting
  3, 6 and then 12 seconds before the retries. The server is given up to two
  minutes to respond. The response body is written as received.
- When every file has been handled, the tool logs
  `finished, files saved to <folder>`.

Logs go to standard output. If a required option is missing, the command stops
with `missing required -<name> argument`; any other failure also stops it with
its message and a non-zero exit status.

## Using it from Python

```python
from mediascrap.cli import run

folder = run(["-board", "b", "-thread", "111", "-formats", "jpg,mp4", "-location", "./archive"])
```

`run` returns the folder the files were saved into and raises on failure.

The building blocks are available on their own as well:

- `mediascrap.formats.FileFormats` holds the accepted file extensions; it
  supports `in`, iteration, `len()` and `str()`.
- `mediascrap.validation.validate_href` decides whether a link points to an
  accepted file on the chosen board; `validate_args` raises
  `MissingArgumentError` for a missing required option.
- `mediascrap.scraper.extract_hrefs` lists the file links found in a thread
  page; `fetch_thread_hrefs` downloads a page from 1500chan.org and does the same.
- `mediascrap.download.download_file` fetches one file to disk with retries and
  raises `DownloadError` when it cannot.
- `mediascrap.paths` builds thread URLs, file URLs and download paths.

## What it does not do

It handles one thread per run, only on 1500chan.org. It does not follow links to
other threads or pages, and it does not check the size or type of what the
server sends back.

## Running the tests

```
pip install ".[test]"
pytest
```