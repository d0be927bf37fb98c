"""Checks on scraped links and on command line arguments."""

from __future__ import annotations

from collections.abc import Collection, Container, Iterable


class MissingArgumentError(ValueError):
    """A required command line argument was not given."""

    def __init__(self, name: str) -> None:
        super().__init__(f"missing required -{name} argument")
        self.name = name


def _ext(path: str) -> str:
    name = path.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def validate_href(board: str, href: str, accepted_formats: Container[str]) -> bool:
    """Tell whether ``href`` points into ``board`` and has an accepted extension."""
    if not href.startswith(f"/{board}"):
        return False
    fmt = _ext(href).removeprefix(".")
    return fmt in accepted_formats


def validate_args(required: Iterable[str], provided: Collection[str]) -> None:
    """Raise MissingArgumentError for the first required name not provided."""
    for name in required:
        if name not in provided:
            raise MissingArgumentError(name)