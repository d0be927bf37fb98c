"""Accepted media file formats given as comma separated lists."""

from __future__ import annotations

from collections.abc import Iterator


class FileFormats:
    """An ordered collection of file extensions with fast membership checks."""

    def __init__(self, *values: str) -> None:
        self._items: list[str] = []
        self._lookup: set[str] = set()
        for value in values:
            self.add(value)

    def add(self, value: str) -> None:
        """Add every non-blank entry of a comma separated list of formats."""
        for part in value.split(","):
            trimmed = part.strip()
            if trimmed:
                self._items.append(trimmed)
                self._lookup.add(trimmed)

    def __contains__(self, fmt: object) -> bool:
        return fmt in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return ",".join(self._items)

    def __repr__(self) -> str:
        return f"FileFormats({str(self)!r})"