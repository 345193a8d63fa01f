from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Protocol

from ..extraction.models import SearchResult


class Exporter(Protocol):
    def export(self, result: SearchResult, path: str) -> None:
        ...


@contextmanager
def open_output(path: str, newline: str | None = None) -> Iterator[IO[str]]:
    """Open `path` for writing, or yield stdout when path is "-"."""
    if path == "-":
        yield sys.stdout
        return
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline=newline) as f:
        yield f
