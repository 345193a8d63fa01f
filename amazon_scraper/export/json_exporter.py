from __future__ import annotations

import json

from .base import open_output
from ..extraction.models import SearchResult


class JSONExporter:
    def export(self, result: SearchResult, path: str) -> None:
        with open_output(path) as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
            f.write("\n")
