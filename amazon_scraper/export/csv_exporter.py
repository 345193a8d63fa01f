from __future__ import annotations

import csv

from .base import open_output
from ..extraction.models import SearchResult


class CSVExporter:
    """
    Writes one row per retained product, tagged with the keyword it was found for.
    """

    _headers = [
        "keyword",
        "id",
        "title",
        "rating",
        "reviews",
        "imageUrl",
        "productUrl",
    ]

    def export(self, result: SearchResult, path: str) -> None:
        with open_output(path, newline="") as f:
            w = csv.writer(f)
            w.writerow(self._headers)
            for product in result.products:
                row = product.to_dict()
                w.writerow([result.keyword] + [row[h] for h in self._headers[1:]])
