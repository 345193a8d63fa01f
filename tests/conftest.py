from pathlib import Path

import pytest

from amazon_scraper.adapters.amazon import AmazonSearchAdapter
from amazon_scraper.markup.soup import SoupMarkupParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ORIGIN = "https://www.amazon.com.br"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def parser():
    return SoupMarkupParser()


@pytest.fixture
def adapter():
    return AmazonSearchAdapter(ORIGIN)


@pytest.fixture
def results_html():
    return load_fixture("search_results.html")


@pytest.fixture
def fallback_html():
    return load_fixture("search_fallback.html")
