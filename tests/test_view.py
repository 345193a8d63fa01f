"""Presentation state tests."""

import pytest

from amazon_scraper.errors import FetchError, UpstreamBlocked, UpstreamUnavailable
from amazon_scraper.extraction.models import RATING_UNAVAILABLE, ProductRecord, SearchResult
from amazon_scraper.ui import view
from amazon_scraper.ui.view import ViewMode


class TestTransitions:
    def test_loading_then_results(self, adapter, results_html):
        state = view.loading("smartphone")
        assert state.mode is ViewMode.LOADING

        state = view.show_results(state, adapter.parse("smartphone", results_html))
        assert state.mode is ViewMode.RESULTS
        assert state.total_products == 4
        assert state.error_title is None

    def test_empty_results(self):
        state = view.show_results(view.loading("xyz"), SearchResult(keyword="xyz"))
        assert state.mode is ViewMode.EMPTY

    def test_error_keeps_keyword_for_retry(self):
        state = view.show_error(view.loading("smartphone"), "Erro na Busca", "tente de novo")

        assert state.mode is ViewMode.ERROR
        assert state.keyword == "smartphone"
        assert state.products == ()

    def test_clear(self, adapter, results_html):
        state = view.show_results(view.loading("k"), adapter.parse("k", results_html))
        assert view.clear() == view.idle()
        # The previous state object is untouched.
        assert state.mode is ViewMode.RESULTS


class TestClassifyError:
    @pytest.mark.parametrize("exc,title", [
        (UpstreamBlocked("403"), "Acesso Bloqueado"),
        (UpstreamUnavailable("dns"), "Erro de Conexão"),
        (FetchError("503", status=503), "Serviço Indisponível"),
        (FetchError("500", status=500), "Erro na Busca"),
        (ValueError("keyword cannot be empty"), "Palavra-chave obrigatória"),
    ])
    def test_titles(self, exc, title):
        assert view.classify_error(exc)[0] == title


class TestStars:
    @pytest.mark.parametrize("rating,expected", [
        ("4.5 estrelas", (4, True, 0)),
        ("3 estrelas", (3, False, 2)),
        ("2.3 estrelas", (2, True, 2)),
        ("Novo", (0, False, 5)),
        (RATING_UNAVAILABLE, (0, False, 5)),
    ])
    def test_breakdown(self, rating, expected):
        assert view.star_breakdown(rating) == expected

    def test_render(self):
        assert view.render_stars("4.5 estrelas") == "★★★★⯪"


class TestRender:
    def test_results(self, adapter, results_html):
        state = view.show_results(view.loading("smartphone"), adapter.parse("smartphone", results_html))
        text = view.render(state)

        assert text.startswith('Resultados para "smartphone" (4 produtos encontrados)')
        assert "#1 Smartphone Galaxy A15" in text
        assert "Ver produto: https://www.amazon.com.br/dp/B0001?ref=sr_1_1" in text

    def test_card_collapses_raw_rating_whitespace(self):
        record = ProductRecord(1, "Fone", "\n  Novo \n", " 12  avaliações ", "x.jpg", "")
        lines = view.render_card(record).splitlines()

        assert len(lines) == 4
        assert lines[1] == "   ☆☆☆☆☆ Novo"
        assert lines[2] == "   12 avaliações"

    def test_card_hides_missing_link(self, adapter, results_html):
        record = adapter.parse("k", results_html).products[2]
        assert "Ver produto" not in view.render_card(record)

    def test_single_product_label(self, adapter):
        html = '<div data-asin="1"><h2><a href="/dp/1">único</a></h2></div>'
        state = view.show_results(view.loading("k"), adapter.parse("k", html))
        assert "(1 produto encontrado)" in view.render(state)

    def test_empty_and_error(self):
        assert "Nenhum produto" in view.render(view.show_results(view.loading("z"), SearchResult(keyword="z")))
        assert view.render(view.show_error(view.idle(), "T", "M")) == "T: M"
