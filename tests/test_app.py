"""HTTP API tests."""

import pytest
from fastapi.testclient import TestClient

from amazon_scraper.apis.app import app, get_config, get_engine
from amazon_scraper.errors import FetchError, ParseFailure, UpstreamBlocked, UpstreamUnavailable


class FakeEngine:
    def __init__(self, adapter, markup=None, exc=None):
        self.adapter = adapter
        self.markup = markup
        self.exc = exc
        self.calls = []

    async def search(self, keyword):
        self.calls.append(keyword)
        if self.exc is not None:
            raise self.exc
        return self.adapter.parse(keyword, self.markup)

    def parse_markup(self, keyword, markup):
        return self.adapter.parse(keyword, markup)


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use(engine):
    app.dependency_overrides[get_engine] = lambda: engine
    return engine


class TestScrape:
    def test_returns_products(self, client, adapter, results_html):
        engine = _use(FakeEngine(adapter, markup=results_html))

        resp = client.get("/api/scrape", params={"keyword": "smartphone"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["keyword"] == "smartphone"
        assert body["totalProducts"] == 4
        assert body["products"][0]["reviews"] == "2,394 avaliações"
        assert engine.calls == ["smartphone"]

    def test_empty_result(self, client, adapter):
        _use(FakeEngine(adapter, markup="<html></html>"))

        resp = client.get("/api/scrape", params={"keyword": "xyz"})

        assert resp.status_code == 200
        assert resp.json() == {"success": True, "keyword": "xyz", "totalProducts": 0, "products": []}

    @pytest.mark.parametrize("params", [{}, {"keyword": ""}, {"keyword": "   "}])
    def test_keyword_required(self, client, adapter, params):
        engine = _use(FakeEngine(adapter))

        resp = client.get("/api/scrape", params=params)

        assert resp.status_code == 400
        assert resp.json()["error"] == "Palavra-chave é obrigatória"
        assert engine.calls == []

    @pytest.mark.parametrize("exc,status,error", [
        (UpstreamUnavailable("dns"), 503, "Erro de conexão"),
        (UpstreamBlocked("403"), 403, "Acesso bloqueado"),
        (FetchError("500", status=500), 500, "Erro interno do servidor"),
        (ParseFailure("lixo"), 500, "Erro interno do servidor"),
    ])
    def test_fault_mapping(self, client, adapter, exc, status, error):
        _use(FakeEngine(adapter, exc=exc))

        resp = client.get("/api/scrape", params={"keyword": "smartphone"})

        assert resp.status_code == status
        assert resp.json()["error"] == error

    def test_internal_error_carries_details(self, client, adapter):
        _use(FakeEngine(adapter, exc=ParseFailure("markup ilegível")))

        body = client.get("/api/scrape", params={"keyword": "k"}).json()

        assert body["details"] == "markup ilegível"

    def test_cors_header(self, client, adapter, results_html):
        _use(FakeEngine(adapter, markup=results_html))

        resp = client.get("/api/scrape", params={"keyword": "k"}, headers={"Origin": "http://localhost:8080"})

        assert resp.headers["access-control-allow-origin"] == "*"


class TestInfoEndpoints:
    def test_health(self, client):
        body = client.get("/api/health").json()

        assert body["status"] == "OK"
        assert body["timestamp"].endswith("+00:00")

    def test_root(self, client):
        body = client.get("/").json()

        assert body["name"] == "Amazon Scraper API"
        assert "GET /api/health" in body["endpoints"]


@pytest.fixture
def fresh_config():
    get_config.cache_clear()
    get_engine.cache_clear()
    yield
    get_config.cache_clear()
    get_engine.cache_clear()


class TestEngineWiring:
    def test_engine_built_once(self, fresh_config):
        assert get_engine() is get_engine()

    def test_bad_environment_answers_error_body(self, client, fresh_config, monkeypatch):
        monkeypatch.setenv("AMAZON_SCRAPER_PORT", "abc")

        resp = client.get("/api/scrape", params={"keyword": "smartphone"})

        assert resp.status_code == 500
        body = resp.json()
        assert body["error"] == "Erro interno do servidor"
        assert "Invalid configuration" in body["details"]

    def test_unloadable_engine_answers_error_body(self, client, fresh_config, monkeypatch):
        monkeypatch.setenv("AMAZON_SCRAPER_ENGINE", "amazon_scraper.engines.simple_engine:NoSuchEngine")

        resp = client.get("/api/scrape", params={"keyword": "smartphone"})

        assert resp.status_code == 500
        assert "NoSuchEngine" in resp.json()["details"]

    def test_recovers_once_environment_is_fixed(self, client, fresh_config, monkeypatch):
        monkeypatch.setenv("AMAZON_SCRAPER_REQUEST_TIMEOUT", "0")
        assert client.get("/api/scrape", params={"keyword": "k"}).status_code == 500

        monkeypatch.delenv("AMAZON_SCRAPER_REQUEST_TIMEOUT")
        assert client.get("/api/health").status_code == 200
        assert get_config().request_timeout == 30.0
