from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, List, Optional
import logging

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ScraperConfig
from ..engines.base import SearchEngine
from ..errors import ConfigurationError, UpstreamBlocked, UpstreamUnavailable
from ..utils.loader import load_symbol
from ..version import __version__

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_config() -> ScraperConfig:
    try:
        cfg = ScraperConfig.from_env()
        cfg.validate()
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
    return cfg


def _cors_origins() -> List[str]:
    try:
        return get_config().cors_origins
    except ConfigurationError as exc:
        # Requests will answer 500 until the environment is fixed.
        logger.error("%s", exc)
        return ScraperConfig().cors_origins


app = FastAPI(title="Amazon Scraper API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["GET"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
)


class Product(BaseModel):
    id: int
    title: str
    rating: str
    reviews: str
    imageUrl: str
    productUrl: str


class ScrapeResponse(BaseModel):
    success: bool = True
    keyword: str
    totalProducts: int
    products: List[Product]


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Optional[str] = None


@lru_cache(maxsize=1)
def get_engine() -> SearchEngine:
    """Build the engine once per process; failures are not cached and retried on the next request."""
    config = get_config()
    try:
        engine_cls = load_symbol(config.engine)
        return engine_cls(config)
    except (ImportError, ValueError) as exc:
        raise ConfigurationError(f"Cannot build engine {config.engine!r}: {exc}") from exc


def _error(status: int, error: str, message: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


@app.exception_handler(ConfigurationError)
async def configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("%s", exc)
    return _error(500, "Erro interno do servidor", "O servidor está mal configurado.", details=str(exc))


@app.get(
    "/api/scrape",
    response_model=ScrapeResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse},
               500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def scrape(
    keyword: Optional[str] = Query(default=None),
    engine: SearchEngine = Depends(get_engine),
) -> Any:
    if not keyword or not keyword.strip():
        return _error(400, "Palavra-chave é obrigatória",
                      'Forneça uma palavra-chave válida no parâmetro "keyword"')

    logger.info("Starting search for %r", keyword)
    try:
        result = await engine.search(keyword)
    except UpstreamUnavailable as exc:
        logger.error("Scrape failed: %s", exc)
        return _error(503, "Erro de conexão",
                      "Não foi possível conectar com a Amazon. Verifique sua conexão com a internet.")
    except UpstreamBlocked as exc:
        logger.error("Scrape failed: %s", exc)
        return _error(403, "Acesso bloqueado", "A Amazon bloqueou o acesso. Tente novamente mais tarde.")
    except Exception as exc:
        logger.exception("Scrape failed for %r", keyword)
        return _error(500, "Erro interno do servidor",
                      "Ocorreu um erro inesperado durante o scraping.", details=str(exc))

    return result.to_dict()


@app.get("/api/health")
async def health() -> Dict[str, str]:
    return {
        "status": "OK",
        "message": "Servidor Amazon Scraper funcionando corretamente",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/")
async def root() -> Dict[str, Any]:
    return {
        "name": "Amazon Scraper API",
        "version": __version__,
        "endpoints": {
            "GET /api/scrape?keyword=termo": "Faz scraping de produtos da Amazon",
            "GET /api/health": "Verifica o status do servidor",
        },
        "usage": "Use GET /api/scrape?keyword=sua-palavra-chave para buscar produtos",
    }
