from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List

from ..config import ScraperConfig
from ..engines.base import SearchEngine
from ..errors import ScraperError
from ..export.base import Exporter, open_output
from ..utils.logging import setup_logging
from ..utils.loader import load_symbol
from . import view

logger = logging.getLogger(__name__)

_EXPORTERS = {
    "json": "amazon_scraper.export.json_exporter:JSONExporter",
    "csv": "amazon_scraper.export.csv_exporter:CSVExporter",
}


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Amazon search results scraper")
    p.add_argument("keyword", nargs="?", help="Search keyword")
    p.add_argument("--html-file", type=str, default=None,
                   help="Extract from a saved result page instead of fetching one")
    p.add_argument("--format", choices=["text", "json", "csv"], default="text", help="Output format")
    p.add_argument("--output", type=str, default="-", help="Output file path (default: stdout)")
    p.add_argument("--config", type=str, help="Path to config JSON", default=None)
    p.add_argument("--log-level", type=str, default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
    p.add_argument("--serve", action="store_true", help="Run the REST API server instead of a single search")
    p.add_argument("--host", type=str, default=None, help="API host (when --serve)")
    p.add_argument("--port", type=int, default=None, help="API port (when --serve)")
    return p


def _load_config(args: argparse.Namespace) -> ScraperConfig:
    if args.config:
        cfg = ScraperConfig.from_file(args.config)
    else:
        cfg = ScraperConfig.from_env()

    if args.host:
        cfg.host = args.host
    if args.port is not None:
        cfg.port = args.port

    cfg.validate()
    return cfg


def run_server(host: str, port: int) -> None:
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - broken install
        raise SystemExit("To run the API, install dependencies: pip install fastapi uvicorn pydantic") from exc
    uvicorn.run("amazon_scraper.apis.app:app", host=host, port=port)


def _search(engine: SearchEngine, args: argparse.Namespace):
    if args.html_file:
        markup = Path(args.html_file).read_text(encoding="utf-8")
        return engine.parse_markup(args.keyword, markup)
    return asyncio.run(engine.search(args.keyword))


def run_cli(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    cfg = _load_config(args)

    if args.serve:
        run_server(cfg.host, cfg.port)
        return 0

    if not args.keyword or not args.keyword.strip():
        parser.error("a non-empty keyword is required")

    engine_cls = load_symbol(cfg.engine)
    engine: SearchEngine = engine_cls(cfg)

    state = view.loading(args.keyword)
    try:
        result = _search(engine, args)
    except (ScraperError, ValueError, OSError) as exc:
        logger.error("Search for %r failed: %s", args.keyword, exc)
        title, message = view.classify_error(exc)
        state = view.show_error(state, title, message)
        print(view.render(state), file=sys.stderr)
        return 1

    if args.format == "text":
        state = view.show_results(state, result)
        with open_output(args.output) as f:
            f.write(view.render(state) + "\n")
    else:
        exporter: Exporter = load_symbol(_EXPORTERS[args.format])()
        exporter.export(result, args.output)

    logger.info("Found %d products for %r", result.total_products, args.keyword)
    return 0
