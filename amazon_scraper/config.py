from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any
from urllib.parse import urlparse
import os
import json

from .version import CONFIG_SCHEMA_VERSION

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass
class ScraperConfig:
    """
    Canonical configuration object passed throughout the system.
    Keep it dataclass-only (no heavy deps) so every layer can import it.
    """
    schema_version: int = CONFIG_SCHEMA_VERSION
    # Storefront origin; search URLs and relative product links hang off it.
    base_url: str = "https://www.amazon.com.br"
    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = "pt-BR,pt;q=0.9,en;q=0.8"
    # Dotted paths so the markup parser and engine can be swapped without code changes.
    parser: str = "amazon_scraper.markup.soup:SoupMarkupParser"
    parser_features: str = "html.parser"
    engine: str = "amazon_scraper.engines.simple_engine:SimpleSearchEngine"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    host: str = "127.0.0.1"
    port: int = 3000

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @property
    def origin(self) -> str:
        return self.base_url.rstrip("/")

    # ---------- Loaders ----------

    @classmethod
    def from_env(cls) -> "ScraperConfig":
        """
        Build config from environment variables (all optional).
        """
        def _get(name: str, default: str) -> str:
            return os.getenv(f"AMAZON_SCRAPER_{name}", default)

        defaults = cls()
        origins = _get("CORS_ORIGINS", ",".join(defaults.cors_origins))
        return cls(
            base_url=_get("BASE_URL", defaults.base_url),
            request_timeout=float(_get("REQUEST_TIMEOUT", str(defaults.request_timeout))),
            user_agent=_get("USER_AGENT", defaults.user_agent),
            accept_language=_get("ACCEPT_LANGUAGE", defaults.accept_language),
            parser=_get("PARSER", defaults.parser),
            parser_features=_get("PARSER_FEATURES", defaults.parser_features),
            engine=_get("ENGINE", defaults.engine),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            host=_get("HOST", defaults.host),
            port=int(_get("PORT", str(defaults.port))),
        )

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "ScraperConfig":
        """
        Load configuration from a JSON file. Older schema versions are migrated first.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        data = migrate_config(data)
        return cls(**data)

    # ---------- Validation ----------

    def validate(self) -> None:
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"base_url must be an absolute http(s) URL, got {self.base_url!r}")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be > 0")
        if not 0 < self.port < 65536:
            raise ValueError("port must be between 1 and 65535")


def migrate_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Migrate config dict to the latest schema version.
    Keep this pure and additive.
    """
    data = dict(raw)
    schema = data.get("schema_version", 1)

    if schema < 2:
        # v1 files carried the storefront as "site" and had no parser selection.
        if "site" in data:
            data["base_url"] = data.pop("site")
        data.setdefault("parser", ScraperConfig.parser)

    data["schema_version"] = CONFIG_SCHEMA_VERSION
    return data
