"""
Presentation state for showing search results as cards.

The state lives here and only here: it is replaced (never mutated) by the
transition functions below, and nothing in the extraction core reads it.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from ..errors import UpstreamBlocked, UpstreamUnavailable
from ..extraction.models import IMAGE_UNAVAILABLE, RATING_UNAVAILABLE, ProductRecord, SearchResult

_NUMBER = re.compile(r"\d+(?:\.\d+)?")

FULL_STAR = "★"
HALF_STAR = "⯪"
EMPTY_STAR = "☆"


class ViewMode(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULTS = "results"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    mode: ViewMode = ViewMode.IDLE
    keyword: str = ""
    products: Tuple[ProductRecord, ...] = field(default_factory=tuple)
    total_products: int = 0
    error_title: Optional[str] = None
    error_message: Optional[str] = None


def idle() -> ViewState:
    return ViewState()


def loading(keyword: str) -> ViewState:
    return ViewState(mode=ViewMode.LOADING, keyword=keyword)


def show_results(state: ViewState, result: SearchResult) -> ViewState:
    mode = ViewMode.RESULTS if result.products else ViewMode.EMPTY
    return replace(
        state,
        mode=mode,
        keyword=result.keyword,
        products=result.products,
        total_products=result.total_products,
        error_title=None,
        error_message=None,
    )


def show_error(state: ViewState, title: str, message: str) -> ViewState:
    # The keyword survives so the search can be retried.
    return replace(state, mode=ViewMode.ERROR, products=(), total_products=0,
                   error_title=title, error_message=message)


def clear() -> ViewState:
    return idle()


def classify_error(exc: BaseException) -> Tuple[str, str]:
    if isinstance(exc, ValueError):
        return "Palavra-chave obrigatória", "Digite uma palavra-chave para buscar produtos."
    if isinstance(exc, UpstreamBlocked):
        return ("Acesso Bloqueado",
                "A Amazon bloqueou temporariamente o acesso. Tente novamente em alguns minutos.")
    if isinstance(exc, UpstreamUnavailable):
        return ("Erro de Conexão",
                "Não foi possível conectar com a Amazon. Verifique sua conexão com a internet.")
    if getattr(exc, "status", None) == 503:
        return "Serviço Indisponível", "O serviço está temporariamente indisponível. Tente novamente mais tarde."
    return "Erro na Busca", "Ocorreu um erro durante a busca. Tente novamente."


def star_breakdown(rating: str) -> Tuple[int, bool, int]:
    """(full, half, empty) stars out of five for a rating such as "4.5 estrelas"."""
    match = _NUMBER.search(rating) if rating != RATING_UNAVAILABLE else None
    if not match:
        return 0, False, 5
    value = min(float(match.group(0)), 5.0)
    full = math.floor(value)
    half = value % 1 != 0
    return full, half, 5 - math.ceil(value)


def render_stars(rating: str) -> str:
    full, half, empty = star_breakdown(rating)
    return FULL_STAR * full + (HALF_STAR if half else "") + EMPTY_STAR * empty


def _one_line(text: str) -> str:
    return " ".join(text.split())


def render_card(product: ProductRecord) -> str:
    lines = [
        f"#{product.sequence_number} {product.title}",
        f"   {render_stars(product.rating)} {_one_line(product.rating)}",
        f"   {_one_line(product.review_count)}",
    ]
    if product.image_url != IMAGE_UNAVAILABLE:
        lines.append(f"   Imagem: {product.image_url}")
    if product.product_url:
        lines.append(f"   Ver produto: {product.product_url}")
    return "\n".join(lines)


def _count_label(total: int) -> str:
    plural = "s" if total != 1 else ""
    return f"{total} produto{plural} encontrado{plural}"


def render(state: ViewState) -> str:
    if state.mode is ViewMode.LOADING:
        return f'Buscando "{state.keyword}"...'
    if state.mode is ViewMode.ERROR:
        return f"{state.error_title}: {state.error_message}"
    if state.mode is ViewMode.EMPTY:
        return f'Nenhum produto encontrado para "{state.keyword}".'
    if state.mode is ViewMode.RESULTS:
        blocks: List[str] = [f'Resultados para "{state.keyword}" ({_count_label(state.total_products)})']
        blocks.extend(render_card(p) for p in state.products)
        return "\n\n".join(blocks)
    return ""
