from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

# Placeholders shown when a field cannot be read from a listing.
TITLE_UNAVAILABLE = "Título não disponível"
RATING_UNAVAILABLE = "Avaliação não disponível"
REVIEWS_UNAVAILABLE = "Avaliações não disponíveis"
IMAGE_UNAVAILABLE = "Imagem não disponível"


@dataclass(frozen=True)
class ExtractedFields:
    """Raw per-container output of the field extractor, before filtering."""

    title: str = TITLE_UNAVAILABLE
    rating: str = RATING_UNAVAILABLE
    review_count: str = REVIEWS_UNAVAILABLE
    image_url: str = IMAGE_UNAVAILABLE
    product_url: str = ""

    @property
    def has_title(self) -> bool:
        return bool(self.title) and self.title != TITLE_UNAVAILABLE


@dataclass(frozen=True)
class ProductRecord:
    """One retained search listing."""

    sequence_number: int
    title: str
    rating: str
    review_count: str
    image_url: str
    product_url: str

    @classmethod
    def from_fields(cls, sequence_number: int, fields: ExtractedFields) -> "ProductRecord":
        return cls(
            sequence_number=sequence_number,
            title=fields.title,
            rating=fields.rating,
            review_count=fields.review_count,
            image_url=fields.image_url,
            product_url=fields.product_url,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.sequence_number,
            "title": self.title,
            "rating": self.rating,
            "reviews": self.review_count,
            "imageUrl": self.image_url,
            "productUrl": self.product_url,
        }


@dataclass(frozen=True)
class SearchResult:
    """Response envelope for one keyword search."""

    keyword: str
    products: Tuple[ProductRecord, ...] = field(default_factory=tuple)

    @property
    def total_products(self) -> int:
        return len(self.products)

    def to_dict(self) -> Dict[str, Any]:
        products: List[Dict[str, Any]] = [p.to_dict() for p in self.products]
        return {
            "success": True,
            "keyword": self.keyword,
            "totalProducts": self.total_products,
            "products": products,
        }
