"""Listing models - raw product input and the enhanced listing."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .text import clean_text

KNOWN_FIELDS = ("title", "price", "features", "bullet_points")


def _as_list(value: Any) -> list[Any]:
    """Coerce a bullet_points value into a list."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


@dataclass
class ProductInput:
    """Product data as scraped from Amazon. Every field is optional."""

    title: str | None = None
    price: Any = None  # Opaque, passed through untouched
    features: str | None = None
    bullet_points: list[Any] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)  # Other vendor fields
    raw: dict[str, Any] | None = field(default=None, repr=False)  # Caller data as sent

    @classmethod
    def from_dict(cls, data: Any) -> "ProductInput":
        """Build from an untrusted mapping. Never raises."""
        if not isinstance(data, Mapping):
            return cls()

        return cls(
            title=data.get("title"),
            price=data.get("price"),
            features=data.get("features"),
            bullet_points=_as_list(data.get("bullet_points")),
            extra={k: v for k, v in data.items() if k not in KNOWN_FIELDS},
            raw=dict(data),
        )

    @property
    def has_price(self) -> bool:
        return self.price is not None and self.price != ""

    def clean_bullet_points(self) -> list[str]:
        """Bullet points with blank entries dropped."""
        return [text for text in (clean_text(p) for p in _as_list(self.bullet_points)) if text]

    def to_dict(self) -> dict[str, Any]:
        """Serializable view for the prompt.

        Data built by from_dict is returned exactly as the caller sent it.
        Otherwise unset fields are omitted and extras follow verbatim.
        """
        if self.raw is not None:
            return dict(self.raw)

        data: dict[str, Any] = {}
        if self.title is not None:
            data["title"] = self.title
        if self.price is not None:
            data["price"] = self.price
        if self.features is not None:
            data["features"] = self.features
        if self.bullet_points:
            data["bullet_points"] = self.bullet_points
        data.update(self.extra)
        return data


@dataclass(frozen=True)
class EnhancedListing:
    """SEO-optimized listing. All text fields are non-empty."""

    title: str
    description: str
    features: str
    bullet_points: list[str]
    price: Any
    keywords: list[str]

    def to_dict(self) -> dict[str, Any]:
        """Wire format returned to API callers."""
        return {
            "title": self.title,
            "Description": self.description,
            "features": self.features,
            "bullet_points": list(self.bullet_points),
            "price": self.price,
            "keywords": list(self.keywords),
        }
