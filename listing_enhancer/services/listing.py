"""Listing service - turn raw Amazon product data into SEO listing copy."""

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from string import Template
from typing import Any

from ..clients import TextModel
from ..models import EnhancedListing, ProductInput, clean_text
from ..prompt_loader import load_prompt

logger = logging.getLogger(__name__)

MIN_DESCRIPTION_LENGTH = 50
MAX_KEYWORDS = 10

# Defaults for fields the model left out or left blank
DEFAULT_TITLE = "Product Title Not Available"
DEFAULT_DESCRIPTION = (
    "This product offers quality and value. "
    "Please refer to the features and specifications for more details."
)
DEFAULT_FEATURES = "Features information not available"
DEFAULT_BULLET_POINTS = ("Quality product", "Great value", "Reliable performance")
DEFAULT_KEYWORDS = ("product", "quality", "value")

# Used when the model call or its reply fails entirely
FALLBACK_TITLE = "Product Information"
FALLBACK_DESCRIPTION = "Product details are being processed. Please check back soon."
FALLBACK_FEATURES = "Features information available soon"
FALLBACK_BULLET_POINTS = ("Quality product", "Customer satisfaction guaranteed")
FALLBACK_KEYWORDS = ("product", "amazon", "quality")

CODE_FENCE = re.compile(r"```(?:json)?\n?", re.IGNORECASE)


class ListingParseError(Exception):
    """Model reply does not contain a usable JSON object."""
    def __init__(self, message: str, raw_output: str):
        self.raw_output = raw_output
        super().__init__(message)


@dataclass(frozen=True)
class Parsed:
    """Reply decoded into a JSON object."""
    data: dict[str, Any]


@dataclass(frozen=True)
class Unparseable:
    """Reply could not be decoded."""
    reason: str
    raw_output: str


ExtractionResult = Parsed | Unparseable


def build_prompt(product: ProductInput, template: Template | None = None) -> str:
    """Fill the listing prompt with the product data and its price."""
    if template is None:
        template = load_prompt("listing")
    product_data = json.dumps(product.to_dict(), indent=2, ensure_ascii=False, default=str)
    price = str(product.price) if product.has_price else ""
    return template.substitute(product_data=product_data, price=price)


def parse_json_object(reply: str) -> dict[str, Any]:
    """Pull the outermost JSON object out of a model reply.

    Markdown code fences are stripped, then everything between the first
    '{' and the last '}' is decoded.

    Raises:
        ListingParseError: No object found, invalid JSON, or not an object.
    """
    text = CODE_FENCE.sub("", reply).strip()

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise ListingParseError("Valid JSON object not found in AI response", raw_output=reply)

    try:
        data = json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        raise ListingParseError(f"Failed to parse JSON response: {e}", raw_output=reply) from e

    if not isinstance(data, dict):
        raise ListingParseError("AI response JSON is not an object", raw_output=reply)
    return data


def extract_json(reply: str) -> ExtractionResult:
    """Best-effort decode of a model reply."""
    try:
        return Parsed(parse_json_object(reply))
    except ListingParseError as e:
        return Unparseable(reason=str(e), raw_output=e.raw_output)


def _clean_list(value: Any) -> list[str]:
    """Non-blank trimmed items of a list; anything else gives []."""
    if not isinstance(value, list):
        return []
    return [text for text in (clean_text(item) for item in value) if text]


def _has_value(value: Any) -> bool:
    return value is not None and value != ""


def _synthesize_description(features: str) -> str:
    return (
        f"This product offers excellent quality and value. {features} "
        "Check out the key features and specifications above for complete details."
    )


def normalize_listing(data: Mapping[str, Any], product: ProductInput) -> EnhancedListing:
    """Validate each field of a decoded reply, substituting defaults as needed.

    Price always comes from the original product when it has one.
    """
    title = clean_text(data.get("title")) or DEFAULT_TITLE
    features = clean_text(data.get("features")) or DEFAULT_FEATURES

    description = (
        clean_text(data.get("Description"))
        or clean_text(data.get("description"))
        or DEFAULT_DESCRIPTION
    )
    if len(description) < MIN_DESCRIPTION_LENGTH:
        description = _synthesize_description(features)

    if product.has_price:
        price = product.price
    elif _has_value(data.get("price")):
        price = data["price"]
    else:
        price = ""

    return EnhancedListing(
        title=title,
        description=description,
        features=features,
        bullet_points=_clean_list(data.get("bullet_points")) or list(DEFAULT_BULLET_POINTS),
        price=price,
        keywords=_clean_list(data.get("keywords"))[:MAX_KEYWORDS] or list(DEFAULT_KEYWORDS),
    )


def build_fallback(product: ProductInput) -> EnhancedListing:
    """Build a complete listing from the original data alone. Never raises."""
    features = clean_text(product.features)
    bullet_points = product.clean_bullet_points()

    description = features or ". ".join(bullet_points) or FALLBACK_DESCRIPTION
    features = features or FALLBACK_FEATURES
    if len(description) < MIN_DESCRIPTION_LENGTH:
        description = _synthesize_description(features)

    return EnhancedListing(
        title=clean_text(product.title) or FALLBACK_TITLE,
        description=description,
        features=features,
        bullet_points=bullet_points or list(FALLBACK_BULLET_POINTS),
        price=product.price if product.has_price else "",
        keywords=list(FALLBACK_KEYWORDS),
    )


class ListingService:
    """Enhance product data into an SEO listing using a text model."""

    def __init__(self, model: TextModel):
        self.model = model
        self.prompt = load_prompt("listing")

    def enhance(self, original: ProductInput | Mapping[str, Any]) -> EnhancedListing:
        """
        Produce an enhanced listing for a product.

        Any failure (model error, unparseable reply, anything else) falls
        back to a listing built from the original data, so this never raises.
        """
        if isinstance(original, ProductInput):
            product = original
        else:
            product = ProductInput.from_dict(original)

        try:
            prompt = build_prompt(product, self.prompt)
            reply = self.model.generate(prompt, label="LISTING")
            result = extract_json(reply)
            if isinstance(result, Unparseable):
                logger.warning(f"AI response rejected: {result.reason}")
                logger.debug(f"Raw AI response: {result.raw_output}")
                return self._fallback(product)
            return normalize_listing(result.data, product)
        except Exception as e:
            logger.warning(f"AI enhancement failed: {e}")
            return self._fallback(product)

    def _fallback(self, product: ProductInput) -> EnhancedListing:
        logger.info("Using fallback listing built from original data")
        return build_fallback(product)
