"""Business logic services."""

from .listing import ListingService, build_fallback, build_prompt, extract_json, normalize_listing

__all__ = ["ListingService", "build_fallback", "build_prompt", "extract_json", "normalize_listing"]
