"""Data models."""

from .listing import EnhancedListing, ProductInput
from .text import clean_text

__all__ = ["EnhancedListing", "ProductInput", "clean_text"]
