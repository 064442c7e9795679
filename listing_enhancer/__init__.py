"""SEO listing enhancement for Amazon product data."""

__version__ = "0.1.0"
