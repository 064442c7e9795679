"""Inbound handlers."""

from .http import ENHANCE_PATH, build_service, create_app_handler, create_handler

__all__ = ["ENHANCE_PATH", "build_service", "create_app_handler", "create_handler"]
