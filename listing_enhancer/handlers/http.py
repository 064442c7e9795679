"""AWS Lambda handler for the listing API (API Gateway / function URL)."""

import base64
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from ..clients import UnknownProviderError, build_text_model
from ..config import Settings
from ..services import ListingService

logger = logging.getLogger(__name__)

ENHANCE_PATH = "/amazon-product"

# Keys that mark an API Gateway / function URL event (or a test event wrapping a body)
HTTP_EVENT_KEYS = frozenset({
    "body",
    "headers",
    "httpMethod",
    "isBase64Encoded",
    "path",
    "rawPath",
    "requestContext",
    "routeKey",
})

Handler = Callable[[dict[str, Any], Any], dict[str, Any]]


def build_service(settings: Settings) -> ListingService:
    """Wire the listing service from settings."""
    return ListingService(build_text_model(settings))


def _response(status_code: int, payload: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload, ensure_ascii=False, default=str),
    }


def _route(event: dict[str, Any]) -> tuple[str, str]:
    """Return (method, path). Direct invocations without HTTP info hit the enhance route."""
    http = (event.get("requestContext") or {}).get("http") or {}
    method = http.get("method") or event.get("httpMethod") or "POST"
    path = event.get("rawPath") or event.get("path") or ENHANCE_PATH
    if len(path) > 1:
        path = path.rstrip("/")
    return method.upper(), path


def _read_body(event: dict[str, Any]) -> Any:
    """Request payload of an event.

    A direct invocation with no HTTP keys is the product itself. A body that
    is already an object (console test events) is used as-is.
    """
    if not HTTP_EVENT_KEYS.intersection(event):
        return dict(event)

    body = event.get("body")
    if body is None or body == "":
        return {}
    if isinstance(body, Mapping):
        return dict(body)
    if not isinstance(body, (str, bytes, bytearray)):
        return body
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(body)


def create_handler(service: ListingService) -> Handler:
    """Build a Lambda handler bound to a listing service."""

    def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
        """
        Route HTTP events.

        POST /amazon-product
            Body: product data, e.g. {"title": "...", "price": "19.99",
            "features": "...", "bullet_points": [...]}
            Returns the enhanced listing. AI failures still return 200 with
            a listing built from the original data.
        """
        method, path = _route(event)

        if path != ENHANCE_PATH:
            return _response(404, {"error": f"Not found: {path}"})
        if method != "POST":
            return _response(405, {"error": f"Method not allowed: {method}"})

        try:
            body = _read_body(event)
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid request body: {e}")
            return _response(400, {"error": "Request body must be valid JSON"})

        if not isinstance(body, dict):
            return _response(400, {"error": "Request body must be a JSON object"})

        logger.info(f"Enhancing product: {body.get('title') or '(untitled)'}")
        listing = service.enhance(body)
        return _response(200, listing.to_dict())

    return handler


def create_app_handler(settings: Settings) -> Handler:
    """Lambda handler that builds the listing service on the first event.

    A configuration error (unknown LLM provider) answers 500 instead of
    failing the function at init.
    """
    bound: list[Handler] = []

    def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
        if not bound:
            try:
                bound.append(create_handler(build_service(settings)))
            except UnknownProviderError as e:
                logger.error(f"Cannot build listing service: {e}")
                return _response(500, {"error": str(e)})
        return bound[0](event, context)

    return handler
