"""
AWS Lambda handler for the invoice assistant API.

This module handles API Gateway proxy events and routes them to InvoiceAssistant operations.
"""

import base64
import json
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..core.assistant import InvoiceAssistant
from ..core.config import AssistantConfig
from ..core.errors import AssistantError, AuthorizationError, ValidationError
from ..utils.logger import setup_logger

JSON_HEADERS = {"Content-Type": "application/json"}


def _response(status_code: int, body: Any) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body),
    }


def _route(event: Dict[str, Any]):
    """Return (method, path) for REST API (v1) and HTTP API (v2) events."""
    http = (event.get("requestContext") or {}).get("http") or {}
    method = event.get("httpMethod") or http.get("method") or ""
    path = event.get("path") or event.get("rawPath") or http.get("path") or ""
    return method.upper(), path.rstrip("/")


def _json_body(event: Dict[str, Any]) -> Dict[str, Any]:
    raw = event.get("body")
    if not raw:
        return {}
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        body = json.loads(raw)
    except ValueError:
        raise ValidationError("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def _user_id(event: Dict[str, Any]) -> Optional[str]:
    """Resolve the authenticated user from the API Gateway authorizer context."""
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    claims = authorizer.get("claims") or (authorizer.get("jwt") or {}).get("claims") or {}
    return (
        claims.get("sub")
        or authorizer.get("principalId")
        or authorizer.get("userId")
        or (authorizer.get("lambda") or {}).get("userId")
    )


def dispatch(event: Dict[str, Any], assistant: InvoiceAssistant, logger: Optional[Any] = None) -> Dict[str, Any]:
    """
    Route a single API Gateway event to the matching assistant operation.

    Args:
        event: API Gateway proxy event
        assistant: Assistant used to serve the request
        logger: Logger instance for logging output

    Returns:
        API Gateway proxy response
    """
    method, path = _route(event)

    try:
        if method == "POST" and path.endswith("/api/ai/parse-text"):
            body = _json_body(event)
            return _response(200, assistant.parse_invoice_from_text(body.get("text")))

        if method == "POST" and path.endswith("/api/ai/generate-reminder"):
            body = _json_body(event)
            return _response(200, assistant.generate_reminder_email(body.get("invoiceId")))

        if method == "GET" and path.endswith("/api/ai/dashboard-summary"):
            user_id = _user_id(event)
            if not user_id:
                raise AuthorizationError("Not authorized")
            return _response(200, assistant.get_dashboard_summary(user_id))

        return _response(404, {"message": "Not found"})

    except AssistantError as e:
        if logger and e.status_code >= 500:
            logger.error(f"{method} {path} failed: {e.message} {e.details or ''}")
        return _response(e.status_code, e.to_body())
    except Exception as e:
        if logger:
            logger.error(f"Unexpected error handling {method} {path}: {str(e)}", exc_info=True)
        return _response(500, {"message": "Internal server error", "details": str(e)})


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    AWS Lambda handler for the invoice assistant API.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway proxy response
    """
    # Set up logger (file logging disabled for Lambda)
    logger = setup_logger("invoice-assistant", enable_file_logging=False)

    load_dotenv()
    try:
        config = AssistantConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return _response(500, {"message": "Service is not configured", "details": str(e)})

    assistant = InvoiceAssistant(config, logger=logger)
    return dispatch(event, assistant, logger)
