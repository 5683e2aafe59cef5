"""Error Hierarchy — typed, categorized exceptions for all FontGate failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the REST envelope used by every error response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FontGateError base: one global handler catches all
    - ErrorContext as dataclass: carries font_key/origin for logs without
      coupling to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ACCESS_DENIED = "access_denied"
    RESOURCE_NOT_FOUND = "resource_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    STORE = "store"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    font_key: str | None = None
    origin: str | None = None
    debug_info: dict[str, Any] | None = None


class FontGateError(Exception):
    """Base exception for all FontGate errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "font_key": self.context.font_key,
                    "origin": self.context.origin,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidWhitelistPayloadError(FontGateError):
    """Whitelist update body has no usable `domains` field."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Bad Request: 'domains' must be a list of strings",
            "INVALID_WHITELIST_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class OriginNotAllowedError(FontGateError):
    """Request Origin is absent, malformed, or not whitelisted."""
    def __init__(self, origin: str | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.origin = origin
        super().__init__(
            "Forbidden", "ORIGIN_NOT_ALLOWED", ErrorCategory.ACCESS_DENIED,
            ErrorSeverity.WARNING, ctx, 403,
        )


class FontNotFoundError(FontGateError):
    """Requested font key is absent from the store."""
    def __init__(self, font_key: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.font_key = font_key
        super().__init__(
            "Font not found", "FONT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )


class MethodNotAllowedError(FontGateError):
    """Unsupported HTTP method on a known resource."""
    def __init__(self, method: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Method Not Allowed: {method} {path}",
            "METHOD_NOT_ALLOWED", ErrorCategory.METHOD_NOT_ALLOWED,
            ErrorSeverity.WARNING, context, 405,
        )
        self.method = method


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(FontGateError):
    """Key-value store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
