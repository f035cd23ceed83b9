"""Error handling middleware for paginated endpoints."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from fastapi_paginator.core.errors import ErrorDocumentBuilder, InvalidConfiguration

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON error documents."""

    error_builder_class: type = ErrorDocumentBuilder

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = self.error_builder_class()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            if not isinstance(exc, InvalidConfiguration):
                logger.exception("Unhandled error for %s", scope.get("path"))
            error = self.error_builder.error_from_exception(exc)
            response = JSONResponse(
                self.error_builder.error_document([error]),
                status_code=int(error["status"]),
            )
            await response(scope, receive, send)
