"""Error handling middleware."""

from typing import Any

from loguru import logger
from starlette.responses import JSONResponse

from fastapi_conneg.core.errors import error_document


class ErrorHandlerMiddleware:
    """Convert unhandled exceptions into error documents."""

    def __init__(self, app: Any, *, debug: bool = False) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.debug = debug

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Log exceptions and answer with a 500 error document."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def tracking_send(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, tracking_send)
        except Exception as exc:
            logger.exception("Unhandled error while serving {}", scope.get("path"))
            if response_started:
                raise
            document = error_document(
                500, "Internal Server Error", str(exc) if self.debug else None
            )
            response = JSONResponse(document, status_code=500)
            await response(scope, receive, send)
