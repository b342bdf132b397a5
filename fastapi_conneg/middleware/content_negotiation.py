"""ASGI middleware that negotiates the response content type."""

from typing import Any, Sequence

from starlette.datastructures import Headers, MutableHeaders

from fastapi_conneg.config import get_settings, resolve_available_types
from fastapi_conneg.core.negotiator import negotiate


class ContentNegotiationMiddleware:
    """Store the negotiated content type in the request state."""

    def __init__(
        self,
        app: Any,
        available: Sequence[str] | None = None,
        *,
        state_key: str | None = None,
        vary: bool | None = None,
    ) -> None:
        """Store the ASGI app and the server's preferred content types."""
        settings = get_settings()
        self.app = app
        self.available = resolve_available_types(available)
        self.state_key = state_key or settings.STATE_KEY
        self.vary = settings.VARY_ACCEPT if vary is None else vary

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Negotiate from the Accept header before calling the downstream app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        accept = Headers(scope=scope).get("accept", "")
        scope.setdefault("state", {})[self.state_key] = negotiate(accept, self.available)

        if not self.vary:
            await self.app(scope, receive, send)
            return

        async def send_with_vary(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message).add_vary_header("Accept")
            await send(message)

        await self.app(scope, receive, send_with_vary)
