"""FastAPI dependency returning the negotiated content type."""

from typing import Sequence

from fastapi import Request

from fastapi_conneg.config import resolve_available_types
from fastapi_conneg.core.negotiator import negotiate


class AcceptNegotiator:
    """Callable dependency negotiating against a fixed list of content types.

    Example:
        negotiator = AcceptNegotiator(["application/json", "text/plain"])

        @app.get("/items")
        async def items(content_type: str = Depends(negotiator)) -> Response:
            ...
    """

    def __init__(self, available: Sequence[str] | None = None) -> None:
        self.available = resolve_available_types(available)

    def __call__(self, request: Request) -> str:
        return negotiate(request.headers.get("accept", ""), self.available)
