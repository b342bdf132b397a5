"""Example FastAPI app serving one resource in several representations.

Run with:
    uvicorn examples.negotiation_example_app:app --reload
"""
from __future__ import annotations

import csv
import io
import json

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from fastapi_conneg import AcceptNegotiator, ContentNegotiationMiddleware, ErrorHandlerMiddleware
from fastapi_conneg.config import get_settings
from fastapi_conneg.logging_config import configure_logging

AVAILABLE = ["application/json", "text/csv", "text/plain"]

ARTICLES = [
    {"id": 1, "title": "JSON:API paints my bikeshed!", "author": "dgeb"},
    {"id": 2, "title": "Rails is Omakase", "author": "dhh"},
]

settings = get_settings()
configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)

app = FastAPI(title="Content negotiation example")
app.add_middleware(ContentNegotiationMiddleware, available=AVAILABLE)
app.add_middleware(ErrorHandlerMiddleware)

negotiator = AcceptNegotiator(AVAILABLE)


def render(content_type: str, rows: list[dict]) -> Response:
    if content_type == "text/csv":
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=["id", "title", "author"])
        writer.writeheader()
        writer.writerows(rows)
        return Response(buffer.getvalue(), media_type="text/csv")
    if content_type == "text/plain":
        lines = [f"{row['id']}: {row['title']} ({row['author']})" for row in rows]
        return PlainTextResponse("\n".join(lines) + "\n")
    return Response(json.dumps({"data": rows}), media_type="application/json")


@app.get("/articles")
async def list_articles(request: Request) -> Response:
    return render(request.state.content_type, ARTICLES)


@app.get("/articles/{article_id}")
async def retrieve_article(article_id: int, content_type: str = Depends(negotiator)) -> Response:
    rows = [row for row in ARTICLES if row["id"] == article_id]
    return render(content_type, rows)
