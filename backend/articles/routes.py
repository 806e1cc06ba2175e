"""FastAPI router for article endpoints. Thin layer — delegates to the store.

Methods other than the ones registered here get a plain-text 405 from the
handler installed in backend.main.
"""

import json
import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from backend.articles.models import ArticleCreate
from backend.articles.store import ArticleStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["articles"])

METHOD_NOT_ALLOWED = "method not allowed"


def _json_response(payload) -> Response:
    """Encode payload as JSON. Encoding failures become a 500 with the error text."""
    try:
        body = json.dumps(payload)
    except (TypeError, ValueError) as e:
        logger.exception("Failed to serialize response: %s", e)
        return PlainTextResponse(str(e), status_code=500)
    return Response(content=body, media_type="application/json")


def _not_found() -> Response:
    return Response(status_code=404)


def _decode_body(body: bytes):
    # Decimal keeps huge integers in ignored keys under the int digit limit,
    # and still fails the str check on known fields.
    return json.loads(body, parse_int=Decimal)


@router.get("/articles")
def list_articles(store: ArticleStore = Depends(get_store)):
    """List all stored articles."""
    articles = store.list()
    return _json_response([a.model_dump() for a in articles])


@router.post("/articles")
async def create_article(request: Request, store: ArticleStore = Depends(get_store)):
    """Create an article from a JSON object body and echo the stored record."""
    body = await request.body()

    # JSONDecodeError and UnicodeDecodeError are both ValueErrors
    try:
        payload = _decode_body(body)
    except (ValueError, RecursionError) as e:
        logger.warning("Rejected article body: %s", e)
        return PlainTextResponse(str(e), status_code=400)

    if not isinstance(payload, dict):
        logger.warning("Rejected article body: top-level %s", type(payload).__name__)
        return PlainTextResponse("article must be a JSON object", status_code=400)

    try:
        article = ArticleCreate.model_validate(payload)
    except ValidationError as e:
        logger.warning("Rejected article body: %s", e)
        return PlainTextResponse(str(e), status_code=400)

    created = await run_in_threadpool(store.create, article)
    return _json_response(created.model_dump())


@router.get("/articles/{article_id:path}")
def get_article(article_id: str, store: ArticleStore = Depends(get_store)):
    """Get a single article by ID."""
    # /articles/ and /articles/a/b are not item paths
    if not article_id or "/" in article_id:
        return _not_found()

    article = store.get(article_id)
    if article is None:
        return _not_found()
    return _json_response(article.model_dump())
