import logging
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from backend.config import HOST, PORT, LOG_LEVEL, CORS_ORIGINS
from backend.articles import articles_router, get_store
from backend.articles.routes import METHOD_NOT_ALLOWED

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Article Service API",
    description="Create, list and read articles held in memory",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount article routes
app.include_router(articles_router)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_as_text(request: Request, exc: StarletteHTTPException):
    """Answer any unregistered method with a plain-text 405."""
    if exc.status_code == 405:
        return PlainTextResponse(METHOD_NOT_ALLOWED, status_code=405, headers=exc.headers)
    return await http_exception_handler(request, exc)


@app.on_event("startup")
async def startup():
    store = get_store()
    logger.info("Article store ready with %d articles", store.count())


if __name__ == "__main__":
    logger.info("Listening on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)
