"""Articles module — in-memory article collection and its HTTP routes."""

from backend.articles.routes import router as articles_router
from backend.articles.store import ArticleStore, get_store, reset_store

__all__ = ["articles_router", "ArticleStore", "get_store", "reset_store"]
