"""In-memory article store. All reads and writes go through a single lock."""

import logging
import threading
import time
from typing import Dict, Iterable, List, Optional

from backend import config
from backend.articles.models import Article, ArticleCreate

logger = logging.getLogger(__name__)


SEED_ARTICLES = [
    Article(title="Daddy", subtitle="Big Daddy", id="1", timestamp="Today", content="sfjkhasdjkhfgdsakjfvkjsdbkvh"),
    Article(title="Daddy", subtitle="Big Daddy", id="2", timestamp="Today", content="sfjkhasdjkhfgdsakjfvkjsdbkvh"),
    Article(title="Daddy", subtitle="Big Daddy", id="3", timestamp="Today", content="sfjkhasdjkhfgdsakjfvkjsdbkvh"),
    Article(title="Daddy", subtitle="Big Daddy", id="4", timestamp="Today", content="sfjkhasdjkhfgdsakjfvkjsdbkvh"),
    Article(title="234234", subtitle="234addy", id="5", timestamp="Today23423", content="sdfas"),
]


class ArticleStore:
    """Mapping of ID -> Article plus the counter that hands out IDs.

    IDs are decimal strings. The counter starts one past the largest numeric
    seed ID and only moves forward.
    """

    def __init__(self, seed: Optional[Iterable[Article]] = None):
        self._lock = threading.Lock()
        self._articles: Dict[str, Article] = {}
        self._next_id = 1

        for article in seed or ():
            self._articles[article.id] = article
            if article.id.isdigit():
                self._next_id = max(self._next_id, int(article.id) + 1)

        if self._articles:
            logger.info("Seeded store with %d articles", len(self._articles))

    def list(self) -> List[Article]:
        """Snapshot of every stored article."""
        with self._lock:
            return list(self._articles.values())

    def get(self, article_id: str) -> Optional[Article]:
        """Return the article with this ID, or None."""
        with self._lock:
            return self._articles.get(article_id)

    def create(self, article: ArticleCreate) -> Article:
        """Assign a fresh ID and timestamp, store the article and return it."""
        with self._lock:
            while str(self._next_id) in self._articles:
                self._next_id += 1
            article_id = str(self._next_id)
            self._next_id += 1

            stored = Article(
                title=article.title,
                subtitle=article.subtitle,
                id=article_id,
                content=article.content,
                timestamp=str(time.time_ns()),
            )
            self._articles[article_id] = stored

        logger.info("Created article %s", article_id)
        return stored

    def count(self) -> int:
        with self._lock:
            return len(self._articles)


# Process-wide store, built lazily on first request
_store: Optional[ArticleStore] = None
_store_lock = threading.Lock()


def get_store() -> ArticleStore:
    """Return the process-wide store. Used as a FastAPI dependency."""
    global _store
    with _store_lock:
        if _store is None:
            _store = ArticleStore(seed=SEED_ARTICLES if config.SEED_ARTICLES else None)
        return _store


def reset_store():
    """Drop the process-wide store so the next get_store() builds a fresh one."""
    global _store
    with _store_lock:
        _store = None
