import pytest
from fastapi.testclient import TestClient

from backend.main import app
from backend.articles.store import ArticleStore, SEED_ARTICLES, get_store


@pytest.fixture
def store():
    return ArticleStore(seed=SEED_ARTICLES)


@pytest.fixture
def empty_store():
    return ArticleStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
