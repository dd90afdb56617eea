# in src/tests/conftest.py

import pytest

from hidden_posts import api
from hidden_posts.core import HiddenPostsStore
from hidden_posts.platforms.storage import InMemoryOptionStore


@pytest.fixture
def options():
    """A fresh in-memory option store for each test."""
    store = InMemoryOptionStore()
    yield store
    store.close()


@pytest.fixture
def store(options):
    return HiddenPostsStore(options)


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """
    Point the shared accessors at a temporary directory and make sure the
    process-wide singletons are rebuilt for, and dropped after, the test.
    """
    for name in ("NO_PERSIST", "CLEAR", "LIMIT", "OPTION_KEY"):
        monkeypatch.delenv(f"HIDDEN_POSTS_{name}", raising=False)
    monkeypatch.setenv("HIDDEN_POSTS_STORAGE_DIR", str(tmp_path / "options"))
    api.reset()
    yield tmp_path / "options"
    api.reset()
