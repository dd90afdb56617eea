from pathlib import Path

import pytest

from hidden_posts.config import DEFAULT_LIMIT, DEFAULT_OPTION_KEY, Settings


def test_from_env_defaults(monkeypatch):
    for name in ("OPTION_KEY", "LIMIT", "NO_PERSIST", "CLEAR"):
        monkeypatch.delenv(f"HIDDEN_POSTS_{name}", raising=False)
    settings = Settings.from_env()
    assert settings.option_key == DEFAULT_OPTION_KEY
    assert settings.limit == DEFAULT_LIMIT == 100
    assert settings.no_persist is False
    assert settings.clear_on_start is False


def test_from_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("HIDDEN_POSTS_OPTION_KEY", "front-hidden")
    monkeypatch.setenv("HIDDEN_POSTS_LIMIT", "25")
    monkeypatch.setenv("HIDDEN_POSTS_STORAGE_DIR", str(tmp_path))
    monkeypatch.setenv("HIDDEN_POSTS_NO_PERSIST", "no")
    settings = Settings.from_env()
    assert settings.option_key == "front-hidden"
    assert settings.limit == 25
    assert settings.storage_dir == Path(tmp_path)
    assert settings.no_persist is False


def test_custom_prefix(monkeypatch):
    monkeypatch.setenv("BLOG_LIMIT", "7")
    assert Settings.from_env(prefix="BLOG").limit == 7


@pytest.mark.parametrize("limit", ["0", "-5"])
def test_rejects_non_positive_limit(monkeypatch, limit):
    monkeypatch.setenv("HIDDEN_POSTS_LIMIT", limit)
    with pytest.raises(ValueError):
        Settings.from_env()


def test_rejects_empty_key():
    with pytest.raises(ValueError):
        Settings(option_key="")
