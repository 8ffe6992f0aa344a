"""Shared fixtures for techblog tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons between tests."""
    yield

    # 1. Settings LRU cache
    from techblog.config import get_settings

    get_settings.cache_clear()

    # 2. Process-wide blog data loader
    from techblog.services.loader import get_blog_loader

    get_blog_loader.cache_clear()


@pytest.fixture
def write_post(tmp_path):
    """Write a Markdown document under ``tmp_path/posts`` and return its path."""
    content_dir = tmp_path / "posts"
    content_dir.mkdir(exist_ok=True)

    def _write(name: str, front_matter: str, body: str = "Body text.") -> Path:
        path = content_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"---\n{front_matter.strip()}\n---\n\n{body}\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def content_dir(tmp_path, write_post):
    """Content directory with two posts tagged "Go", a month apart."""
    write_post("january.md", "title: January Post\ndate: 2024-01-01\ntags: [Go]")
    write_post(
        "february.md",
        "title: February Post\ndate: 2024-02-01\ntags: [Go, Testing]",
        "# February\n\nThe **second** post.",
    )
    return tmp_path / "posts"


@pytest.fixture
def mock_settings(monkeypatch, tmp_path):
    """Provide a Settings object reading blog data from a temp artifact file."""
    import techblog.main  # noqa: F401 -- bind the real get_settings before patching
    from techblog.config import Settings, get_settings

    test_settings = Settings(
        environment="test",
        data_source="file",
        blog_title="Test Blog",
        posts_per_page=10,
        content_dir=tmp_path / "posts",
        artifact_path=tmp_path / "dist" / "blog-data.json",
        static_dir=Path(__file__).resolve().parent.parent.parent / "static",
    )

    get_settings.cache_clear()
    monkeypatch.setattr("techblog.config.get_settings", lambda: test_settings)

    # Patch get_settings in every module that imports it directly
    for mod_path in [
        "techblog.main",
        "techblog.routers.blog",
        "techblog.services.loader",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    from techblog.services.loader import get_blog_loader

    get_blog_loader.cache_clear()
    return test_settings


@pytest.fixture
def built_artifact(mock_settings, content_dir):
    """Build ``content_dir`` into the artifact path the app is configured to read."""
    from techblog.services.builder import build

    return build(content_dir, mock_settings.artifact_path)
