"""Shared fixtures for bloglists tests."""

import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset cached settings between tests."""
    yield

    from bloglists.config import get_settings

    get_settings.cache_clear()


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with test defaults."""
    from bloglists.config import Settings, get_settings

    test_settings = Settings(
        debug=False,
        environment="test",
        default_blog_directory="./blog",
        default_blog_object="post",
    )

    get_settings.cache_clear()
    monkeypatch.setattr("bloglists.config.get_settings", lambda: test_settings)

    # Modules that did `from bloglists.config import get_settings` hold their own binding
    monkeypatch.setattr("bloglists.routers.preview.get_settings", lambda: test_settings)

    return test_settings


@pytest.fixture
def blog_files():
    """A small site: five posts over three years plus non-blog pages."""
    return {
        "index.md": {"title": "Home"},
        "about/index.md": {"title": "About"},
        "blog/first.md": {
            "title": "First",
            "date": "2021-03-01",
            "author": "Ann",
        },
        "blog/second.md": {
            "title": "Second",
            "date": "2022-07-15",
            "featuredBlogpost": True,
            "featuredBlogpostOrder": 2,
        },
        "blog/third/index.md": {
            "post": {
                "title": "Third",
                "date": "2022-01-10",
                "excerpt": "Nested frontmatter",
                "featuredBlogpost": True,
                "featuredBlogpostOrder": 1,
            }
        },
        "blog/fourth.md": {
            "blogTitle": "Fourth",
            "date": "2023-11-30",
            "image": "/images/fourth.png",
            "featuredBlogpost": True,
            "featuredBlogpostOrder": 3,
        },
        "blog/fifth.md": {"title": "Fifth", "date": "2023-02-01"},
    }
