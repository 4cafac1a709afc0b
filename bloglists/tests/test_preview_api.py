"""Tests for the preview API endpoints."""

from httpx import ASGITransport, AsyncClient

DOCUMENTS = {
    "blog/a.md": {"title": "A", "date": "2023-01-01", "featuredBlogpost": True},
    "blog/b.md": {"title": "B", "date": "2023-06-01"},
    "blog/c/index.md": {"post": {"title": "C", "date": "2021-02-02"}},
    "about.md": {"title": "About"},
}


async def _post(payload, headers=None):
    from bloglists.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        return await client.post(
            "/api/bloglists/blog-lists/preview", json=payload, headers=headers
        )


async def test_preview_returns_four_lists(mock_settings):
    response = await _post({"documents": DOCUMENTS})

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {
        "latestBlogPosts",
        "featuredBlogPosts",
        "allSortedBlogPosts",
        "annualizedBlogPosts",
    }
    assert [p["title"] for p in data["allSortedBlogPosts"]] == ["B", "A", "C"]
    assert [p["path"] for p in data["allSortedBlogPosts"]] == [
        "blog/b",
        "blog/a",
        "blog/c",
    ]
    assert [p["title"] for p in data["featuredBlogPosts"]] == ["A"]
    assert [b["year"] for b in data["annualizedBlogPosts"]] == ["2023", "2021"]
    assert data["allSortedBlogPosts"][0]["date"].startswith("2023-06-01T00:00:00")


async def test_preview_respects_options(mock_settings):
    response = await _post(
        {
            "documents": DOCUMENTS,
            "options": {"latestQuantity": 1, "usePermalinks": False},
        }
    )

    assert response.status_code == 200
    latest = response.json()["latestBlogPosts"]
    assert len(latest) == 1
    assert latest[0]["path"] == "blog/b.html"


async def test_preview_uses_settings_defaults(mock_settings):
    mock_settings.default_blog_directory = "./articles"

    response = await _post({"documents": {"articles/x.md": {"title": "X"}}})

    assert response.status_code == 200
    assert [p["title"] for p in response.json()["allSortedBlogPosts"]] == ["X"]


async def test_preview_empty_documents(mock_settings):
    response = await _post({})

    assert response.status_code == 200
    data = response.json()
    assert data["latestBlogPosts"] == []
    assert data["annualizedBlogPosts"] == []


async def test_preview_rejects_invalid_options(mock_settings):
    response = await _post({"documents": {}, "options": {"latestQuantity": -2}})
    assert response.status_code == 422


async def test_request_id_is_echoed(mock_settings):
    response = await _post({}, headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


async def test_request_id_generated_when_missing(mock_settings):
    response = await _post({})
    assert response.headers["X-Request-ID"]


async def test_health(mock_settings):
    from bloglists.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.get("/api/bloglists/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_preview_build_failure_returns_500(mock_settings, mocker):
    from bloglists.services.plugin import BuildError

    failure = BuildError("Stage blog_lists_plugin failed")
    failure.__cause__ = RuntimeError("store unavailable")
    mocker.patch(
        "bloglists.routers.preview.BuildPipeline.run", side_effect=failure
    )

    response = await _post({"documents": DOCUMENTS})

    assert response.status_code == 500
    assert response.json()["detail"] == "Blog list build failed"


async def test_preview_source_failure_returns_400(mock_settings, mocker):
    from bloglists.services.lists import DocumentSourceError
    from bloglists.services.plugin import BuildError

    failure = BuildError("Stage blog_lists_plugin failed")
    failure.__cause__ = DocumentSourceError("documents unavailable")
    mocker.patch(
        "bloglists.routers.preview.BuildPipeline.run", side_effect=failure
    )

    response = await _post({"documents": DOCUMENTS})

    assert response.status_code == 400
    assert response.json()["detail"] == "documents unavailable"
