"""Tests for the command-line preview script."""

import json

import pytest

from scripts import preview

DOCUMENTS_YAML = """\
blog/first.md:
  title: First
  date: 2022-03-01
blog/second.md:
  title: Second
  date: 2023-04-01
  featuredBlogpost: true
about.md:
  title: About
"""


@pytest.fixture
def script_settings(mock_settings, monkeypatch):
    monkeypatch.setattr("scripts.preview.get_settings", lambda: mock_settings)
    return mock_settings


def test_load_documents_yaml(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text(DOCUMENTS_YAML)

    documents = preview.load_documents(path)

    assert set(documents) == {"blog/first.md", "blog/second.md", "about.md"}
    assert documents["blog/second.md"]["featuredBlogpost"] is True


def test_load_documents_json(tmp_path):
    path = tmp_path / "docs.json"
    path.write_text(json.dumps({"blog/a.md": {"title": "A"}}))
    assert preview.load_documents(path) == {"blog/a.md": {"title": "A"}}


def test_load_documents_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert preview.load_documents(path) == {}


def test_load_documents_rejects_list(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        preview.load_documents(path)


def test_build_options_from_args(script_settings):
    args = preview.parse_args(
        ["docs.yaml", "--latest", "5", "--order", "asc", "--no-permalinks"]
    )
    options = preview.build_options(args)

    assert options == {
        "blogDirectory": "./blog",
        "blogObject": "post",
        "usePermalinks": False,
        "latestQuantity": 5,
        "featuredPostOrder": "asc",
    }


def test_main_prints_lists(tmp_path, capsys, script_settings):
    path = tmp_path / "docs.yaml"
    path.write_text(DOCUMENTS_YAML)

    assert preview.main([str(path), "--latest", "1"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert [p["title"] for p in output["latestBlogPosts"]] == ["Second"]
    assert [p["title"] for p in output["allSortedBlogPosts"]] == ["Second", "First"]
    assert [p["title"] for p in output["featuredBlogPosts"]] == ["Second"]
    assert [b["year"] for b in output["annualizedBlogPosts"]] == ["2023", "2022"]


def test_main_missing_file(tmp_path, script_settings):
    assert preview.main([str(tmp_path / "missing.yaml")]) == 1


def test_main_invalid_quantity(tmp_path, script_settings):
    path = tmp_path / "docs.yaml"
    path.write_text(DOCUMENTS_YAML)
    assert preview.main([str(path), "--latest", "-1"]) == 1
