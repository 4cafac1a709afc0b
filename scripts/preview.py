"""Print the blog lists for a file of documents.

The input is a YAML (or JSON) mapping of document path to frontmatter:

    blog/first-post.md:
      title: First post
      date: 2024-01-05
      featuredBlogpost: true

Usage:
    python -m scripts.preview documents.yaml
    python -m scripts.preview documents.yaml --latest 5 --order asc --no-permalinks
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from bloglists.config import get_settings
from bloglists.services.metadata import METADATA_KEYS
from bloglists.services.plugin import BuildError, BuildPipeline, blog_lists

logger = logging.getLogger(__name__)


def load_documents(path: Path) -> dict[str, Any]:
    """Load the document mapping from *path*.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the file is malformed.
        ValueError: If the top level is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of path to metadata")
    return {str(key): value for key, value in data.items()}


def build_options(args: argparse.Namespace) -> dict[str, Any]:
    settings = get_settings()
    blog_object = args.blog_object
    if blog_object is None:
        blog_object = settings.default_blog_object
    options: dict[str, Any] = {
        "blogDirectory": args.directory or settings.default_blog_directory,
        "blogObject": blog_object,
        "usePermalinks": not args.no_permalinks,
    }
    if args.latest is not None:
        options["latestQuantity"] = args.latest
    if args.featured is not None:
        options["featuredQuantity"] = args.featured
    if args.order:
        options["featuredPostOrder"] = args.order
    if args.extension:
        options["fileExtension"] = args.extension
    return options


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Preview blog post lists")
    parser.add_argument("documents", type=Path, help="YAML or JSON document mapping")
    parser.add_argument("--latest", type=int, help="Number of latest posts")
    parser.add_argument("--featured", type=int, help="Number of featured posts")
    parser.add_argument("--order", choices=["asc", "desc"], help="Featured post order")
    parser.add_argument("--directory", help="Blog directory (default ./blog)")
    parser.add_argument("--extension", help="Source file extension (default .md)")
    parser.add_argument(
        "--blog-object", help="Nested frontmatter object name ('' for flat frontmatter)"
    )
    parser.add_argument(
        "--no-permalinks", action="store_true", help="Link to .html files"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose or get_settings().debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        documents = load_documents(args.documents)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Could not load documents: %s", exc)
        return 1

    try:
        plugin = blog_lists(build_options(args))
    except ValidationError as exc:
        logger.error("Invalid options: %s", exc)
        return 1

    try:
        store = BuildPipeline().use(plugin).run(documents)
    except BuildError as exc:
        logger.error("%s", exc)
        return 1

    output = {
        key: [item.model_dump(mode="json") for item in store[key]]
        for key in METADATA_KEYS
    }
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
