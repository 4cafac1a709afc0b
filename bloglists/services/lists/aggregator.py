"""Blog list aggregation — classify documents, then derive the four post lists."""

import logging
from collections.abc import Mapping
from typing import Any

from bloglists.models.options import BlogListsOptions
from bloglists.models.post import BlogCollections, Post

from .paths import get_file_path, is_in_blog_directory
from .posts import (
    create_annualized_collections,
    create_post,
    extract_unique_years,
    is_featured,
)
from .sorting import apply_featured_order, sort_by_date, sort_by_order, sort_by_year

logger = logging.getLogger(__name__)


class DocumentSourceError(Exception):
    """The document set could not be read."""


def classify_documents(
    files: Mapping[str, Mapping[str, Any]], options: BlogListsOptions
) -> tuple[list[Post], list[Post]]:
    """Scan *files* once and return ``(all_posts, featured_posts)``.

    Featured posts are the same objects as their entries in ``all_posts``.
    """
    all_posts: list[Post] = []
    featured: list[Post] = []

    for path, document in files.items():
        if not is_in_blog_directory(path, options):
            continue
        if not isinstance(document, Mapping):
            logger.warning(
                "Metadata for %s is %s, not a mapping; treating as empty",
                path,
                type(document).__name__,
            )
            document = {}

        post = create_post(document, get_file_path(path, options), options)
        if not post.has_valid_date:
            logger.debug("Post %s has no valid date", path)
        all_posts.append(post)
        if is_featured(document, options):
            featured.append(post)

    return all_posts, featured


def build_blog_lists(
    files: Mapping[str, Mapping[str, Any]], options: BlogListsOptions
) -> BlogCollections:
    """Build the latest, featured, all-sorted and annualized post lists.

    Args:
        files: Mapping of document path to its frontmatter metadata.
        options: Normalized options.

    Returns:
        The four collections. Every list is empty when no document
        belongs to the blog directory.

    Raises:
        DocumentSourceError: If *files* is not a mapping.
    """
    if not isinstance(files, Mapping):
        raise DocumentSourceError(
            f"Expected a mapping of path to metadata, got {type(files).__name__}"
        )

    # 1. Classify
    all_posts, featured = classify_documents(files, options)
    logger.info(
        "Found %d blog posts (%d featured) in %d documents",
        len(all_posts),
        len(featured),
        len(files),
    )

    # 2. Oldest first
    sort_by_date(all_posts)

    # 3. Featured: by order, then direction, then limit
    sort_by_order(featured)
    logger.debug("Featured post order: %s", options.featured_post_order)
    featured = apply_featured_order(featured, options.featured_ascending)
    featured = featured[: options.featured_quantity]

    # 4. Group by year, newest year first
    annualized = sort_by_year(
        create_annualized_collections(all_posts, extract_unique_years(all_posts))
    )

    # 5. Newest first; the all-sorted list is published in this order too
    all_posts.reverse()
    latest = all_posts[: options.latest_quantity]

    return BlogCollections(
        latest_blog_posts=latest,
        featured_blog_posts=featured,
        all_sorted_blog_posts=all_posts,
        annualized_blog_posts=annualized,
    )
