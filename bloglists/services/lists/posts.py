"""Post construction and year grouping."""

from collections.abc import Iterable, Mapping
from typing import Any

from bloglists.models.options import BlogListsOptions
from bloglists.models.post import Post, YearBucket, parse_post_date

from .properties import FieldResolver

FEATURED_FIELD = "featuredBlogpost"
FEATURED_ORDER_FIELD = "featuredBlogpostOrder"


def create_post(
    document: Mapping[str, Any], file_path: str, options: BlogListsOptions
) -> Post:
    """Build a :class:`Post` from a document's frontmatter."""
    resolver = FieldResolver(options.blog_object)
    title = resolver.resolve(document, "title", "blogTitle") or resolver.resolve(
        document, "blogTitle", "title"
    )
    return Post(
        title=title,
        excerpt=resolver.resolve(document, "excerpt"),
        date=parse_post_date(resolver.resolve(document, "date")),
        author=resolver.resolve(document, "author"),
        path=file_path,
        image=resolver.resolve(document, "image"),
        order=resolver.resolve(document, FEATURED_ORDER_FIELD),
    )


def is_featured(document: Mapping[str, Any], options: BlogListsOptions) -> bool:
    return bool(FieldResolver(options.blog_object).resolve(document, FEATURED_FIELD))


def extract_unique_years(posts: Iterable[Post]) -> list[str]:
    """Distinct year labels in order of first appearance."""
    return list(dict.fromkeys(post.year for post in posts))


def create_annualized_collections(
    posts: list[Post], years: Iterable[str]
) -> list[YearBucket]:
    """Group *posts* into one bucket per year, keeping their relative order."""
    grouped: dict[str, list[Post]] = {year: [] for year in years}
    for post in posts:
        year = post.year
        if year in grouped:
            grouped[year].append(post)
    return [YearBucket(year=year, posts=members) for year, members in grouped.items()]

