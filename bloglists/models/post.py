"""Blog post data models."""

import math
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Year label for posts whose date could not be parsed
UNKNOWN_YEAR = "unknown"

# Loose formats tried after ISO 8601 and RFC 2822
FALLBACK_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def _as_utc(dt: datetime) -> datetime:
    # Naive timestamps are read as UTC so results do not depend on the host timezone
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def parse_post_date(value: Any) -> datetime | None:
    """Turn a frontmatter date value into an aware datetime.

    Returns ``None`` (an invalid timestamp) for missing or unparseable
    values instead of raising. Numbers are epoch milliseconds.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return _as_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
        except ValueError:
            pass
        try:
            return _as_utc(parsedate_to_datetime(text))
        except (TypeError, ValueError, IndexError):
            pass
        for fmt in FALLBACK_DATE_FORMATS:
            try:
                return _as_utc(datetime.strptime(text, fmt))
            except ValueError:
                continue
        return None
    return None


class Post(BaseModel):
    """Normalized view of one blog document.

    Frontmatter-sourced fields keep whatever type the author wrote; only
    ``date`` and ``path`` are normalized.
    """

    model_config = ConfigDict(frozen=True)

    title: Any = None
    excerpt: Any = None
    date: datetime | None = None
    author: Any = None
    path: str
    image: Any = None
    order: Any = None

    @property
    def has_valid_date(self) -> bool:
        return self.date is not None

    @property
    def year(self) -> str:
        """UTC calendar year of the post, or ``"unknown"``."""
        if self.date is None:
            return UNKNOWN_YEAR
        return str(self.date.astimezone(timezone.utc).year)


class YearBucket(BaseModel):
    """Posts published in one calendar year."""

    year: str
    posts: list[Post] = []


class BlogCollections(BaseModel):
    """The four derived post lists."""

    model_config = ConfigDict(populate_by_name=True)

    latest_blog_posts: list[Post] = Field(default_factory=list, alias="latestBlogPosts")
    featured_blog_posts: list[Post] = Field(default_factory=list, alias="featuredBlogPosts")
    all_sorted_blog_posts: list[Post] = Field(
        default_factory=list, alias="allSortedBlogPosts"
    )
    annualized_blog_posts: list[YearBucket] = Field(
        default_factory=list, alias="annualizedBlogPosts"
    )

    def as_metadata(self) -> dict[str, Any]:
        """Return the lists keyed by their metadata names.

        Values are the live lists, so records stay shared between them.
        """
        return {
            "latestBlogPosts": self.latest_blog_posts,
            "featuredBlogPosts": self.featured_blog_posts,
            "allSortedBlogPosts": self.all_sorted_blog_posts,
            "annualizedBlogPosts": self.annualized_blog_posts,
        }
