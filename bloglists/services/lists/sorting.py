"""Orderings for post lists.

All sorts are stable, so posts that compare equal keep their scan order.
"""

import math
from typing import Any

from bloglists.models.post import UNKNOWN_YEAR, Post, YearBucket


def _date_key(post: Post) -> tuple[int, float]:
    # Invalid dates sort before every valid date
    if post.date is None:
        return (0, 0.0)
    return (1, post.date.timestamp())


def order_value(order: Any) -> float:
    """Numeric value of a featured order, 0 when absent or not a number."""
    if isinstance(order, bool):
        return float(order)
    if not isinstance(order, (int, float, str)):
        return 0.0
    try:
        value = float(order.strip() or 0) if isinstance(order, str) else float(order)
    except (OverflowError, ValueError):
        return 0.0
    return 0.0 if math.isnan(value) else value


def sort_by_date(posts: list[Post]) -> list[Post]:
    """Sort *posts* in place, oldest first, and return them."""
    posts.sort(key=_date_key)
    return posts


def sort_by_order(posts: list[Post]) -> list[Post]:
    """Sort featured *posts* in place by order, lowest first, and return them."""
    posts.sort(key=lambda post: order_value(post.order))
    return posts


def apply_featured_order(posts: list[Post], ascending: bool) -> list[Post]:
    """Return *posts* (sorted lowest order first) in the requested direction."""
    if ascending:
        return posts
    return list(reversed(posts))


def sort_by_year(buckets: list[YearBucket]) -> list[YearBucket]:
    """Sort year buckets in place, newest year first, and return them.

    The bucket for undated posts always goes last.
    """
    buckets.sort(key=lambda bucket: bucket.year, reverse=True)
    buckets.sort(key=lambda bucket: bucket.year == UNKNOWN_YEAR)
    return buckets
