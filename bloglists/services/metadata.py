"""Per-build metadata store and the blog list publisher."""

import logging
from collections.abc import Mapping
from typing import Any

from bloglists.models.post import BlogCollections

logger = logging.getLogger(__name__)

METADATA_KEYS = (
    "latestBlogPosts",
    "featuredBlogPosts",
    "allSortedBlogPosts",
    "annualizedBlogPosts",
)


class MetadataStoreError(Exception):
    """The metadata store cannot be written."""


class MetadataStore:
    """Mutable site metadata shared by the stages of one build.

    Create one per build and pass it to every stage. Stages write entries
    with :meth:`set` or :meth:`update`; later stages only read them.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._entries: dict[str, Any] = dict(initial or {})

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def update(self, entries: Mapping[str, Any]) -> None:
        self._entries.update(entries)

    def as_dict(self) -> dict[str, Any]:
        """Shallow copy of the current entries."""
        return dict(self._entries)


def publish_blog_lists(store: MetadataStore, collections: BlogCollections) -> None:
    """Write the four blog lists into *store*, replacing earlier values.

    Raises:
        MetadataStoreError: If *store* has no ``update`` method.
    """
    update = getattr(store, "update", None)
    if not callable(update):
        raise MetadataStoreError(
            f"Metadata store {type(store).__name__} does not support update()"
        )
    update(collections.as_metadata())
    logger.debug("Published %s", ", ".join(METADATA_KEYS))
