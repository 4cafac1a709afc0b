"""Frontmatter field lookup across nested and flat schemas.

A post's fields can live directly on the document (``title: ...``) or in a
nested object named by the ``blogObject`` option (``post: {title: ...}``).
Lookup tries, in order:

1. the nested object, when one is configured and present on the document
2. the field directly on the document
3. the fallback field name directly on the document
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldLocation:
    """One place a field value may live: ``document[container][key]`` or ``document[key]``."""

    key: str
    container: str | None = None

    def lookup(self, document: Mapping[str, Any]) -> tuple[bool, Any]:
        """Return ``(found, value)`` for this location in *document*."""
        source: Any = document
        if self.container is not None:
            source = document.get(self.container)
            # Only a non-empty mapping counts as a nested object
            if not source or not isinstance(source, Mapping):
                return False, None
        if self.key in source:
            return True, source[self.key]
        return False, None


@dataclass(frozen=True)
class FieldResolver:
    """Resolve post fields for one ``blogObject`` setting."""

    blog_object: str = ""

    def candidates(self, name: str, fallback: str | None = None) -> list[FieldLocation]:
        locations = []
        if self.blog_object:
            locations.append(FieldLocation(name, container=self.blog_object))
        locations.append(FieldLocation(name))
        if fallback:
            locations.append(FieldLocation(fallback))
        return locations

    def resolve(
        self, document: Mapping[str, Any], name: str, fallback: str | None = None
    ) -> Any:
        """Return the first value found for *name*, or ``None`` when absent."""
        for location in self.candidates(name, fallback):
            found, value = location.lookup(document)
            if found:
                return value
        return None


def get_blog_property(
    document: Mapping[str, Any],
    name: str,
    fallback: str | None = None,
    blog_object: str = "",
) -> Any:
    return FieldResolver(blog_object).resolve(document, name, fallback)
