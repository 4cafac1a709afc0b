"""Blog post classification and list building."""

from bloglists.services.lists.aggregator import (
    DocumentSourceError,
    build_blog_lists,
    classify_documents,
)
from bloglists.services.lists.paths import get_file_path, is_in_blog_directory
from bloglists.services.lists.posts import (
    create_annualized_collections,
    create_post,
    extract_unique_years,
    is_featured,
)
from bloglists.services.lists.properties import (
    FieldLocation,
    FieldResolver,
    get_blog_property,
)

__all__ = [
    "DocumentSourceError",
    "FieldLocation",
    "FieldResolver",
    "build_blog_lists",
    "classify_documents",
    "create_annualized_collections",
    "create_post",
    "extract_unique_years",
    "get_blog_property",
    "get_file_path",
    "is_featured",
    "is_in_blog_directory",
]
