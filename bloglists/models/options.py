"""Blog list options and their normalization."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Legacy option name -> (current option name, field name)
LEGACY_ALIASES = {
    "blogDirectoryName": ("blogDirectory", "blog_directory"),
    "featuredPostSortOrder": ("featuredPostOrder", "featured_post_order"),
}

RELATIVE_ROOT = "./"


def normalize_directory(path: str) -> str:
    """Return *path* in ``./dir`` form with no trailing separator.

    Applying this to an already normalized path returns it unchanged.
    """
    bare = path[len(RELATIVE_ROOT):] if path.startswith(RELATIVE_ROOT) else path
    return f"{RELATIVE_ROOT}{bare.rstrip('/')}"


class BlogListsOptions(BaseModel):
    """Options controlling which documents are posts and how lists are built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    latest_quantity: int = Field(default=3, ge=0, alias="latestQuantity")
    featured_quantity: int = Field(default=3, ge=0, alias="featuredQuantity")
    featured_post_order: str = Field(default="desc", alias="featuredPostOrder")
    file_extension: str = Field(default=".md", alias="fileExtension")
    blog_directory: str = Field(default="./blog", alias="blogDirectory")
    blog_object: str = Field(default="post", alias="blogObject")
    use_permalinks: bool = Field(default=True, alias="usePermalinks")

    @model_validator(mode="before")
    @classmethod
    def _migrate_legacy_names(cls, data: Any) -> Any:
        """Map legacy option names onto the current ones."""
        if isinstance(data, dict):
            data = dict(data)
            for legacy, (alias, field_name) in LEGACY_ALIASES.items():
                if legacy not in data:
                    continue
                value = data.pop(legacy)
                # The current name wins when both are given
                if alias not in data and field_name not in data:
                    data[alias] = value
        return data

    @field_validator("blog_object", mode="before")
    @classmethod
    def _unset_blog_object(cls, value: Any) -> Any:
        # None or False selects flat frontmatter, same as an empty name
        if value is None or value is False:
            return ""
        return value

    @field_validator("blog_directory")
    @classmethod
    def _canonical_directory(cls, value: str) -> str:
        return normalize_directory(value)

    @property
    def bare_directory(self) -> str:
        """The blog directory without its ``./`` prefix."""
        return self.blog_directory[len(RELATIVE_ROOT):]

    @property
    def featured_ascending(self) -> bool:
        # Anything other than "asc" means descending
        return self.featured_post_order == "asc"


def normalize_options(
    options: "BlogListsOptions | Mapping[str, Any] | None" = None,
) -> BlogListsOptions:
    """Merge user options with the defaults.

    Accepts ``None``, a mapping of camelCase or snake_case option names, or
    an existing :class:`BlogListsOptions` (returned as-is, it is already
    normalized).
    """
    if options is None:
        return BlogListsOptions()
    if isinstance(options, BlogListsOptions):
        return options
    return BlogListsOptions.model_validate(dict(options))
