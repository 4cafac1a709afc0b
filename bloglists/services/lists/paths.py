"""Blog directory membership and public path derivation."""

from bloglists.models.options import BlogListsOptions

INDEX_SUFFIX = "/index"
HTML_EXTENSION = ".html"


def is_in_blog_directory(path: str, options: BlogListsOptions) -> bool:
    """Check whether *path* belongs to the configured blog directory.

    Both ``./blog/post.md`` and ``blog/post.md`` style paths match. This is
    a substring test, not a path-segment test: ``notblog/post.md`` also
    matches a ``./blog`` directory.
    """
    # A substring match also covers the "starts with" case
    return (
        f"{options.blog_directory}/" in path
        or f"{options.bare_directory}/" in path
    )


def get_file_path(path: str, options: BlogListsOptions) -> str:
    """Return the link path for a post document.

    With permalinks the extension is dropped along with a trailing
    ``/index`` (``blog/a/index.md`` -> ``blog/a``). Without permalinks the
    extension becomes ``.html``. Only the first occurrence of the extension
    is replaced.
    """
    extension = options.file_extension
    if options.use_permalinks:
        file_path = path.replace(extension, "", 1) if extension else path
        if file_path.endswith(INDEX_SUFFIX):
            file_path = file_path[: -len(INDEX_SUFFIX)]
        return file_path

    if extension and extension in path:
        return path.replace(extension, HTML_EXTENSION, 1)
    return path
