"""Build-stage wiring for the blog list builder.

A build stage (plugin) is a callable ``(files, store, done)``. It reads the
document mapping, writes into the shared :class:`MetadataStore` and then
calls ``done(None)``, or ``done(exc)`` when it cannot finish. The next
stage starts only after ``done`` has been called.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from bloglists.models.options import BlogListsOptions, normalize_options
from bloglists.services.lists import build_blog_lists
from bloglists.services.metadata import MetadataStore, publish_blog_lists

logger = logging.getLogger(__name__)

Files = Mapping[str, Mapping[str, Any]]
Done = Callable[[BaseException | None], None]
Plugin = Callable[[Files, MetadataStore, Done], None]


class BuildError(Exception):
    """A build stage reported a failure."""


def blog_lists(
    options: BlogListsOptions | Mapping[str, Any] | None = None,
) -> Plugin:
    """Create the blog lists build stage.

    Options are normalized once here, not on every run.
    """
    normalized = normalize_options(options)

    def blog_lists_plugin(files: Files, store: MetadataStore, done: Done) -> None:
        logger.debug("Starting blog lists with options: %s", normalized)
        try:
            collections = build_blog_lists(files, normalized)
            publish_blog_lists(store, collections)
        except Exception as exc:
            logger.exception("Blog lists stage failed")
            done(exc)
            return
        done(None)

    blog_lists_plugin.options = normalized  # type: ignore[attr-defined]
    return blog_lists_plugin


class BuildPipeline:
    """Run build stages in order against one metadata store.

    Usage::

        store = BuildPipeline().use(blog_lists({"latestQuantity": 5})).run(files)
        store["latestBlogPosts"]
    """

    def __init__(self, store: MetadataStore | None = None) -> None:
        self.store = store if store is not None else MetadataStore()
        self._plugins: list[Plugin] = []

    def use(self, plugin: Plugin) -> "BuildPipeline":
        self._plugins.append(plugin)
        return self

    def run(self, files: Files) -> MetadataStore:
        """Run every stage and return the store.

        Raises:
            BuildError: If a stage reports a failure or never signals completion.
        """
        for plugin in self._plugins:
            outcome: list[BaseException | None] = []
            plugin(files, self.store, outcome.append)
            name = getattr(plugin, "__name__", repr(plugin))
            if not outcome:
                raise BuildError(f"Stage {name} did not signal completion")
            if outcome[0] is not None:
                raise BuildError(f"Stage {name} failed: {outcome[0]}") from outcome[0]
            logger.debug("Stage %s finished", name)
        return self.store
