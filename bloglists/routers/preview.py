"""Blog list preview endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from bloglists.config import get_settings
from bloglists.models.options import BlogListsOptions
from bloglists.models.post import BlogCollections
from bloglists.models.preview import PreviewRequest
from bloglists.services.lists import DocumentSourceError
from bloglists.services.metadata import MetadataStore
from bloglists.services.plugin import BuildError, BuildPipeline, blog_lists

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog-lists", tags=["blog-lists"])


def _options_with_defaults(options: dict[str, Any]) -> BlogListsOptions:
    """Apply server-side defaults for the directory and nested object name."""
    settings = get_settings()
    merged = dict(options)
    if not {"blogDirectory", "blog_directory", "blogDirectoryName"} & merged.keys():
        merged["blogDirectory"] = settings.default_blog_directory
    if not {"blogObject", "blog_object"} & merged.keys():
        merged["blogObject"] = settings.default_blog_object
    return BlogListsOptions.model_validate(merged)


@router.post("/preview", response_model=BlogCollections)
async def preview_blog_lists(request: PreviewRequest):
    """Build the four blog lists for the posted documents.

    Request validation already guarantees a mapping of documents, so a
    `DocumentSourceError` only surfaces here if the pipeline is handed a
    source it cannot read; it is still reported as a 400.
    """
    try:
        options = _options_with_defaults(request.options)
    except ValidationError as exc:
        detail = exc.errors(include_url=False, include_context=False)
        raise HTTPException(status_code=422, detail=detail) from exc

    try:
        store = BuildPipeline(MetadataStore()).use(blog_lists(options)).run(
            request.documents
        )
    except BuildError as exc:
        if isinstance(exc.__cause__, DocumentSourceError):
            raise HTTPException(status_code=400, detail=str(exc.__cause__)) from exc
        logger.exception("Preview build failed")
        raise HTTPException(status_code=500, detail="Blog list build failed") from exc

    return BlogCollections.model_validate(store.as_dict())
