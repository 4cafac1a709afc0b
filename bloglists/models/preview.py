"""Request models for the preview API."""

from typing import Any

from pydantic import BaseModel


class PreviewRequest(BaseModel):
    """Documents to classify plus optional blog list options."""

    documents: dict[str, dict[str, Any]] = {}
    options: dict[str, Any] = {}
