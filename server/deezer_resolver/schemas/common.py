"""Shared response models for endpoints that return simple JSON dicts."""

from pydantic import BaseModel

from deezer_resolver.schemas.deezer import LinkType


class ClassifyResponse(BaseModel):
    url: str
    type: LinkType | None = None
