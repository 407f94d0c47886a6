"""
Medias API routes.
"""
from datetime import date
from typing import List, Optional
from pydantic import Field

from api.routes.resource import SERVICES_PREFIX, CamelModel, build_resource_router
from domain.models import Media
from repositories import MediasRepository

BASE_PATH = f"{SERVICES_PREFIX}/medias"
medias_repo = MediasRepository()


class MediaPayload(CamelModel):
    name: str
    description: Optional[str] = None
    release_date: Optional[date] = None
    supports: List[str] = Field(default_factory=list)


class MediaResponse(MediaPayload):
    id: int


router = build_resource_router(BASE_PATH, medias_repo, Media, MediaPayload, MediaResponse)
