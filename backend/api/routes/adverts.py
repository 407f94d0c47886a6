"""
Adverts API routes.
"""
from datetime import date
from typing import Optional

from api.routes.resource import SERVICES_PREFIX, CamelModel, build_resource_router
from domain.models import Advert
from repositories import AdvertsRepository

BASE_PATH = f"{SERVICES_PREFIX}/adverts"
adverts_repo = AdvertsRepository()


class AdvertPayload(CamelModel):
    title: str
    content: Optional[str] = None
    advert_date: Optional[date] = None
    advertiser_id: Optional[int] = None


class AdvertResponse(AdvertPayload):
    id: int


router = build_resource_router(BASE_PATH, adverts_repo, Advert, AdvertPayload, AdvertResponse)
