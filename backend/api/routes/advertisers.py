"""
Advertisers API routes.
"""
from typing import Optional

from api.routes.resource import SERVICES_PREFIX, CamelModel, build_resource_router
from domain.models import Advertiser
from repositories import AdvertisersRepository

BASE_PATH = f"{SERVICES_PREFIX}/advertisers"
advertisers_repo = AdvertisersRepository()


class AdvertiserPayload(CamelModel):
    name: str
    email: Optional[str] = None


class AdvertiserResponse(AdvertiserPayload):
    id: int


router = build_resource_router(
    BASE_PATH, advertisers_repo, Advertiser, AdvertiserPayload, AdvertiserResponse
)
