"""
Advert and advertiser repositories backed by SQLAlchemy.
"""
from domain.models import Advert, Advertiser
from repositories.base import ResourceRepository
from repositories.models import AdvertORM, AdvertiserORM


class AdvertsRepository(ResourceRepository[Advert]):
    """CRUD operations for adverts. Titles are unique."""

    orm_class = AdvertORM
    natural_key = ("title",)

    def to_domain(self, orm: AdvertORM) -> Advert:
        return Advert(
            id=orm.id,
            title=orm.title,
            content=orm.content,
            advert_date=orm.advert_date,
            advertiser_id=orm.advertiser_id,
        )

    def to_columns(self, advert: Advert) -> dict:
        return {
            "title": advert.title,
            "content": advert.content,
            "advert_date": advert.advert_date,
            "advertiser_id": advert.advertiser_id,
        }


class AdvertisersRepository(ResourceRepository[Advertiser]):
    """CRUD operations for advertisers. Names are unique."""

    orm_class = AdvertiserORM
    natural_key = ("name",)

    def to_domain(self, orm: AdvertiserORM) -> Advertiser:
        return Advertiser(id=orm.id, name=orm.name, email=orm.email)

    def to_columns(self, advertiser: Advertiser) -> dict:
        return {"name": advertiser.name, "email": advertiser.email}
