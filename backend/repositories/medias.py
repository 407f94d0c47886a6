"""
Media repository backed by SQLAlchemy.
"""
from domain.models import Media
from repositories.base import ResourceRepository
from repositories.models import MediaORM


class MediasRepository(ResourceRepository[Media]):
    """CRUD operations for medias, deduplicated on (name, release_date)."""

    orm_class = MediaORM
    natural_key = ("name", "release_date")

    def to_domain(self, orm: MediaORM) -> Media:
        return Media(
            id=orm.id,
            name=orm.name,
            description=orm.description,
            release_date=orm.release_date,
            supports=list(orm.supports or []),
        )

    def to_columns(self, media: Media) -> dict:
        return {
            "name": media.name,
            "description": media.description,
            "release_date": media.release_date,
            "supports": list(media.supports) if media.supports else None,
        }
