"""
Generic repository shared by every MediaLibs resource.

Subclasses declare the ORM class and how to convert between ORM rows and
domain records; they also decide which column(s) act as the natural key used
for duplicate detection on create.
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

E = TypeVar("E")


class DuplicateEntityError(Exception):
    """Raised when a write collides with a uniqueness constraint."""


class ResourceRepository(Generic[E]):
    """CRUD operations keyed by integer id, plus one natural-key lookup."""

    orm_class: Type[Any]
    natural_key: tuple = ()

    def to_domain(self, orm: Any) -> E:
        raise NotImplementedError

    def to_columns(self, entity: E) -> Dict[str, Any]:
        """Column values for `entity`, excluding the id."""
        raise NotImplementedError

    def list(self, session: Session) -> List[E]:
        rows = session.query(self.orm_class).order_by(self.orm_class.id).all()
        return [self.to_domain(r) for r in rows]

    def get(self, session: Session, entity_id: int) -> Optional[E]:
        orm = session.get(self.orm_class, entity_id)
        return self.to_domain(orm) if orm else None

    def get_by_natural_key(self, session: Session, entity: E) -> Optional[E]:
        if not self.natural_key:
            return None
        columns = self.to_columns(entity)
        query = session.query(self.orm_class)
        for name in self.natural_key:
            column = getattr(self.orm_class, name)
            value = columns[name]
            query = query.filter(column.is_(None) if value is None else column == value)
        orm = query.first()
        return self.to_domain(orm) if orm else None

    def create(self, session: Session, entity: E) -> E:
        orm = self.orm_class(**self.to_columns(entity))
        session.add(orm)
        self._commit(session)
        session.refresh(orm)
        return self.to_domain(orm)

    def save(self, session: Session, entity_id: int, entity: E) -> Optional[E]:
        """Overwrite every column of row `entity_id` with the values of `entity`."""
        orm = session.get(self.orm_class, entity_id)
        if not orm:
            return None
        for name, value in self.to_columns(entity).items():
            setattr(orm, name, value)
        session.add(orm)
        self._commit(session)
        session.refresh(orm)
        return self.to_domain(orm)

    def delete(self, session: Session, entity_id: int) -> bool:
        orm = session.get(self.orm_class, entity_id)
        if not orm:
            return False
        session.delete(orm)
        session.commit()
        return True

    def _commit(self, session: Session) -> None:
        try:
            session.commit()
        except IntegrityError as e:
            session.rollback()
            logger.info("Integrity error on %s: %s", self.orm_class.__tablename__, e.orig)
            raise DuplicateEntityError(str(e.orig)) from e
