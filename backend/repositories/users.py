"""
User repository backed by SQLAlchemy.
"""
from typing import Optional
from sqlalchemy.orm import Session

from domain.models import Role, User
from repositories.base import ResourceRepository
from repositories.models import UserORM


class UsersRepository(ResourceRepository[User]):
    """CRUD operations for users. Emails are unique."""

    orm_class = UserORM
    natural_key = ("email",)

    def to_domain(self, orm: UserORM) -> User:
        return User(id=orm.id, email=orm.email, password=orm.password, role=Role(orm.role))

    def to_columns(self, user: User) -> dict:
        return {"email": user.email, "password": user.password, "role": user.role.value}

    def get_by_email(self, session: Session, email: str) -> Optional[User]:
        orm = session.query(UserORM).filter(UserORM.email == email).first()
        return self.to_domain(orm) if orm else None
