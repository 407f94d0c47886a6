"""
Users API routes.

Passwords are accepted on input but never returned.
"""
from api.routes.resource import SERVICES_PREFIX, CamelModel, build_resource_router
from domain.models import Role, User
from repositories import UsersRepository

BASE_PATH = f"{SERVICES_PREFIX}/users"
users_repo = UsersRepository()


class UserPayload(CamelModel):
    email: str
    password: str
    role: Role = Role.GUEST


class UserResponse(CamelModel):
    id: int
    email: str
    role: Role


router = build_resource_router(BASE_PATH, users_repo, User, UserPayload, UserResponse)
