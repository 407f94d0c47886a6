"""
Authentication API routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from api.routes.resource import SERVICES_PREFIX, CamelModel, item_location, no_content
from api.routes.users import BASE_PATH as USERS_PATH, UserResponse, users_repo
from db import get_session
from repositories import DuplicateEntityError
from services.authentication import AuthOutcome, authenticate, register

BASE_PATH = f"{SERVICES_PREFIX}/auth"
router = APIRouter()


class Credentials(CamelModel):
    email: str
    password: str


@router.post("/authenticate", response_model=UserResponse)
async def authenticate_user(credentials: Credentials, session: Session = Depends(get_session)):
    """Check an email/password pair against the stored account."""
    outcome, user = authenticate(users_repo, session, credentials.email, credentials.password)
    if outcome == AuthOutcome.UNKNOWN_USER:
        return no_content()
    if outcome == AuthOutcome.WRONG_PASSWORD:
        raise HTTPException(status_code=404, detail="Invalid credentials")
    return UserResponse.model_validate(user)


@router.post("/register", response_model=UserResponse, status_code=201)
async def register_user(
    credentials: Credentials, response: Response, session: Session = Depends(get_session)
):
    """Create a guest account for a new email."""
    try:
        user = register(users_repo, session, credentials.email, credentials.password)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=409, detail="User already exists") from e
    if user is None:
        raise HTTPException(status_code=409, detail="User already exists")
    response.headers["Location"] = item_location(USERS_PATH, user.id)
    return UserResponse.model_validate(user)
