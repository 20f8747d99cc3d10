import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rentdesk.database.init import get_db
from rentdesk.database.models.user_model import User
from rentdesk.schemas.auth_schema import LoginRequest, UserCreate, UserResponse
from rentdesk.services.auth_service import create_user, get_user_by_email
from rentdesk.utils.dependencies import create_access_token, get_current_user, verify_password
from rentdesk.responses.success import data_response, created_response
from rentdesk.responses.error import conflict_error, unauthorized_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _token_payload(user: User) -> dict:
    return {
        "access_token": create_access_token({"sub": user.email}),
        "token_type": "bearer",
        "user": UserResponse.model_validate(user).model_dump(mode="json"),
    }


@router.post("/signup")
def signup(payload: UserCreate, db: Session = Depends(get_db)):
    """Register a new account; the account is the tenant its data belongs to."""
    if get_user_by_email(payload.email, db):
        return conflict_error("User already exists")

    user = create_user(payload, db)
    return created_response(_token_payload(user))


@router.post("/signin")
def signin(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = get_user_by_email(credentials.email, db)
    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.warning("Failed sign-in for %s", credentials.email)
        return unauthorized_error("Invalid credentials")

    return data_response(_token_payload(user))


@router.get("/me")
def me(current_user: User = Depends(get_current_user)):
    return data_response(UserResponse.model_validate(current_user))
