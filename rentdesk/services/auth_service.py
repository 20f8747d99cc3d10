import logging

from sqlalchemy.orm import Session

from rentdesk.database.models import User
from rentdesk.schemas.auth_schema import UserCreate
from rentdesk.utils.dependencies import hash_password

logger = logging.getLogger(__name__)


def create_user(payload: UserCreate, db: Session) -> User:
    user = User(
        name=payload.name,
        email=payload.email,
        hashed_password=hash_password(payload.password),
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered account %s", user.id)
    return user


def get_user_by_email(email: str, db: Session):
    return db.query(User).filter_by(email=email).first()
