"""
User repository
"""
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session
import structlog

from hrportal.core.database import get_db
from hrportal.models.user import User

logger = structlog.get_logger()


class UserRepository:
    """User storage operations bound to one session"""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[User]:
        """All users, newest first"""
        return self.db.query(User).order_by(User.created_at.desc()).all()

    def get(self, username: str) -> Optional[User]:
        return self.db.get(User, username)

    def exists(self, username: str) -> bool:
        return self.get(username) is not None

    def create(self, username: str, password_hash: str, role: str) -> User:
        user = User(
            username=username,
            password_hash=password_hash,
            role=role,
            created_at=datetime.now(timezone.utc),
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info("user_created", username=username, role=role)
        return user

    def update_role(self, username: str, role: str) -> Optional[User]:
        user = self.get(username)
        if user is None:
            return None

        user.role = role
        self.db.commit()
        self.db.refresh(user)

        logger.info("user_role_updated", username=username, role=role)
        return user

    def delete(self, username: str) -> bool:
        user = self.get(username)
        if user is None:
            return False

        self.db.delete(user)
        self.db.commit()

        logger.info("user_deleted", username=username)
        return True


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Dependency for getting a request-scoped user repository"""
    return UserRepository(db)
