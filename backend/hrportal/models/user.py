"""
User models
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from hrportal.core.database import Base


class User(Base):
    """Portal user, keyed by username"""

    __tablename__ = "users"

    username = Column(String(100), primary_key=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="HR")  # Admin, HR
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
