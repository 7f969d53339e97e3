"""
Candidate models
"""
from typing import Any, Dict

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.sql import func
from hrportal.core.database import Base


class Candidate(Base):
    """Candidate model"""

    __tablename__ = "candidates"

    # Assigned by the repository (max existing id + 1), never reused
    id = Column(Integer, primary_key=True, autoincrement=False)

    # Contact information
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    mobile = Column(String(50), nullable=False)
    location = Column(String(255), default="")
    visa_status = Column(String(100), default="Not Required")
    passport = Column(String(100), default="")

    # Profile
    experience = Column(String(100), default="")
    current_role = Column(String(255), default="")
    # List of strings; legacy rows may hold a comma-joined or JSON-encoded string
    skills = Column(JSON)
    status = Column(String(50), default="Available")  # Available, Not Available, Interviewing
    notice_period = Column(String(100), default="")
    salary = Column(String(100), default="")
    education = Column(String(255), default="")
    bio = Column(Text, default="")

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def to_dict(self) -> Dict[str, Any]:
        """Raw camelCase record as the filter engine consumes it"""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "mobile": self.mobile,
            "location": self.location,
            "visaStatus": self.visa_status,
            "passport": self.passport,
            "experience": self.experience,
            "currentRole": self.current_role,
            "skills": self.skills,
            "status": self.status,
            "noticePeriod": self.notice_period,
            "salary": self.salary,
            "education": self.education,
            "bio": self.bio,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
