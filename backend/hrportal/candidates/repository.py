"""
Candidate repository

Thin storage adapter. Records leave the repository as plain camelCase
dictionaries so the filter engine never touches ORM objects.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Depends
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import structlog

from hrportal.core.database import get_db
from hrportal.core.exceptions import ConflictError
from hrportal.models.candidate import Candidate

logger = structlog.get_logger()

CANDIDATE_DEFAULTS: Dict[str, Any] = {
    "location": "",
    "visa_status": "Not Required",
    "passport": "",
    "experience": "",
    "current_role": "",
    "skills": [],
    "status": "Available",
    "notice_period": "",
    "salary": "",
    "education": "",
    "bio": "",
}

# Never overwritten by a partial update
IMMUTABLE_FIELDS = {"id", "created_at"}


class CandidateRepository:
    """Candidate storage operations bound to one session"""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Dict[str, Any]]:
        """All candidates, newest id first"""
        rows = self.db.query(Candidate).order_by(Candidate.id.desc()).all()
        return [row.to_dict() for row in rows]

    def get_by_id(self, candidate_id: int) -> Optional[Dict[str, Any]]:
        row = self.db.get(Candidate, candidate_id)
        return row.to_dict() if row else None

    def email_exists(self, email: str) -> bool:
        return self.db.query(Candidate.id).filter(Candidate.email == email).first() is not None

    def next_id(self) -> int:
        """max(id) + 1, or 1 for an empty table"""
        current = self.db.query(func.max(Candidate.id)).scalar()
        return (current or 0) + 1

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a candidate; ``data`` uses model attribute names"""
        values = {**CANDIDATE_DEFAULTS, **{k: v for k, v in data.items() if v is not None}}
        values.pop("id", None)
        now = datetime.now(timezone.utc)

        candidate = Candidate(id=self.next_id(), created_at=now, updated_at=now, **values)
        self.db.add(candidate)
        self._commit("candidate_create_conflict", candidate_id=candidate.id)
        self.db.refresh(candidate)

        logger.info("candidate_created", candidate_id=candidate.id)
        return candidate.to_dict()

    def update(self, candidate_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Merge ``changes`` into an existing candidate"""
        candidate = self.db.get(Candidate, candidate_id)
        if candidate is None:
            return None

        for key, value in changes.items():
            if key in IMMUTABLE_FIELDS or not hasattr(Candidate, key):
                continue
            setattr(candidate, key, value)
        candidate.updated_at = datetime.now(timezone.utc)

        self._commit("candidate_update_conflict", candidate_id=candidate_id)
        self.db.refresh(candidate)

        logger.info("candidate_updated", candidate_id=candidate_id, fields=sorted(changes))
        return candidate.to_dict()

    def delete(self, candidate_id: int) -> bool:
        """Hard delete; False when no such candidate"""
        candidate = self.db.get(Candidate, candidate_id)
        if candidate is None:
            return False

        self.db.delete(candidate)
        self.db.commit()

        logger.info("candidate_deleted", candidate_id=candidate_id)
        return True

    def _commit(self, event: str, **context):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(event, error=str(e.orig), **context)
            raise ConflictError("Candidate conflicts with an existing record (id or email)")


def get_candidate_repository(db: Session = Depends(get_db)) -> CandidateRepository:
    """Dependency for getting a request-scoped candidate repository"""
    return CandidateRepository(db)
