"""
Demand repository
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
from hrportal.models.demand import Demand

logger = structlog.get_logger()

DEMAND_DEFAULTS: Dict[str, Any] = {
    "client_name": "",
    "country": "",
    "location": "",
    "exp_from": 0,
    "exp_to": 0,
    "interviewer1": "",
    "interviewer2": "",
    "job_description": "",
    "job_priority": "Medium",
    "primary_skill": [],
    "secondary_skill": [],
    "recruiter_poc": "",
    "status": "Active",
}


class DemandRepository:
    """Demand storage operations bound to one session"""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Dict[str, Any]]:
        """All demands, most recently created first"""
        rows = (
            self.db.query(Demand)
            .order_by(Demand.created_date.desc(), Demand.id.desc())
            .all()
        )
        return [row.to_dict() for row in rows]

    def get_by_id(self, demand_id: int) -> Optional[Dict[str, Any]]:
        row = self.db.get(Demand, demand_id)
        return row.to_dict() if row else None

    def next_id(self) -> int:
        current = self.db.query(func.max(Demand.id)).scalar()
        return (current or 0) + 1

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        values = {**DEMAND_DEFAULTS, **{k: v for k, v in data.items() if v is not None}}
        values.pop("id", None)
        values.setdefault("created_date", datetime.now(timezone.utc).date())

        demand = Demand(id=self.next_id(), **values)
        self.db.add(demand)
        self._commit(demand.id)
        self.db.refresh(demand)

        logger.info("demand_created", demand_id=demand.id, client=demand.client_name)
        return demand.to_dict()

    def update(self, demand_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        demand = self.db.get(Demand, demand_id)
        if demand is None:
            return None

        for key, value in changes.items():
            if key == "id" or not hasattr(Demand, key):
                continue
            setattr(demand, key, value)

        self._commit(demand_id)
        self.db.refresh(demand)

        logger.info("demand_updated", demand_id=demand_id, fields=sorted(changes))
        return demand.to_dict()

    def delete(self, demand_id: int) -> bool:
        demand = self.db.get(Demand, demand_id)
        if demand is None:
            return False

        self.db.delete(demand)
        self.db.commit()

        logger.info("demand_deleted", demand_id=demand_id)
        return True

    def _commit(self, demand_id: int):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("demand_write_conflict", demand_id=demand_id, error=str(e.orig))
            raise ConflictError("Demand id already taken, retry the request")


def get_demand_repository(db: Session = Depends(get_db)) -> DemandRepository:
    """Dependency for getting a request-scoped demand repository"""
    return DemandRepository(db)
