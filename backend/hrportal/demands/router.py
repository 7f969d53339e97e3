"""
Demand (job requisition) routes
"""
from typing import Any, Dict, Literal, Optional
from fastapi import APIRouter, Depends, status
import structlog

from hrportal.core.exceptions import NotFoundError
from hrportal.core.schemas import MessageResponse
from hrportal.demands.ageing import ageing_weeks
from hrportal.demands.board import (
    filter_by_status,
    search_demands,
    sort_by_created_date,
    sort_by_priority,
    with_ageing,
)
from hrportal.demands.repository import DemandRepository, get_demand_repository
from hrportal.demands.schemas import (
    DemandCreate,
    DemandEnvelope,
    DemandListResponse,
    DemandUpdate,
)

router = APIRouter(prefix="/api/demand", tags=["Demands"])
logger = structlog.get_logger()


def _aged(demand: Dict[str, Any]) -> Dict[str, Any]:
    return with_ageing(demand, ageing_weeks(demand.get("createdDate")))


@router.get("/", response_model=DemandListResponse)
def list_demands(
    status: Optional[str] = None,
    search: Optional[str] = None,
    sort: Literal["date", "priority"] = "date",
    repo: DemandRepository = Depends(get_demand_repository),
):
    """List demands with ageing; optional status filter, search and priority order"""
    demands = search_demands(filter_by_status(repo.list_all(), status), search)
    if sort == "priority":
        demands = sort_by_priority(demands)
    else:
        demands = sort_by_created_date(demands)

    logger.info("demands_listed", count=len(demands), status=status, sort=sort)

    return {
        "success": True,
        "data": [_aged(d) for d in demands],
        "count": len(demands),
    }


@router.get("/{demand_id:int}", response_model=DemandEnvelope)
def get_demand(
    demand_id: int,
    repo: DemandRepository = Depends(get_demand_repository),
):
    """Get demand details"""
    demand = repo.get_by_id(demand_id)
    if demand is None:
        raise NotFoundError("Demand", str(demand_id))
    return {"success": True, "data": _aged(demand)}


@router.post("/", response_model=DemandEnvelope, status_code=status.HTTP_201_CREATED)
def create_demand(
    demand_data: DemandCreate,
    repo: DemandRepository = Depends(get_demand_repository),
):
    """Create a new demand"""
    created = repo.create(demand_data.model_dump())
    return {
        "success": True,
        "message": "Demand created successfully",
        "data": _aged(created),
    }


@router.put("/{demand_id:int}", response_model=DemandEnvelope)
def update_demand(
    demand_id: int,
    demand_data: DemandUpdate,
    repo: DemandRepository = Depends(get_demand_repository),
):
    """Update demand; only supplied fields change"""
    changes = demand_data.model_dump(exclude_unset=True, exclude_none=True)
    updated = repo.update(demand_id, changes)
    if updated is None:
        raise NotFoundError("Demand", str(demand_id))
    return {
        "success": True,
        "message": "Demand updated successfully",
        "data": _aged(updated),
    }


@router.delete("/{demand_id:int}", response_model=MessageResponse)
def delete_demand(
    demand_id: int,
    repo: DemandRepository = Depends(get_demand_repository),
):
    """Delete demand"""
    if not repo.delete(demand_id):
        raise NotFoundError("Demand", str(demand_id))
    return {"success": True, "message": "Demand deleted successfully"}
