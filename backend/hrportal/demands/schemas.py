"""
Demand Pydantic schemas
"""
from datetime import date
from typing import List, Literal, Optional
from pydantic import Field

from hrportal.core.schemas import CamelModel

Priority = Literal["High", "Medium", "Low"]
DemandStatus = Literal["Active", "Inactive"]


class DemandCreate(CamelModel):
    """Demand creation schema; every field is optional and defaulted"""
    client_name: Optional[str] = None
    country: Optional[str] = None
    location: Optional[str] = None
    created_date: Optional[date] = None
    exp_from: Optional[int] = None
    exp_to: Optional[int] = None
    interviewer1: Optional[str] = None
    interviewer2: Optional[str] = None
    job_description: Optional[str] = None
    job_priority: Optional[Priority] = None
    primary_skill: Optional[List[str]] = None
    secondary_skill: Optional[List[str]] = None
    recruiter_poc: Optional[str] = Field(default=None, alias="recruiterPOC")
    status: Optional[DemandStatus] = None


class DemandUpdate(DemandCreate):
    """Demand update schema; only supplied fields change"""


class DemandResponse(CamelModel):
    """Demand response schema"""
    id: int
    client_name: Optional[str] = None
    country: Optional[str] = None
    location: Optional[str] = None
    created_date: Optional[date] = None
    exp_from: int = 0
    exp_to: int = 0
    interviewer1: Optional[str] = None
    interviewer2: Optional[str] = None
    job_description: Optional[str] = None
    job_priority: Optional[str] = None
    primary_skill: List[str] = []
    secondary_skill: List[str] = []
    recruiter_poc: Optional[str] = Field(default=None, alias="recruiterPOC")
    status: Optional[str] = None
    ageing_weeks: int = 0


class DemandEnvelope(CamelModel):
    success: bool = True
    message: Optional[str] = None
    data: DemandResponse


class DemandListResponse(CamelModel):
    success: bool = True
    data: List[DemandResponse]
    count: int
