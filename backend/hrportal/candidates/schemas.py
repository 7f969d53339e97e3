"""
Candidate Pydantic schemas
"""
from typing import Any, List, Optional, Union
from pydantic import EmailStr

from hrportal.core.schemas import CamelModel


class CandidateCreate(CamelModel):
    """Candidate creation schema; name, email and mobile are checked by the route"""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    mobile: Optional[str] = None
    location: Optional[str] = None
    visa_status: Optional[str] = None
    passport: Optional[str] = None
    experience: Optional[str] = None
    current_role: Optional[str] = None
    skills: Optional[Union[List[str], str]] = None
    status: Optional[str] = None
    notice_period: Optional[str] = None
    salary: Optional[str] = None
    education: Optional[str] = None
    bio: Optional[str] = None


class CandidateUpdate(CamelModel):
    """Candidate update schema; only supplied fields change"""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    mobile: Optional[str] = None
    location: Optional[str] = None
    visa_status: Optional[str] = None
    passport: Optional[str] = None
    experience: Optional[str] = None
    current_role: Optional[str] = None
    skills: Optional[Union[List[str], str]] = None
    status: Optional[str] = None
    notice_period: Optional[str] = None
    salary: Optional[str] = None
    education: Optional[str] = None
    bio: Optional[str] = None


class CandidateResponse(CamelModel):
    """Candidate response schema"""
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    location: Optional[str] = None
    visa_status: Optional[str] = None
    passport: Optional[str] = None
    experience: Optional[str] = None
    current_role: Optional[str] = None
    skills: List[Any] = []
    status: Optional[str] = None
    notice_period: Optional[str] = None
    salary: Optional[str] = None
    education: Optional[str] = None
    bio: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CandidateEnvelope(CamelModel):
    """Single-candidate response body"""
    success: bool = True
    message: Optional[str] = None
    data: CandidateResponse


class CandidateListResponse(CamelModel):
    success: bool = True
    data: List[CandidateResponse]
    count: int


class SkillFilterRequest(CamelModel):
    """Body of POST /filter/by-skills"""
    skills: Optional[List[str]] = None
    match_type: Optional[str] = "ANY"
