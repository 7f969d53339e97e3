"""
Candidate routes
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, status
import structlog

from hrportal.core.exceptions import NotFoundError, ValidationError
from hrportal.candidates.repository import CandidateRepository, get_candidate_repository
from hrportal.candidates.schemas import (
    CandidateCreate,
    CandidateEnvelope,
    CandidateListResponse,
    CandidateUpdate,
    SkillFilterRequest,
)
from hrportal.candidates.skills import (
    available_locations,
    build_skill_index,
    normalize_candidate,
    normalize_candidates,
    original_spelling,
)
from hrportal.candidates.filters import (
    SKILL_CATEGORIES,
    CandidateFilter,
    filter_by_skill,
    filter_by_skill_substring,
    filter_by_skills,
    group_by_skill,
    matching_skills,
    related_skills,
    resolve_match_type,
)
from hrportal.candidates.statistics import skill_statistics, summarize
from hrportal.core.schemas import MessageResponse

router = APIRouter(prefix="/api/candidates", tags=["Candidates"])
logger = structlog.get_logger()

REQUIRED_FIELDS = ("name", "email", "mobile")


def _snapshot(repo: CandidateRepository) -> List[Dict[str, Any]]:
    """Normalized copy of every candidate for this request"""
    return normalize_candidates(repo.list_all())


@router.get("/", response_model=CandidateListResponse)
def list_candidates(repo: CandidateRepository = Depends(get_candidate_repository)):
    """List all candidates, newest first"""
    candidates = _snapshot(repo)
    logger.info("candidates_listed", count=len(candidates))
    return {"success": True, "data": candidates, "count": len(candidates)}


@router.get("/skills")
def list_skills(repo: CandidateRepository = Depends(get_candidate_repository)):
    """Unique skills (case-insensitive) with the candidates holding each"""
    candidates = _snapshot(repo)
    entries = build_skill_index(candidates)

    logger.info("skill_index_served", unique_skills=len(entries), candidates=len(candidates))

    return {
        "success": True,
        "data": [
            {"skill": e["skill"], "count": e["count"], "candidates": e["candidates"]}
            for e in entries
        ],
        "totalSkills": len(entries),
        "totalCandidates": len(candidates),
    }


@router.get("/locations")
def list_locations(repo: CandidateRepository = Depends(get_candidate_repository)):
    """Distinct candidate cities for the location filter"""
    locations = available_locations(_snapshot(repo))
    return {"success": True, "data": locations, "count": len(locations)}


@router.get("/skill/{skill_name}")
def candidates_by_skill(
    skill_name: str,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Candidates holding one skill, with related skills and a summary"""
    candidates = filter_by_skill(_snapshot(repo), skill_name)
    skill = original_spelling(candidates, skill_name)

    logger.info("candidates_filtered", filter="skill", skill=skill, count=len(candidates))

    return {
        "success": True,
        "skill": skill,
        "requestedSkill": skill_name,
        "count": len(candidates),
        "data": candidates,
        "relatedSkills": related_skills(candidates, skill_name),
        "summary": summarize(candidates, detailed=True),
    }


@router.get("/skill/{skill_name}/stats")
def skill_stats(
    skill_name: str,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Share, experience spread and availability for one skill"""
    stats = skill_statistics(_snapshot(repo), skill_name)
    logger.info(
        "skill_statistics_computed",
        skill=skill_name,
        holders=stats["statistics"]["candidatesWithSkill"],
    )
    return {"success": True, **stats}


@router.get("/search/skills")
def search_skills(
    q: Optional[str] = None,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Candidates with any skill containing ``q`` (case-insensitive)"""
    if not q:
        raise ValidationError("Please provide a search query", details={"field": "q"})

    candidates = filter_by_skill_substring(_snapshot(repo), q)

    logger.info("candidates_filtered", filter="skill_substring", query=q, count=len(candidates))

    return {
        "success": True,
        "query": q,
        "count": len(candidates),
        "data": candidates,
        "matchingSkills": matching_skills(candidates, q),
        "summary": summarize(candidates),
    }


@router.get("/search")
def search_candidates(
    skills: Optional[List[str]] = Query(None),
    match_type: Optional[str] = Query(None, alias="matchType"),
    experience_min: Optional[int] = Query(None, alias="experienceMin"),
    experience_max: Optional[int] = Query(None, alias="experienceMax"),
    salary_min: Optional[int] = Query(None, alias="salaryMin"),
    salary_max: Optional[int] = Query(None, alias="salaryMax"),
    location: Optional[str] = None,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Combined skill, experience, salary and location search"""
    criteria = CandidateFilter(
        skills=[s for s in (skills or []) if s],
        match_type=resolve_match_type(match_type),
        experience_min=experience_min,
        experience_max=experience_max,
        salary_min=salary_min,
        salary_max=salary_max,
        location=location,
    )
    candidates = criteria.apply(_snapshot(repo))

    logger.info("candidates_filtered", filter="search", criteria=criteria.describe(), count=len(candidates))

    return {
        "success": True,
        "count": len(candidates),
        "filters": criteria.describe(),
        "data": candidates,
        "summary": summarize(candidates, detailed=True),
    }


@router.post("/filter/by-skills")
def filter_candidates_by_skills(
    request: SkillFilterRequest,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Candidates holding any or all of several skills, grouped per skill"""
    if not request.skills:
        raise ValidationError(
            "Please provide an array of skills to filter by",
            details={"field": "skills"},
        )

    match_type = resolve_match_type(request.match_type)
    candidates = filter_by_skills(_snapshot(repo), request.skills, match_type)
    groups, counts = group_by_skill(candidates, request.skills)

    logger.info(
        "candidates_filtered",
        filter="skills",
        match_type=match_type,
        skills=request.skills,
        count=len(candidates),
    )

    return {
        "success": True,
        "matchType": match_type,
        "requestedSkills": request.skills,
        "totalCount": len(candidates),
        "data": candidates,
        "groupedBySkill": groups,
        "skillCounts": counts,
    }


@router.get("/{candidate_id:int}", response_model=CandidateEnvelope)
def get_candidate(
    candidate_id: int,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Get candidate details"""
    candidate = repo.get_by_id(candidate_id)
    if candidate is None:
        raise NotFoundError("Candidate", str(candidate_id))
    return {"success": True, "data": normalize_candidate(candidate)}


@router.get("/{category}")
def candidates_by_category(
    category: str,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Shortcut listings for frequently searched skills"""
    if category not in SKILL_CATEGORIES:
        raise NotFoundError("Category", category)

    label, skill = SKILL_CATEGORIES[category]
    candidates = filter_by_skill(_snapshot(repo), skill)

    logger.info("candidates_filtered", filter="category", category=label, count=len(candidates))

    return {
        "success": True,
        "category": label,
        "count": len(candidates),
        "data": candidates,
    }


@router.post("/", response_model=CandidateEnvelope, status_code=status.HTTP_201_CREATED)
def create_candidate(
    candidate_data: CandidateCreate,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Create a new candidate"""
    data = candidate_data.model_dump()
    missing = [f for f in REQUIRED_FIELDS if not data.get(f)]
    if missing:
        raise ValidationError(
            "Name, email, and mobile are required fields",
            details={"missing": missing},
        )

    if repo.email_exists(data["email"]):
        raise ValidationError(
            "Candidate with this email already exists",
            details={"email": data["email"]},
        )

    created = repo.create(data)
    return {
        "success": True,
        "message": "Candidate created successfully",
        "data": normalize_candidate(created),
    }


@router.put("/{candidate_id:int}", response_model=CandidateEnvelope)
def update_candidate(
    candidate_id: int,
    candidate_data: CandidateUpdate,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Update candidate; only supplied fields change"""
    changes = candidate_data.model_dump(exclude_unset=True, exclude_none=True)
    updated = repo.update(candidate_id, changes)
    if updated is None:
        raise NotFoundError("Candidate", str(candidate_id))
    return {
        "success": True,
        "message": "Candidate updated successfully",
        "data": normalize_candidate(updated),
    }


@router.delete("/{candidate_id:int}", response_model=MessageResponse)
def delete_candidate(
    candidate_id: int,
    repo: CandidateRepository = Depends(get_candidate_repository),
):
    """Delete candidate"""
    if not repo.delete(candidate_id):
        raise NotFoundError("Candidate", str(candidate_id))
    return {"success": True, "message": "Candidate deleted successfully"}
