"""
Candidate filter engine

All functions are pure: they take a candidate sequence, keep the input
order and never raise on missing or malformed fields. A candidate that
lacks the field an active filter looks at is simply left out.
"""
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import structlog

from hrportal.candidates.skills import (
    candidate_skills,
    city_of,
    has_skill,
    normalize_skill,
)

logger = structlog.get_logger()

MATCH_ANY = "ANY"
MATCH_ALL = "ALL"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_FIRST_INT = re.compile(r"(\d+)")

# Fixed-target shortcuts served under /api/candidates/{category}
SKILL_CATEGORIES: Dict[str, Tuple[str, str]] = {
    "iot": ("IoT", "iot"),
    "python": ("Python", "python"),
    "java": ("Java", "java"),
    "embedded": ("Embedded Systems", "embedded systems"),
    "pcb-design": ("PCB Design", "pcb design"),
}


def parse_experience(value: Any) -> int:
    """Leading integer of a free-text experience value ("5 years" -> 5), else 0"""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def parse_salary(value: Any) -> int:
    """First integer embedded in a salary string ("₹18 LPA" -> 18), else 0"""
    if value is None or isinstance(value, bool):
        return 0
    match = _FIRST_INT.search(str(value))
    return int(match.group(1)) if match else 0


def resolve_match_type(value: Any) -> str:
    """ALL when asked for explicitly, ANY otherwise"""
    if isinstance(value, str) and value.strip().upper() == MATCH_ALL:
        return MATCH_ALL
    return MATCH_ANY


def _within(value: int, minimum: Optional[int], maximum: Optional[int]) -> bool:
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


def filter_by_skill(candidates: Iterable[Mapping[str, Any]], skill: Any) -> List[Mapping[str, Any]]:
    """Candidates holding ``skill`` (case-insensitive exact match)"""
    key = normalize_skill(skill)
    return [c for c in candidates if has_skill(c, key)]


def filter_by_skill_substring(candidates: Iterable[Mapping[str, Any]], query: Any) -> List[Mapping[str, Any]]:
    """Candidates with at least one skill containing ``query``"""
    needle = normalize_skill(query)
    return [
        c for c in candidates
        if any(needle in normalize_skill(s) for s in candidate_skills(c))
    ]


def filter_by_skills(
    candidates: Iterable[Mapping[str, Any]],
    skills: Sequence[Any],
    match_type: Any = MATCH_ANY,
) -> List[Mapping[str, Any]]:
    """Candidates holding any (or, with ALL, every) of ``skills``"""
    wanted = [normalize_skill(s) for s in skills]
    require_all = resolve_match_type(match_type) == MATCH_ALL

    result = []
    for candidate in candidates:
        held = {normalize_skill(s) for s in candidate_skills(candidate)}
        if require_all:
            matched = all(skill in held for skill in wanted)
        else:
            matched = any(skill in held for skill in wanted)
        if matched:
            result.append(candidate)
    return result


def filter_by_experience(
    candidates: Iterable[Mapping[str, Any]],
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> List[Mapping[str, Any]]:
    """Inclusive experience range; either bound may be omitted"""
    return [c for c in candidates if _within(parse_experience(c.get("experience")), minimum, maximum)]


def filter_by_salary(
    candidates: Iterable[Mapping[str, Any]],
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> List[Mapping[str, Any]]:
    """Inclusive salary range; either bound may be omitted"""
    return [c for c in candidates if _within(parse_salary(c.get("salary")), minimum, maximum)]


def filter_by_location(candidates: Iterable[Mapping[str, Any]], city: Any) -> List[Mapping[str, Any]]:
    """Candidates whose city segment equals ``city``, ignoring case"""
    target = str(city or "").strip().lower()
    result = []
    for candidate in candidates:
        candidate_city = city_of(candidate.get("location"))
        if candidate_city is not None and candidate_city.lower() == target:
            result.append(candidate)
    return result


@dataclass
class CandidateFilter:
    """Filter criteria combined by logical AND; unset criteria are skipped"""

    skill: Optional[str] = None
    skill_query: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    match_type: str = MATCH_ANY
    experience_min: Optional[int] = None
    experience_max: Optional[int] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    location: Optional[str] = None

    def apply(self, candidates: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
        result = list(candidates)
        if self.skill:
            result = filter_by_skill(result, self.skill)
        if self.skill_query:
            result = filter_by_skill_substring(result, self.skill_query)
        if self.skills:
            result = filter_by_skills(result, self.skills, self.match_type)
        if self.experience_min is not None or self.experience_max is not None:
            result = filter_by_experience(result, self.experience_min, self.experience_max)
        if self.salary_min is not None or self.salary_max is not None:
            result = filter_by_salary(result, self.salary_min, self.salary_max)
        if self.location:
            result = filter_by_location(result, self.location)
        return result

    def describe(self) -> Dict[str, Any]:
        """Active criteria, camelCase, for echoing back to the caller"""
        active = {
            "skill": self.skill,
            "skillQuery": self.skill_query,
            "skills": self.skills or None,
            "matchType": resolve_match_type(self.match_type) if self.skills else None,
            "experienceMin": self.experience_min,
            "experienceMax": self.experience_max,
            "salaryMin": self.salary_min,
            "salaryMax": self.salary_max,
            "location": self.location or None,
        }
        return {k: v for k, v in active.items() if v is not None}


def related_skills(candidates: Iterable[Mapping[str, Any]], skill: Any) -> List[Dict[str, Any]]:
    """
    Other skills held by ``candidates``, most common first.

    ``count`` is the number of candidates holding the skill; the spelling is
    the first one seen.
    """
    excluded = normalize_skill(skill)
    related: Dict[str, Dict[str, Any]] = {}

    for candidate in candidates:
        seen = set()
        for s in candidate_skills(candidate):
            key = normalize_skill(s)
            if key == excluded or key in seen:
                continue
            seen.add(key)
            entry = related.setdefault(key, {"skill": s, "count": 0})
            entry["count"] += 1

    return sorted(related.values(), key=lambda e: e["count"], reverse=True)


def matching_skills(candidates: Iterable[Mapping[str, Any]], query: Any) -> List[Any]:
    """Distinct original spellings that contain ``query``"""
    needle = normalize_skill(query)
    found: List[Any] = []
    for candidate in candidates:
        for s in candidate_skills(candidate):
            if needle in normalize_skill(s) and s not in found:
                found.append(s)
    return found


def group_by_skill(
    candidates: Sequence[Mapping[str, Any]],
    skills: Sequence[Any],
) -> Tuple[Dict[Any, List[Mapping[str, Any]]], List[Dict[str, Any]]]:
    """
    Split a result set by requested skill.

    Returns the groups keyed by the caller's spelling and a per-position
    list of ``{skill, normalized, count}``.
    """
    groups: Dict[Any, List[Mapping[str, Any]]] = {}
    counts: List[Dict[str, Any]] = []

    for skill in skills:
        key = normalize_skill(skill)
        members = [c for c in candidates if has_skill(c, key)]
        groups[skill] = members
        counts.append({"skill": skill, "normalized": key, "count": len(members)})

    return groups, counts
