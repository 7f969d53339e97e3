"""
Skill normalization and the per-request skill index

Candidate records arrive from storage with ``skills`` in whatever shape they
were written: a list, a JSON-encoded list, or a comma-joined string. Every
downstream consumer goes through ``normalize_candidate`` first and compares
skills by ``normalize_skill`` keys, so "Python", " python " and "PYTHON"
land in the same bucket while the first-seen spelling is kept for display.
"""
import json
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pyuca import Collator
import structlog

logger = structlog.get_logger()

_collator = Collator()


def normalize_skill(skill: Any) -> str:
    """Comparison key for a raw skill token"""
    if not skill:
        return ""
    return str(skill).lower().strip()


def parse_skills(value: Any) -> List[Any]:
    """
    Coerce a stored ``skills`` value to a list.

    Lists pass through, JSON-encoded lists are decoded and any other string
    is split on commas. Empty segments are kept. Never raises.
    """
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            decoded = None
        if isinstance(decoded, list):
            return decoded
        return [segment.strip() for segment in value.split(",")]
    return []


def normalize_candidate(candidate: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of the candidate with ``skills`` as a list"""
    normalized = dict(candidate)
    normalized["skills"] = parse_skills(candidate.get("skills"))
    return normalized


def normalize_candidates(candidates: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [normalize_candidate(c) for c in candidates]


def candidate_skills(candidate: Mapping[str, Any]) -> List[Any]:
    """Skills of a candidate, tolerating records that skipped normalization"""
    return parse_skills(candidate.get("skills"))


def has_skill(candidate: Mapping[str, Any], normalized_skill: str) -> bool:
    return any(normalize_skill(s) == normalized_skill for s in candidate_skills(candidate))


def display_sort_key(text: Any):
    """Unicode collation key for display strings, case-insensitive"""
    text = str(text)
    return (_collator.sort_key(text.casefold()), text)


def build_skill_index(candidates: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Group candidates by normalized skill.

    Each entry carries the first-seen spelling (``skill``), its key
    (``normalizedSkill``), the holders (``candidates``) and ``count``.
    A candidate listing the same skill twice is counted twice.
    Entries are sorted by display spelling.
    """
    index: Dict[str, Dict[str, Any]] = {}

    for candidate in candidates:
        for skill in candidate_skills(candidate):
            key = normalize_skill(skill)
            entry = index.get(key)
            if entry is None:
                entry = {
                    "skill": skill,
                    "normalizedSkill": key,
                    "candidates": [],
                    "count": 0,
                }
                index[key] = entry
            entry["candidates"].append(candidate)
            entry["count"] += 1

    entries = sorted(index.values(), key=lambda e: display_sort_key(e["skill"]))
    logger.debug("skill_index_built", unique_skills=len(entries))
    return entries


def skill_variations(candidates: Iterable[Mapping[str, Any]], skill: Any) -> List[Any]:
    """Distinct original spellings of ``skill`` across candidates, first-seen order"""
    key = normalize_skill(skill)
    variations: List[Any] = []
    for candidate in candidates:
        for s in candidate_skills(candidate):
            if normalize_skill(s) == key and s not in variations:
                variations.append(s)
    return variations


def original_spelling(candidates: List[Mapping[str, Any]], skill: Any) -> Any:
    """Spelling of ``skill`` as held by the first matching candidate"""
    key = normalize_skill(skill)
    if candidates:
        for s in candidate_skills(candidates[0]):
            if normalize_skill(s) == key:
                return s
    return skill


def city_of(location: Any) -> Optional[str]:
    """Leading "City" segment of a "City, Country" location, or None"""
    if not location:
        return None
    return str(location).split(",", 1)[0].strip()


def available_locations(candidates: Iterable[Mapping[str, Any]]) -> List[str]:
    """Distinct city segments for the location filter dropdown"""
    cities = {city_of(c.get("location")) for c in candidates}
    return sorted((city for city in cities if city), key=display_sort_key)
