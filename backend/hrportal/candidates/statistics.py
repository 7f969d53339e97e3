"""
Derived statistics over candidate subsets
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Sequence

from hrportal.candidates.filters import filter_by_skill, parse_experience
from hrportal.candidates.skills import city_of, normalize_skill, skill_variations

AVAILABLE_STATUS = "Available"
TOP_LOCATIONS = 5

EXPERIENCE_BUCKETS = ("0-2 years", "3-5 years", "6-10 years", "10+ years")


def _round_half_up(value: float, places: str) -> Decimal:
    return Decimal(str(value)).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def average_experience(candidates: Sequence[Mapping[str, Any]]) -> float:
    """Mean years of experience to one decimal; 0 for no candidates"""
    if not candidates:
        return 0
    total = sum(parse_experience(c.get("experience")) for c in candidates)
    return float(_round_half_up(total / len(candidates), "0.1"))


def common_locations(candidates: Sequence[Mapping[str, Any]], limit: int = TOP_LOCATIONS) -> List[Dict[str, Any]]:
    """Most frequent cities; ties keep first-seen order"""
    tally: Dict[str, int] = {}
    for candidate in candidates:
        city = city_of(candidate.get("location"))
        if city is not None:
            tally[city] = tally.get(city, 0) + 1

    ranked = sorted(tally.items(), key=lambda item: item[1], reverse=True)
    return [{"location": city, "count": count} for city, count in ranked[:limit]]


def visa_status_distribution(candidates: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    tally: Dict[str, int] = {}
    for candidate in candidates:
        status = candidate.get("visaStatus")
        if status:
            tally[status] = tally.get(status, 0) + 1

    ranked = sorted(tally.items(), key=lambda item: item[1], reverse=True)
    return [{"status": status, "count": count} for status, count in ranked]


def experience_bucket(years: int) -> str:
    if years <= 2:
        return "0-2 years"
    if years <= 5:
        return "3-5 years"
    if years <= 10:
        return "6-10 years"
    return "10+ years"


def experience_buckets(candidates: Sequence[Mapping[str, Any]]) -> Dict[str, int]:
    """Histogram over fixed experience ranges; counts sum to len(candidates)"""
    buckets = {name: 0 for name in EXPERIENCE_BUCKETS}
    for candidate in candidates:
        buckets[experience_bucket(parse_experience(candidate.get("experience")))] += 1
    return buckets


def skill_percentage(with_skill: int, total: int) -> str:
    """Share of candidates as a two-decimal percentage string"""
    if total <= 0:
        return "0%"
    return f"{_round_half_up(with_skill / total * 100, '0.01')}%"


def available_count(candidates: Sequence[Mapping[str, Any]]) -> int:
    return sum(1 for c in candidates if c.get("status") == AVAILABLE_STATUS)


def summarize(candidates: Sequence[Mapping[str, Any]], detailed: bool = False) -> Dict[str, Any]:
    """Summary block attached to filtered candidate responses"""
    summary: Dict[str, Any] = {
        "totalCandidates": len(candidates),
        "averageExperience": average_experience(candidates),
    }
    if detailed:
        summary["commonLocations"] = common_locations(candidates)
        summary["visaStatus"] = visa_status_distribution(candidates)
    return summary


def skill_statistics(candidates: Sequence[Mapping[str, Any]], skill: str) -> Dict[str, Any]:
    """
    Statistics for one skill across the whole candidate set.

    ``candidates`` is every candidate, not just the holders: the percentage
    is taken against the full population.
    """
    holders = filter_by_skill(candidates, skill)
    return {
        "skill": {
            "requested": skill,
            "normalized": normalize_skill(skill),
            "variations": skill_variations(candidates, skill),
        },
        "statistics": {
            "totalCandidates": len(candidates),
            "candidatesWithSkill": len(holders),
            "percentage": skill_percentage(len(holders), len(candidates)),
            "experienceDistribution": experience_buckets(holders),
            "averageExperience": average_experience(holders),
            "availableCount": available_count(holders),
        },
    }
