"""
Demand board views: status filter, free-text search and ordering
"""
from typing import Any, Dict, List, Mapping, Optional, Sequence

PRIORITY_ORDER = {"High": 1, "Medium": 2, "Low": 3}
UNKNOWN_PRIORITY = 4


def filter_by_status(demands: Sequence[Mapping[str, Any]], status: Optional[str]) -> List[Mapping[str, Any]]:
    """Keep demands whose status matches, ignoring case; no status keeps all"""
    if not status:
        return list(demands)
    wanted = status.strip().lower()
    return [d for d in demands if str(d.get("status") or "").lower() == wanted]


def search_demands(demands: Sequence[Mapping[str, Any]], term: Optional[str]) -> List[Mapping[str, Any]]:
    """Substring search over client, location, primary and secondary skills"""
    if not term:
        return list(demands)
    needle = term.strip().lower()
    matches = []
    for demand in demands:
        haystack = " ".join([
            str(demand.get("clientName") or ""),
            str(demand.get("location") or ""),
            " ".join(str(s) for s in demand.get("primarySkill") or []),
            " ".join(str(s) for s in demand.get("secondarySkill") or []),
        ]).lower()
        if needle in haystack:
            matches.append(demand)
    return matches


def sort_by_priority(demands: Sequence[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """High before Medium before Low; stable within a priority"""
    return sorted(
        demands,
        key=lambda d: PRIORITY_ORDER.get(d.get("jobPriority"), UNKNOWN_PRIORITY),
    )


def sort_by_created_date(demands: Sequence[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Newest first; undated demands last"""
    dated = [d for d in demands if d.get("createdDate")]
    undated = [d for d in demands if not d.get("createdDate")]
    return sorted(dated, key=lambda d: str(d["createdDate"]), reverse=True) + undated


def with_ageing(demand: Mapping[str, Any], weeks: int) -> Dict[str, Any]:
    return {**demand, "ageingWeeks": weeks}
