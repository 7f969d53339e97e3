"""
Tests for the candidate filter engine
"""
import pytest

from hrportal.candidates.filters import (
    CandidateFilter,
    filter_by_experience,
    filter_by_location,
    filter_by_salary,
    filter_by_skill,
    filter_by_skill_substring,
    filter_by_skills,
    group_by_skill,
    matching_skills,
    parse_experience,
    parse_salary,
    related_skills,
    resolve_match_type,
)

CANDIDATES = [
    {"id": 1, "skills": ["Python", "IoT"], "experience": "5 years", "salary": "₹18 LPA", "location": "Bangalore, India"},
    {"id": 2, "skills": ["Java", "iot"], "experience": "2", "salary": "₹10 LPA", "location": "Bangalore North, India"},
    {"id": 3, "skills": ["java", "Spring Boot", "python"], "experience": "12 years", "salary": "", "location": "Pune, India"},
    {"id": 4, "skills": [], "experience": None},
    {"id": 5},
]


def ids(candidates):
    return [c["id"] for c in candidates]


@pytest.mark.parametrize(
    "value, expected",
    [("5 years", 5), ("12", 12), ("  7yrs", 7), ("fresher", 0), ("", 0), (None, 0), (4, 4), (3.9, 3)],
)
def test_parse_experience(value, expected):
    assert parse_experience(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("₹18 LPA", 18), ("INR 7.5 lakh", 7), ("", 0), (None, 0), ("negotiable", 0)],
)
def test_parse_salary(value, expected):
    assert parse_salary(value) == expected


def test_exact_skill_match_is_case_insensitive():
    assert ids(filter_by_skill(CANDIDATES, "Python")) == ids(filter_by_skill(CANDIDATES, "python")) == [1, 3]


def test_exact_skill_match_is_not_substring():
    assert filter_by_skill(CANDIDATES, "pyth") == []


def test_substring_match():
    assert ids(filter_by_skill_substring(CANDIDATES, "JAV")) == [2, 3]
    assert ids(filter_by_skill_substring(CANDIDATES, "o")) == [1, 2, 3]


def test_multi_skill_all_requires_every_skill():
    assert ids(filter_by_skills(CANDIDATES, ["Java", "IoT"], "ALL")) == [2]


def test_multi_skill_any_is_union():
    assert ids(filter_by_skills(CANDIDATES, ["Java", "IoT"], "ANY")) == [1, 2, 3]


@pytest.mark.parametrize("value", [None, "", "any", "some", 3])
def test_unrecognized_match_type_defaults_to_any(value):
    assert resolve_match_type(value) == "ANY"


def test_match_type_all_is_case_insensitive():
    assert resolve_match_type("all") == "ALL"


def test_experience_range_bounds_are_inclusive_and_optional():
    assert ids(filter_by_experience(CANDIDATES, 2, 5)) == [1, 2]
    assert ids(filter_by_experience(CANDIDATES, minimum=6)) == [3]
    assert ids(filter_by_experience(CANDIDATES, maximum=0)) == [4, 5]


def test_salary_range():
    assert ids(filter_by_salary(CANDIDATES, 15, 20)) == [1]
    assert 2 not in ids(filter_by_salary(CANDIDATES, 15, 20))


def test_location_matches_exact_city_segment():
    assert ids(filter_by_location(CANDIDATES, "bangalore")) == [1]
    assert ids(filter_by_location(CANDIDATES, "Bangalore North")) == [2]
    assert filter_by_location(CANDIDATES, "Mumbai") == []


def test_combined_filter_is_logical_and():
    criteria = CandidateFilter(skills=["python"], experience_min=6)
    assert ids(criteria.apply(CANDIDATES)) == [3]


def test_combined_filter_with_no_matches_is_empty():
    criteria = CandidateFilter(skill="python", location="Chennai")
    assert criteria.apply(CANDIDATES) == []


def test_empty_filter_keeps_everything_in_order():
    assert ids(CandidateFilter().apply(CANDIDATES)) == [1, 2, 3, 4, 5]


def test_describe_lists_only_active_criteria():
    criteria = CandidateFilter(skills=["Java"], match_type="all", salary_max=20)
    assert criteria.describe() == {"skills": ["Java"], "matchType": "ALL", "salaryMax": 20}


def test_related_skills_counted_per_candidate_and_sorted():
    holders = filter_by_skill(CANDIDATES, "java")
    related = related_skills(holders, "java")

    assert all(r["count"] == 1 for r in related)
    assert {r["skill"] for r in related} == {"iot", "Spring Boot", "python"}
    assert all(r["skill"].lower() != "java" for r in related)


def test_related_skills_most_common_first():
    candidates = [
        {"skills": ["Python", "Django"]},
        {"skills": ["python", "Flask", "django"]},
        {"skills": ["PYTHON", "Django", "Django"]},
    ]
    related = related_skills(candidates, "python")
    assert related[0] == {"skill": "Django", "count": 3}
    assert related[1] == {"skill": "Flask", "count": 1}


def test_matching_skills_keep_original_case():
    found = matching_skills(filter_by_skill_substring(CANDIDATES, "io"), "io")
    assert found == ["IoT", "iot"]


def test_group_by_skill_keeps_request_spelling_and_position():
    results = filter_by_skills(CANDIDATES, ["JAVA", "Python"], "ANY")
    groups, counts = group_by_skill(results, ["JAVA", "Python"])

    assert ids(groups["JAVA"]) == [2, 3]
    assert ids(groups["Python"]) == [1, 3]
    assert counts == [
        {"skill": "JAVA", "normalized": "java", "count": 2},
        {"skill": "Python", "normalized": "python", "count": 2},
    ]
