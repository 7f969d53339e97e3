"""
Tests for candidate routes
"""


def test_create_assigns_sequential_ids_and_defaults(client):
    first = client.post("/api/candidates/", json={"name": "A", "email": "a@example.com", "mobile": "1"})
    second = client.post("/api/candidates/", json={"name": "B", "email": "b@example.com", "mobile": "2"})

    assert first.status_code == 201
    body = first.json()
    assert body["success"] is True
    assert body["data"]["id"] == 1
    assert body["data"]["status"] == "Available"
    assert body["data"]["visaStatus"] == "Not Required"
    assert body["data"]["skills"] == []
    assert second.json()["data"]["id"] == 2


def test_ids_are_not_reused_below_the_maximum(client):
    for n in range(3):
        client.post("/api/candidates/", json={"name": f"C{n}", "email": f"c{n}@example.com", "mobile": "1"})
    client.delete("/api/candidates/2")

    created = client.post("/api/candidates/", json={"name": "D", "email": "d@example.com", "mobile": "1"})
    assert created.json()["data"]["id"] == 4


def test_create_requires_name_email_and_mobile(client):
    response = client.post("/api/candidates/", json={"name": "Only Name"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Name, email, and mobile are required fields"
    assert body["error"]["details"]["missing"] == ["email", "mobile"]


def test_create_rejects_duplicate_email(seeded_client):
    response = seeded_client.post(
        "/api/candidates/",
        json={"name": "Copy", "email": "asha@example.com", "mobile": "1"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Candidate with this email already exists"


def test_list_is_newest_first_with_normalized_skills(seeded_client):
    body = seeded_client.get("/api/candidates/").json()

    assert body["count"] == 4
    assert [c["id"] for c in body["data"]] == [4, 3, 2, 1]
    rahul = next(c for c in body["data"] if c["name"] == "Rahul Mehta")
    karthik = next(c for c in body["data"] if c["name"] == "Karthik S")
    assert rahul["skills"] == ["python", "Django"]
    assert karthik["skills"] == ["JAVA", "PCB Design"]


def test_get_update_delete_candidate(seeded_client):
    response = seeded_client.get("/api/candidates/1")
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Asha Rao"

    updated = seeded_client.put("/api/candidates/1", json={"status": "Interviewing", "skills": "Go, Rust"})
    assert updated.status_code == 200
    data = updated.json()["data"]
    assert data["status"] == "Interviewing"
    assert data["skills"] == ["Go", "Rust"]
    assert data["name"] == "Asha Rao"
    assert data["id"] == 1

    assert seeded_client.delete("/api/candidates/1").json()["success"] is True
    assert seeded_client.get("/api/candidates/1").status_code == 404


def test_missing_candidate_is_not_found(client):
    for response in (
        client.get("/api/candidates/99"),
        client.put("/api/candidates/99", json={"name": "X"}),
        client.delete("/api/candidates/99"),
    ):
        assert response.status_code == 404
        assert response.json()["message"] == "Candidate not found"


def test_skills_facet_groups_case_variants(seeded_client):
    body = seeded_client.get("/api/candidates/skills").json()

    facet = {entry["skill"].lower(): entry for entry in body["data"]}
    assert body["totalCandidates"] == 4
    assert body["totalSkills"] == len(body["data"]) == 6
    # Snapshot is newest-first, so Rahul's "python" is seen before Asha's "Python"
    assert facet["python"]["skill"] == "python"
    assert facet["python"]["count"] == 2
    assert facet["java"]["skill"] == "JAVA"
    assert facet["iot"]["count"] == 2
    assert facet["java"]["count"] == 2
    assert [e["skill"] for e in body["data"]] == sorted((e["skill"] for e in body["data"]), key=str.lower)


def test_skill_lookup_is_case_insensitive(seeded_client):
    upper = seeded_client.get("/api/candidates/skill/PYTHON").json()
    lower = seeded_client.get("/api/candidates/skill/python").json()

    assert upper["data"] == lower["data"]
    assert upper["count"] == 2
    assert upper["requestedSkill"] == "PYTHON"
    assert upper["skill"] in ("Python", "python")
    related = {r["skill"] for r in upper["relatedSkills"]}
    assert related == {"IoT", "Embedded Systems", "Django"}
    summary = upper["summary"]
    assert summary["totalCandidates"] == 2
    assert summary["averageExperience"] == 4.5
    assert {loc["location"] for loc in summary["commonLocations"]} == {"Bangalore", "Pune"}
    assert summary["visaStatus"][0]["count"] == 1


def test_skill_lookup_without_matches(seeded_client):
    body = seeded_client.get("/api/candidates/skill/Rust").json()
    assert body["success"] is True
    assert body["count"] == 0
    assert body["skill"] == "Rust"
    assert body["summary"]["averageExperience"] == 0


def test_skill_stats(seeded_client):
    body = seeded_client.get("/api/candidates/skill/java/stats").json()

    assert body["success"] is True
    assert body["skill"]["normalized"] == "java"
    assert sorted(body["skill"]["variations"]) == ["JAVA", "Java"]
    stats = body["statistics"]
    assert stats["totalCandidates"] == 4
    assert stats["candidatesWithSkill"] == 2
    assert stats["percentage"] == "50.00%"
    assert stats["experienceDistribution"] == {"0-2 years": 1, "3-5 years": 0, "6-10 years": 0, "10+ years": 1}
    assert stats["availableCount"] == 1


def test_skill_stats_on_empty_repository(client):
    stats = client.get("/api/candidates/skill/java/stats").json()["statistics"]
    assert stats["percentage"] == "0%"
    assert stats["averageExperience"] == 0


def test_skill_search_requires_query(client):
    response = client.get("/api/candidates/search/skills")
    assert response.status_code == 400
    assert response.json()["message"] == "Please provide a search query"


def test_skill_search_matches_substrings(seeded_client):
    body = seeded_client.get("/api/candidates/search/skills", params={"q": "JA"}).json()

    assert body["count"] == 3
    assert sorted(body["matchingSkills"]) == ["Django", "JAVA", "Java"]
    assert body["summary"]["totalCandidates"] == 3


def test_filter_by_skills_all_and_any(seeded_client):
    all_body = seeded_client.post(
        "/api/candidates/filter/by-skills",
        json={"skills": ["Java", "IoT"], "matchType": "ALL"},
    ).json()
    any_body = seeded_client.post(
        "/api/candidates/filter/by-skills",
        json={"skills": ["Java", "IoT"]},
    ).json()

    assert all_body["matchType"] == "ALL"
    assert [c["name"] for c in all_body["data"]] == ["Meera Iyer"]
    assert any_body["matchType"] == "ANY"
    assert any_body["totalCount"] == 3
    assert set(any_body["groupedBySkill"]) == {"Java", "IoT"}
    assert any_body["skillCounts"] == [
        {"skill": "Java", "normalized": "java", "count": 2},
        {"skill": "IoT", "normalized": "iot", "count": 2},
    ]


def test_filter_by_skills_rejects_empty_list(client):
    for payload in ({}, {"skills": []}):
        response = client.post("/api/candidates/filter/by-skills", json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Please provide an array of skills to filter by"


def test_advanced_search_combines_filters(seeded_client):
    body = seeded_client.get(
        "/api/candidates/search",
        params={"skills": ["python", "iot"], "experienceMin": 4, "salaryMin": 15, "salaryMax": 20},
    ).json()

    assert [c["name"] for c in body["data"]] == ["Asha Rao"]
    assert body["filters"]["matchType"] == "ANY"
    assert body["filters"]["salaryMax"] == 20


def test_advanced_search_location_is_exact_city(seeded_client):
    body = seeded_client.get("/api/candidates/search", params={"location": "bangalore"}).json()
    assert [c["name"] for c in body["data"]] == ["Asha Rao"]


def test_advanced_search_with_no_matches(seeded_client):
    body = seeded_client.get("/api/candidates/search", params={"salaryMin": 100}).json()
    assert body["success"] is True
    assert body["count"] == 0
    assert body["data"] == []


def test_locations(seeded_client):
    body = seeded_client.get("/api/candidates/locations").json()
    assert body["data"] == ["Bangalore", "Bangalore North", "Pune"]


def test_category_shortcuts(seeded_client):
    iot = seeded_client.get("/api/candidates/iot").json()
    java = seeded_client.get("/api/candidates/java").json()
    pcb = seeded_client.get("/api/candidates/pcb-design").json()
    embedded = seeded_client.get("/api/candidates/embedded").json()

    assert iot["category"] == "IoT" and iot["count"] == 2
    assert java["count"] == 2
    assert [c["name"] for c in pcb["data"]] == ["Karthik S"]
    assert embedded["category"] == "Embedded Systems" and embedded["count"] == 1


def test_unknown_category_is_not_found(client):
    assert client.get("/api/candidates/cobol").status_code == 404
