"""Skill API tests."""


def test_create_skill(client):
    """Test creating a skill."""
    response = client.post(
        "/api/skills",
        json={"name": "Python", "percentage": 95, "category": "data-engineering", "order": 1},
    )
    assert response.status_code == 201
    assert response.json() == {
        "id": 1,
        "name": "Python",
        "percentage": 95,
        "category": "data-engineering",
        "order": 1,
    }


def test_create_skill_percentage_out_of_range(client):
    """Test that percentage must be between 0 and 100."""
    response = client.post(
        "/api/skills",
        json={"name": "Python", "percentage": 101, "category": "data-engineering"},
    )
    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Invalid skill data"
    assert data["errors"][0]["field"] == "percentage"


def test_create_skill_wrong_type(client):
    """Test that numbers sent as strings are rejected."""
    response = client.post(
        "/api/skills",
        json={"name": "SQL", "percentage": "90", "category": "data-engineering"},
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "percentage"


def test_get_skills_sorted(client):
    """Test that skills come back in display order."""
    client.post("/api/skills", json={"name": "SQL", "percentage": 90, "category": "de", "order": 2})
    client.post("/api/skills", json={"name": "Python", "percentage": 95, "category": "de", "order": 1})

    response = client.get("/api/skills")
    assert response.status_code == 200
    assert [s["name"] for s in response.json()] == ["Python", "SQL"]


def test_get_skills_by_category(client):
    """Test the exact, case-sensitive category filter."""
    client.post("/api/skills", json={"name": "Tableau", "percentage": 90, "category": "visualization"})
    client.post("/api/skills", json={"name": "Kafka", "percentage": 75, "category": "data-engineering"})
    client.post("/api/skills", json={"name": "Plotly", "percentage": 85, "category": "Visualization"})

    response = client.get("/api/skills", params={"category": "visualization"})
    assert [s["name"] for s in response.json()] == ["Tableau"]


def test_empty_category_means_all(client):
    """Test that an empty category is no filter."""
    client.post("/api/skills", json={"name": "Tableau", "percentage": 90, "category": "visualization"})

    response = client.get("/api/skills?category=")
    assert len(response.json()) == 1
