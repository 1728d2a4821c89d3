"""Tests for HTTP endpoints."""

from fastapi.testclient import TestClient


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_search_endpoint_filters_by_type(client: TestClient) -> None:
    response = client.get("/equivalences/search", params={"q": "beurre", "type": "recipe"})

    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "beurre"
    assert len(data["results"]) >= 2
    assert {item["type"] for item in data["results"]} == {"recipe"}
    first = data["results"][0]
    assert first["ingredient"] == "beurre"
    assert first["alternatives"][0]["name"] == "Huile végétale neutre"
    assert first["alternatives"][1]["ideal_for"] == "Cakes, muffins, gâteaux moelleux"


def test_search_endpoint_blank_query(client: TestClient) -> None:
    response = client.get("/equivalences/search", params={"q": "   "})

    assert response.status_code == 200
    assert response.json()["results"] == []


def test_search_endpoint_rejects_unknown_type(client: TestClient) -> None:
    response = client.get("/equivalences/search", params={"q": "beurre", "type": "x"})

    assert response.status_code == 422


def test_ingredient_endpoint_exact_match(client: TestClient) -> None:
    response = client.get("/equivalences/ingredient/steak haché", params={"type": "recipe"})

    assert response.status_code == 200
    results = response.json()["results"]
    assert [item["ingredient"] for item in results] == ["steak haché"]


def test_goals_endpoint_lists_in_order(client: TestClient) -> None:
    response = client.get("/goals")

    assert response.status_code == 200
    goals = response.json()["goals"]
    assert len(goals) == 10
    assert goals[0]["id"] == "weight-loss"
    assert goals[-1]["id"] == "sleep-stress"


def test_goal_detail_has_every_category(client: TestClient) -> None:
    response = client.get("/goals/diabetes")

    assert response.status_code == 200
    data = response.json()
    assert data["warning"]
    assert data["key_principles"]
    assert [section["id"] for section in data["categories"]] == [
        "féculents",
        "protéines",
        "matières-grasses",
        "boissons",
        "snacks",
        "desserts",
        "général",
    ]


def test_goal_search_endpoint(client: TestClient) -> None:
    response = client.get("/goals/weight-loss/equivalences", params={"q": "riz"})

    assert response.status_code == 200
    sections = {section["id"]: section for section in response.json()["categories"]}
    assert len(sections) == 7
    assert [entry["base_food"] for entry in sections["féculents"]["equivalences"]] == [
        "Riz blanc"
    ]
    assert sections["général"]["label"] == "Conseils généraux"
    assert all(
        not section["equivalences"]
        for category, section in sections.items()
        if category != "féculents"
    )


def test_goal_categories_endpoint(client: TestClient) -> None:
    response = client.get("/goals/muscle-gain/categories")

    assert response.status_code == 200
    assert [category["id"] for category in response.json()["categories"]] == [
        "féculents",
        "protéines",
        "snacks",
    ]


def test_unknown_goal_is_rejected(client: TestClient) -> None:
    response = client.get("/goals/keto/equivalences")

    assert response.status_code == 422
