from __future__ import annotations

from collections.abc import Iterator
from typing import Any, cast

import pytest
from fastapi.testclient import TestClient

from esantiye.core.db import Database
from esantiye.main import create_app


@pytest.fixture
def database() -> Iterator[Database]:
    db = Database("sqlite://")
    yield db
    db.close()


@pytest.fixture
def client(database: Database) -> Iterator[TestClient]:
    with TestClient(create_app(database)) as test_client:
        yield test_client


def _create_project(client: TestClient, name: str) -> int:
    response = client.post("/api/projects", json={"name": name})
    assert response.status_code == 200, response.text
    data = cast(dict[str, Any], response.json())
    return cast(int, data["id"])


def _project_count(database: Database) -> int:
    row = database.query_one("SELECT COUNT(*) AS c FROM projects")
    assert row is not None
    return int(row["c"])


def test_create_project_returns_id_and_message(client: TestClient) -> None:
    response = client.post("/api/projects", json={"name": "Konut Bloğu A"})
    assert response.status_code == 200, response.text
    data = response.json()
    assert set(data) == {"id", "message"}
    assert isinstance(data["id"], int)
    assert data["message"]


def test_create_project_applies_defaults(client: TestClient, database: Database) -> None:
    project_id = _create_project(client, "Köprü")

    row = database.query_one("SELECT * FROM projects WHERE id = :id", {"id": project_id})
    assert row is not None
    assert row["name"] == "Köprü"
    assert row["status"] == "planning"
    assert row["progress"] == 0
    for column in (
        "location",
        "type",
        "priority",
        "start_date",
        "end_date",
        "budget",
        "duration",
        "description",
        "created_by",
    ):
        assert row[column] is None, column
    assert row["created_at"] is not None
    assert row["updated_at"] is not None


def test_extra_fields_are_not_persisted(client: TestClient, database: Database) -> None:
    response = client.post(
        "/api/projects",
        json={"name": "Okul", "location": "Ankara", "status": "active", "budget": 1e6},
    )
    assert response.status_code == 200, response.text

    row = database.query_one(
        "SELECT location, status, budget FROM projects WHERE id = :id",
        {"id": response.json()["id"]},
    )
    assert row == {"location": None, "status": "planning", "budget": None}


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"name": ""},
        {"name": None},
        {"name": False},
        {"name": 0},
        {"name": 0.0},
        {"location": "x"},
    ],
)
def test_create_project_without_name_is_rejected(
    client: TestClient, database: Database, body: dict[str, Any]
) -> None:
    response = client.post("/api/projects", json=body)
    assert response.status_code == 400, response.text
    assert "error" in response.json()
    assert _project_count(database) == 0


def test_create_project_without_body_is_rejected(
    client: TestClient, database: Database
) -> None:
    response = client.post("/api/projects")
    assert response.status_code == 400, response.text
    assert _project_count(database) == 0


@pytest.mark.parametrize("body", [[{"name": "A"}], "A", 5, True])
def test_create_project_with_non_object_body_is_rejected(
    client: TestClient, database: Database, body: Any
) -> None:
    response = client.post("/api/projects", json=body)
    assert response.status_code == 400, response.text
    assert "error" in response.json()
    assert _project_count(database) == 0


def test_list_projects_newest_first(client: TestClient) -> None:
    for name in ("A", "B", "C"):
        _create_project(client, name)

    response = client.get("/api/projects")
    assert response.status_code == 200, response.text
    names = [row["name"] for row in response.json()["data"]]
    assert names == ["C", "B", "A"]


def test_repeated_creates_produce_distinct_rows(client: TestClient) -> None:
    first = _create_project(client, "Aynı")
    second = _create_project(client, "Aynı")
    assert first != second

    data = client.get("/api/projects").json()["data"]
    assert [row["id"] for row in data] == [second, first]


def test_create_on_database_error_is_400(client: TestClient, database: Database) -> None:
    database.execute("DROP TABLE projects")

    response = client.post("/api/projects", json={"name": "Kayıp"})
    assert response.status_code == 400
    assert "projects" in response.json()["error"]

    response = client.get("/api/projects")
    assert response.status_code == 500
    assert "projects" in response.json()["error"]
