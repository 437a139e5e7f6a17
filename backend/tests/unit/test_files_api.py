import pytest
from fastapi.testclient import TestClient

from backend.src.api.main import app
from backend.src.api.routes.files import get_library_service
from backend.src.services.config import AppConfig
from backend.src.services.library import LibraryService


@pytest.fixture
def client(library_config: AppConfig):
    app.dependency_overrides[get_library_service] = lambda: LibraryService(config=library_config)
    yield TestClient(app)
    app.dependency_overrides = {}


def test_tree_returns_grouped_sources(client: TestClient) -> None:
    response = client.get("/api/tree")

    assert response.status_code == 200
    data = response.json()
    assert [group["name"] for group in data] == ["Content", "Agents"]
    welcome = data[0]["children"][0]["children"][0]
    assert welcome["path"] == "content/notes/welcome"
    assert welcome["kind"] == "file"
    assert "children" not in welcome


def test_list_files_excludes_content(client: TestClient) -> None:
    response = client.get("/api/files")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 4
    assert all("content" not in item for item in data)
    assert {item["path"] for item in data} >= {"content/overview", "agents/skills/config"}


def test_list_files_limit(client: TestClient) -> None:
    assert len(client.get("/api/files", params={"limit": 1}).json()) == 1


def test_list_files_rejects_bad_limit(client: TestClient) -> None:
    response = client.get("/api/files", params={"limit": 0})

    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_get_file_by_prefixed_path(client: TestClient) -> None:
    response = client.get("/api/files/agents/skills/config")

    assert response.status_code == 200
    data = response.json()
    assert data["file"]["slug"] == "skills/config"
    assert data["file"]["source"] == "agents"
    assert data["file"]["file_name"] == "config.json"
    assert data["file"]["content"] == '{"name":"memory"}'
    assert data["expanded_paths"] == ["agents", "agents/skills", "agents/skills/config"]


def test_get_file_unprefixed(client: TestClient) -> None:
    response = client.get("/api/files/overview")

    assert response.status_code == 200
    assert response.json()["file"]["title"] == "Overview"


def test_missing_file_returns_not_found_envelope(client: TestClient) -> None:
    response = client.get("/api/files/unknown/file")

    assert response.status_code == 404
    assert response.json() == {
        "error": "not_found",
        "message": "Document not found: unknown/file",
        "detail": {"path": "unknown/file"},
    }


def test_sources_report_existence(client: TestClient) -> None:
    data = client.get("/api/sources").json()

    assert [(item["source_id"], item["label"], item["exists"]) for item in data] == [
        ("content", "Content", True),
        ("agents", "Agents", True),
    ]


def test_unexpected_errors_use_internal_error_envelope() -> None:
    class BrokenLibrary:
        def combined_tree(self):
            raise RuntimeError("disk exploded")

    app.dependency_overrides[get_library_service] = lambda: BrokenLibrary()
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/api/tree")
    finally:
        app.dependency_overrides = {}

    assert response.status_code == 500
    assert response.json()["error"] == "internal_error"


def test_health() -> None:
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_overlong_path_is_not_found(client: TestClient) -> None:
    response = client.get("/api/files/" + "a" * 300)

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"
