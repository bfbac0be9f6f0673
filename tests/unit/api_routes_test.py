"""Tests for the FastAPI routes against a fake source tree."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from unreal_index.api.app import create_app
from unreal_index.api.dependencies import get_index
from unreal_index.core.errors import UnrealIndexError
from unreal_index.core.index import ClassIndex


@pytest.fixture
def index() -> ClassIndex:
    return ClassIndex()


@pytest.fixture
def client(index: ClassIndex) -> TestClient:
    app = create_app()

    async def _override() -> AsyncIterator[ClassIndex]:
        yield index

    app.dependency_overrides[get_index] = _override
    return TestClient(app)


@pytest.fixture
def configured(client: TestClient, engine_root: Path) -> TestClient:
    resp = client.put("/roots", json={"engine_path": str(engine_root)})
    assert resp.status_code == 200, resp.text
    return client


class TestRootRoute:
    def test_root_returns_discovery(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        body = resp.json()
        assert body["meta"]["title"] == "Unreal Index API"
        assert "classes" in body["links"]
        assert "api-reference" in body["links"]


class TestHealthRoutes:
    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_liveness(self, client: TestClient) -> None:
        assert client.get("/healthz/live").status_code == 200

    def test_readiness_unconfigured(self, client: TestClient) -> None:
        resp = client.get("/healthz/ready")
        assert resp.status_code == 503
        assert resp.json() == {"status": "degraded", "index": "unconfigured"}

    def test_readiness_configured(self, configured: TestClient) -> None:
        resp = configured.get("/healthz/ready")
        assert resp.status_code == 200
        assert resp.json()["index"] == "configured"


class TestRootsRoute:
    def test_configure(self, client: TestClient, engine_root: Path, custom_root: Path) -> None:
        resp = client.put("/roots", json={"engine_path": str(engine_root), "custom_path": str(custom_root)})
        assert resp.status_code == 200
        assert resp.json() == {
            "custom_root": str(custom_root.resolve()),
            "engine_root": str(engine_root.resolve()),
        }

    def test_invalid_path(self, client: TestClient, tmp_path: Path) -> None:
        resp = client.put("/roots", json={"engine_path": str(tmp_path / "missing")})
        assert resp.status_code == 400
        assert resp.json()["error"] == "InvalidPathError"

    def test_invalid_engine_layout(self, client: TestClient, tmp_path: Path) -> None:
        resp = client.put("/roots", json={"engine_path": str(tmp_path)})
        assert resp.status_code == 400
        assert resp.json()["error"] == "InvalidEnginePathError"


class TestClassRoutes:
    def test_unconfigured(self, client: TestClient) -> None:
        resp = client.get("/classes/AActor")
        assert resp.status_code == 409
        assert resp.json()["error"] == "NotInitializedError"

    def test_get_class(self, configured: TestClient) -> None:
        resp = configured.get("/classes/AActor")
        assert resp.status_code == 200
        body = resp.json()
        assert body["name"] == "AActor"
        assert body["superclass_names"] == ["UObject"]
        assert body["definition_line"] == 7

    def test_class_not_found(self, configured: TestClient) -> None:
        resp = configured.get("/classes/ANope")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Class not found: ANope"

    def test_hierarchy(self, configured: TestClient) -> None:
        resp = configured.get("/classes/AActor/hierarchy")
        assert resp.status_code == 200
        body = resp.json()
        assert body["superclasses"][0]["class_name"] == "UObject"
        assert body["superclasses"][0]["superclasses"][0]["class_name"] == "UObjectBaseUtility"

    def test_hierarchy_without_interfaces(self, configured: TestClient) -> None:
        resp = configured.get("/classes/USceneComponent/hierarchy", params={"include_interfaces": False})
        assert resp.json()["interfaces"] == []


class TestSearchRoutes:
    def test_references(self, configured: TestClient) -> None:
        resp = configured.get("/references/UObject", params={"kind": "class"})
        assert resp.status_code == 200
        assert {Path(m["file"]).name for m in resp.json()} == {"Actor.h", "Object.h"}

    def test_references_rejects_unknown_kind(self, configured: TestClient) -> None:
        resp = configured.get("/references/UObject", params={"kind": "macro"})
        assert resp.status_code == 422

    def test_search(self, configured: TestClient) -> None:
        resp = configured.get("/search", params={"q": "generated_body", "file_pattern": "*.h"})
        assert resp.status_code == 200
        assert len(resp.json()) == 2

    def test_search_invalid_regex(self, configured: TestClient) -> None:
        resp = configured.get("/search", params={"q": "["})
        assert resp.status_code == 400
        assert resp.json()["error"] == "InvalidQueryError"

    def test_search_unconfigured(self, client: TestClient) -> None:
        assert client.get("/search", params={"q": "x"}).status_code == 409


class TestReferenceRoutes:
    def test_patterns(self, client: TestClient) -> None:
        resp = client.post("/patterns", json={"content": 'UPROPERTY(Category = "A")\nint32 Ammo;\n'})
        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 1
        assert body[0]["file"] == "<inline>"
        assert body[0]["pattern"]["name"] == "UPROPERTY Macro"

    def test_practices(self, client: TestClient) -> None:
        resp = client.get("/practices/Events")
        assert resp.status_code == 200
        assert resp.json()["concept"] == "Events"

    def test_unknown_practice(self, client: TestClient) -> None:
        assert client.get("/practices/Nope").status_code == 404

    def test_subsystem_missing_dir(self, configured: TestClient) -> None:
        resp = configured.get("/subsystems/Physics")
        assert resp.status_code == 404
        assert resp.json()["error"] == "SubsystemDirectoryNotFoundError"

    def test_unknown_subsystem(self, configured: TestClient) -> None:
        assert configured.get("/subsystems/Scripting").status_code == 404

    def test_api_reference(self, configured: TestClient) -> None:
        assert configured.get("/api-reference", params={"q": "actor"}).json() == []

        configured.get("/classes/AActor")
        resp = configured.get("/api-reference", params={"q": "actor"})
        assert resp.status_code == 200
        body = resp.json()
        assert body[0]["reference"]["class_name"] == "AActor"
        assert body[0]["relevance"] == 17


class TestErrorHandling:
    def test_unmapped_index_error_is_500(self) -> None:
        app = create_app()

        @app.get("/boom")
        async def boom() -> None:
            raise UnrealIndexError("index exploded")

        resp = TestClient(app).get("/boom")
        assert resp.status_code == 500
        assert resp.json() == {"error": "UnrealIndexError", "detail": "index exploded"}
