"""
HTTP surface: head markup, inventory and the public directory.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from modekit.adapters.fs import FileSystemStore
from modekit.api.main import create_app
from modekit.app_shell.config import Settings
from modekit.components.build import BuildInput, run_build


def build_project(settings: Settings) -> None:
    inp = BuildInput(
        intents_path=settings.intents_path,
        modes_dir=settings.modes_dir,
        schema_path=settings.schema_path,
        tokens_scss_path=settings.tokens_scss_path,
        public_dir=settings.public_dir,
        inventory_path=settings.inventory_path,
    )
    run_build(inp, fs=FileSystemStore(settings.root))


@pytest.fixture
def client(sample_project: Settings) -> TestClient:
    build_project(sample_project)
    return TestClient(create_app(sample_project))


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "modekit"}


class TestHeadRoute:
    def test_default_mode(self, client: TestClient) -> None:
        response = client.get("/modes/head")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert '<link rel="stylesheet" title="light" href="/public/_light.css">' in response.text
        assert "X-Modes-Omitted" not in response.headers

    def test_preload_modes(self, client: TestClient) -> None:
        response = client.get("/modes/head", params=[("preload", "dark"), ("preload", "code")])

        assert 'href="/public/_dark.css"' in response.text
        assert 'href="/public/_code.css"' in response.text
        assert "_light.css" not in response.text
        assert 'src="/public/_mode-observer.js"' in response.text

    def test_unknown_mode_omitted(self, client: TestClient) -> None:
        response = client.get("/modes/head", params=[("preload", "sepia"), ("preload", "dark")])

        assert response.status_code == 200
        assert "sepia" not in response.text.split("<style")[0]
        assert response.headers["X-Modes-Omitted"] == "sepia"


class TestInventoryRoute:
    def test_inventory(self, client: TestClient) -> None:
        response = client.get("/modes/inventory")

        assert response.status_code == 200
        data = response.json()
        assert [entry["mode"] for entry in data] == ["code", "dark", "light"]
        assert data[1]["name"] == "Dark"
        assert all("css" not in entry for entry in data)


class TestPublicFiles:
    def test_stylesheet_served(self, client: TestClient) -> None:
        response = client.get("/public/_dark.css")

        assert response.status_code == 200
        assert response.text.startswith('[data-mode~="dark"] {')

    def test_bundle_served(self, client: TestClient) -> None:
        response = client.get("/public/_mode-observer.js")

        assert response.status_code == 200
        assert "data-preload" in response.text


class TestNonLatinModes:
    def test_non_latin_mode_omitted(self, client: TestClient) -> None:
        response = client.get("/modes/head", params={"preload": "暗"})

        assert response.status_code == 200
        assert "<link" not in response.text
        assert response.headers["X-Modes-Omitted"] == "%E6%9A%97"

    def test_mixed_modes(self, client: TestClient) -> None:
        response = client.get("/modes/head", params=[("preload", "dark"), ("preload", "a,b")])

        assert 'href="/public/_dark.css"' in response.text
        assert response.headers["X-Modes-Omitted"] == "a%2Cb"


class TestMissingInventory:
    """Before the first build both routes answer 503."""

    def test_head_unavailable(self, project: Settings) -> None:
        response = TestClient(create_app(project)).get("/modes/head")

        assert response.status_code == 503
        assert "modekit build" in response.json()["detail"]

    def test_inventory_unavailable(self, project: Settings) -> None:
        response = TestClient(create_app(project)).get("/modes/inventory")

        assert response.status_code == 503

    def test_available_after_build(self, project: Settings) -> None:
        client = TestClient(create_app(project))
        assert client.get("/modes/head").status_code == 503

        build_project(project)
        response = client.get("/modes/head", params={"preload": "dark"})

        assert response.status_code == 200
        assert 'href="/public/_dark.css"' in response.text
