"""End-to-end tests for the ternexpand HTTP API."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient

from ternexpand.api.app import create_app
from ternexpand.core.config import TernExpandConfig


@pytest.fixture
def client(config: TernExpandConfig) -> TestClient:
    return TestClient(create_app(config))


@pytest.fixture
def strict_client(strict_config: TernExpandConfig) -> TestClient:
    return TestClient(create_app(strict_config))


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "style": "textmate"}


class TestExpand:
    def test_expand(self, client: TestClient) -> None:
        response = client.post("/expand", json={"signature": "fn(a, b) -> number", "name": "add"})
        assert response.status_code == 200
        body = response.json()
        assert body["snippet"] == "(${1:a}, ${2:b})"
        assert body["completion"] == "add(${1:a}, ${2:b})"
        assert body["tabstops"] == 2

    def test_expand_style_override(self, client: TestClient) -> None:
        response = client.post("/expand", json={"signature": "fn(a)", "style": "chocolat"})
        assert response.json()["snippet"] == '(%{1="a"})'

    def test_expand_non_function(self, client: TestClient) -> None:
        response = client.post("/expand", json={"signature": "number", "name": "length"})
        assert response.status_code == 200
        assert response.json()["snippet"] is None
        assert response.json()["completion"] == "length"

    def test_expand_malformed(self, client: TestClient) -> None:
        response = client.post("/expand", json={"signature": "fn(a) -> b -> c"})
        assert response.status_code == 200
        assert response.json()["error"] is not None

    def test_expand_malformed_strict(self, strict_client: TestClient) -> None:
        response = strict_client.post("/expand", json={"signature": "fn(a) -> b -> c"})
        assert response.status_code == 422
        assert response.json()["detail"]["message"] == "Return type assigned twice"

    def test_expand_invalid_style(self, client: TestClient) -> None:
        response = client.post("/expand", json={"signature": "fn(a)", "style": "vim"})
        assert response.status_code == 422


class TestBatch:
    def test_batch(self, client: TestClient) -> None:
        response = client.post(
            "/expand/batch",
            json={
                "items": [
                    {"name": "push", "type": "fn(newelt) -> number"},
                    {"name": "length", "type": "number"},
                ]
            },
        )
        assert response.status_code == 200
        assert [item["completion"] for item in response.json()] == ["push(${1:newelt})", "length"]


class TestParse:
    def test_parse(self, client: TestClient) -> None:
        response = client.post("/parse", json={"signature": "fn(i: number) -> fn() -> x"})
        assert response.status_code == 200
        assert response.json() == {
            "tree": {"args": ["i:number"], "ret": {"args": [], "ret": "x"}},
            "repr": "fn(i:number) -> fn() -> x",
        }

    def test_parse_empty(self, client: TestClient) -> None:
        response = client.post("/parse", json={"signature": ""})
        assert response.json() == {"tree": None, "repr": None}

    def test_parse_malformed(self, client: TestClient) -> None:
        response = client.post("/parse", json={"signature": "fn(a)) x"})
        assert response.status_code == 422
