"""
Tests for the HTTP API.
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

from server import app


@pytest.fixture
def client():
    return TestClient(app)


class TestEvaluate:

    def test_health(self, client):
        resp = client.get("/api/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_evaluate_strings(self, client):
        resp = client.post("/api/evaluate", json={"weight": "70", "height": "175", "age": "30"})

        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["result"]["bmi"] == 22.86
        assert body["result"]["category"] == "normal"
        assert body["result"]["age_group"] == "adult"
        assert body["category_label"] == "Normal Weight"
        assert body["suggestion"] == "You're there!"

    def test_evaluate_numbers(self, client):
        resp = client.post("/api/evaluate", json={"weight": 45, "height": 170, "age": 25})

        assert resp.status_code == 200, resp.text
        result = resp.json()["result"]
        assert result["category"] == "underweight"
        assert result["delta_kg"] == 8.5
        assert result["direction"] == "gain"

    def test_field_errors(self, client):
        resp = client.post("/api/evaluate", json={"weight": "", "height": "175", "age": "17.5"})

        assert resp.status_code == 422
        errors = resp.json()["errors"]
        assert set(errors) == {"weight", "age"}
        assert errors["weight"]["code"] == "empty"
        assert errors["age"]["code"] == "invalid_integer"

    def test_missing_body_fields(self, client):
        resp = client.post("/api/evaluate", json={})

        assert resp.status_code == 422
        assert set(resp.json()["errors"]) == {"weight", "height", "age"}

    def test_bool_is_not_a_number(self, client):
        resp = client.post("/api/evaluate", json={"weight": True, "height": "175", "age": "30"})

        assert resp.status_code == 422
        errors = resp.json()["errors"]
        assert set(errors) == {"weight"}
        assert errors["weight"]["code"] == "not_positive_number"

    def test_non_scalar_values(self, client):
        resp = client.post("/api/evaluate", json={"weight": [70], "height": {"cm": 175}, "age": [30]})

        assert resp.status_code == 422
        body = resp.json()
        assert body["detail"] == "Invalid measurement"
        assert body["errors"]["weight"]["code"] == "not_positive_number"
        assert body["errors"]["height"]["code"] == "not_positive_number"
        assert body["errors"]["age"]["code"] == "invalid_integer"


class TestValidateField:

    def test_invalid_age(self, client):
        resp = client.post("/api/validate/age", json={"value": "17.5"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["valid"] is False
        assert body["code"] == "invalid_integer"
        assert "min 2 years" in body["error"]

    def test_valid_weight(self, client):
        resp = client.post("/api/validate/weight", json={"value": "70"})

        assert resp.json() == {"field": "weight", "valid": True, "error": None, "code": None}

    def test_bool_age(self, client):
        resp = client.post("/api/validate/age", json={"value": False})

        assert resp.json()["code"] == "invalid_integer"

    def test_unknown_field(self, client):
        resp = client.post("/api/validate/bmi", json={"value": "20"})

        assert resp.status_code == 404


class TestAgeGroups:

    def test_list(self, client):
        resp = client.get("/api/age-groups")

        assert resp.status_code == 200
        groups = {g["group"]: g for g in resp.json()}
        assert set(groups) == {"child", "adult", "senior"}
        assert groups["adult"]["bmi_low"] == 18.5
        assert groups["child"]["max_age"] == 17
        assert groups["senior"]["max_age"] is None
        assert groups["senior"]["reference_ranges"][3]["range"] == "≥ 32"


class TestExport:

    def test_markdown(self, client):
        resp = client.post(
            "/api/evaluate/export/markdown",
            json={"weight": "90", "height": "170", "age": "70"},
        )

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/markdown")
        assert "# BMI Health Summary" in resp.text

    def test_json(self, client):
        resp = client.post(
            "/api/evaluate/export/json",
            json={"weight": "20", "height": "110", "age": "8"},
        )

        assert resp.status_code == 200
        assert json.loads(resp.text)["result"]["age_group"] == "child"

    def test_invalid_format(self, client):
        resp = client.post(
            "/api/evaluate/export/pdf",
            json={"weight": "70", "height": "175", "age": "30"},
        )

        assert resp.status_code == 400

    def test_export_invalid_input(self, client):
        resp = client.post(
            "/api/evaluate/export/json",
            json={"weight": "70", "height": "0", "age": "30"},
        )

        assert resp.status_code == 422
        assert resp.json()["errors"]["height"]["code"] == "not_positive_number"
