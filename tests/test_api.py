"""
Tests for the HTTP service.
"""

import structlog
from fastapi.testclient import TestClient

from calc_engine import __version__, parse_expression
from calc_engine.api import app
from calc_engine.log import configure_logging


class TestHealth:

    def setup_method(self):
        self.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}

    def test_config_lists_functions(self):
        data = self.client.get("/api/v1/config").json()
        assert "sqrt" in data["functions"]
        assert data["operators"] == ["*", "+", "-", "/"]


class TestEvaluateEndpoint:

    def setup_method(self):
        self.client = TestClient(app)

    def test_success(self):
        response = self.client.post("/api/v1/evaluate", json={"expression": "2 + 3 * 4"})
        assert response.status_code == 200
        data = response.json()
        assert data["output"] == "Result: 14.0"
        assert data["value"] == 14.0
        assert data["error"] is None

    def test_failure_is_part_of_result(self):
        response = self.client.post("/api/v1/evaluate", json={"expression": "5 / 0"})
        assert response.status_code == 200
        data = response.json()
        assert data["output"] == "Error: Division by zero"
        assert data["value"] is None
        assert data["error"] == "division_by_zero"

    def test_missing_expression(self):
        response = self.client.post("/api/v1/evaluate", json={})
        assert response.status_code == 422


class TestCalcEndpoint:

    def setup_method(self):
        self.client = TestClient(app)

    def test_divide(self):
        response = self.client.post("/api/v1/calc", json={"a": 8, "op": "/", "b": 4})
        assert response.status_code == 200
        assert response.json() == {"result": 2.0}

    def test_divide_by_zero(self):
        response = self.client.post("/api/v1/calc", json={"a": 1, "op": "/", "b": 0})
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "division_by_zero"

    def test_invalid_operator(self):
        response = self.client.post("/api/v1/calc", json={"a": 1, "op": "#", "b": 2})
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "invalid_operator"

    def test_overflow_is_rejected(self):
        response = self.client.post("/api/v1/calc", json={"a": 1e308, "op": "*", "b": 10})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "domain_error"
        assert detail["message"] == "Result is out of range"


class TestLogging:

    def teardown_method(self):
        configure_logging()

    def test_startup_configures_quiet_logging(self, capsys):
        structlog.reset_defaults()
        with TestClient(app):
            assert structlog.is_configured()
            assert parse_expression("1+1") == "Result: 2.0"
        captured = capsys.readouterr()
        assert "Received expression" not in captured.out
        assert "Received expression" not in captured.err
