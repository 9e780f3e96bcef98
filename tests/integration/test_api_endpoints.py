"""
Integration tests for the nn_infer HTTP API.
"""

import math

import pytest
from fastapi.testclient import TestClient

from nn_infer.api.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


class TestServiceEndpoints:
    """Test root and health endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "nn_infer API"
        assert data["endpoints"]["forward"] == "/v1/models/forward"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_process_time_header(self, client):
        response = client.get("/health")
        assert "X-Process-Time" in response.headers


class TestModelTypeEndpoints:
    """Test model type listing."""

    def test_list_model_types(self, client):
        response = client.get("/v1/models")

        assert response.status_code == 200
        data = response.json()
        assert [d["type_id"] for d in data] == ["linear", "logistic", "multiclass", "mlp"]
        assert data[2]["shape"] == ["input_size", "num_classes"]

    def test_get_model_type(self, client):
        response = client.get("/v1/models/mlp")

        assert response.status_code == 200
        assert response.json() == {
            "type_id": "mlp",
            "shape": ["input_size", "hidden_size", "output_size"]
        }

    def test_get_unknown_model_type(self, client):
        assert client.get("/v1/models/bogus").status_code == 404


class TestForwardEndpoint:
    """Test the forward pass endpoint."""

    def test_linear_forward(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "linear",
            "shape": [3],
            "parameters": [0.5, 0.3, 0.2, 0.1],
            "input": [1.0, 2.0, -0.5]
        })

        assert response.status_code == 200
        data = response.json()
        assert data["model_type"] == "Linear Regression"
        assert data["input_size"] == 3
        assert data["output_size"] == 1
        assert data["parameter_count"] == 4
        assert data["output"] == pytest.approx([1.1])
        assert data["inference_time_ms"] >= 0

    def test_zero_initialized_when_parameters_omitted(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "multiclass",
            "shape": [2, 4],
            "input": [1.0, 2.0]
        })

        assert response.status_code == 200
        assert response.json()["output"] == pytest.approx([0.25] * 4)

    def test_mlp_forward(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "mlp",
            "shape": [2, 3, 2],
            "parameters": [0.0, 1.0, 0.0, 1.0, 0.0, 0.0, -1.0, 0.0, 0.0,
                           0.0, 1.0, 2.0, 0.0, 0.0, 0.0, 0.5, -0.5],
            "input": [3.0, 5.0]
        })

        assert response.status_code == 200
        assert response.json()["output"] == pytest.approx([6.5, 3.5])

    def test_logistic_forward(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "logistic",
            "shape": [2],
            "parameters": [1.2, -0.8, 0.5],
            "input": [0.8, -0.3]
        })

        assert response.status_code == 200
        assert response.json()["output"] == pytest.approx([1.0 / (1.0 + math.exp(-1.7))])

    def test_unknown_model_type(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "bogus",
            "shape": [2],
            "input": [1.0, 2.0]
        })

        assert response.status_code == 404
        assert "bogus" in response.json()["detail"]

    def test_wrong_arity(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "linear",
            "shape": [2, 3],
            "input": [1.0, 2.0]
        })

        assert response.status_code == 422
        assert "expects shape" in response.json()["detail"]

    def test_parameter_size_mismatch(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "linear",
            "shape": [3],
            "parameters": [1.0, 2.0],
            "input": [1.0, 2.0, 3.0]
        })

        assert response.status_code == 422
        assert response.json()["detail"] == "Parameter size mismatch: expected 4, got 2"

    def test_input_size_mismatch(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "linear",
            "shape": [3],
            "input": [1.0]
        })

        assert response.status_code == 422
        assert "Input size mismatch" in response.json()["detail"]

    def test_oversized_shape_rejected(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "mlp",
            "shape": [100000, 100000, 1],
            "input": [1.0]
        })

        assert response.status_code == 422
        assert "must not exceed 1024" in str(response.json()["detail"])

    def test_largest_allowed_shape(self, client):
        response = client.post("/v1/models/forward", json={
            "type_id": "linear",
            "shape": [1024],
            "input": [1.0] * 1024
        })

        assert response.status_code == 200
        assert response.json()["output"] == [0.0]

    def test_missing_input(self, client):
        response = client.post("/v1/models/forward", json={"type_id": "linear", "shape": [3]})
        assert response.status_code == 422
