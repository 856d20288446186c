"""Tests for the slip printing API."""

from conftest import FakeSpooler
from slipprint.printing import PrintDispatcher

PAYLOAD = {"data": [[1, "Test Item 1", 5], [2, "चिया पत्ती", 2]]}


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Server is running"
        assert "timestamp" in body
        assert body["version"]


class TestPrinters:
    """Tests for GET /printers."""

    def test_lists_printers(self, client):
        response = client.get("/printers")
        assert response.status_code == 200
        assert response.json() == {"success": True, "printers": ["Office"], "count": 1}

    def test_unreachable_spooler(self, client, dispatcher):
        """Enumeration failure shows up as an empty list, not an error."""
        dispatcher.directory.backend.list_error = True
        response = client.get("/printers")
        assert response.status_code == 200
        assert response.json()["count"] == 0


class TestPrint:
    """Tests for POST /print."""

    def test_prints_slip(self, client, spooler):
        """A valid payload is rendered and sent to the spooler."""
        response = client.post("/print", json=PAYLOAD)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["job_id"] == "Office-42"
        assert body["backend"] == "native_spooler"
        assert body["fallback_reason"] is None

        text = spooler.submitted[0][0].decode("utf-8")
        assert text.startswith("Test Org\n")
        assert "चिया पत्ती" in text

    def test_falls_back_to_mock(self, client, dispatcher):
        """Spooler failures under auto still succeed, reporting mock."""
        dispatcher.native.submit_error = "lp: printer is offline"
        response = client.post("/print", json=PAYLOAD)

        assert response.status_code == 200
        body = response.json()
        assert body["backend"] == "mock"
        assert body["job_id"].startswith("mock_")
        assert "offline" in body["fallback_reason"]

    def test_explicit_backend_failure_is_500(self, client, print_config):
        """Explicit method failures become JSON errors."""
        from app.dependencies import get_dispatcher
        from app.main import app

        failing = PrintDispatcher(
            print_config,
            native=FakeSpooler(printers=["Office"], submit_error="lp: printer is offline"),
            default_method="native",
        )
        app.dependency_overrides[get_dispatcher] = lambda: failing

        response = client.post("/print", json=PAYLOAD)
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "lp: printer is offline"}

    def test_missing_data(self, client):
        response = client.post("/print", json={})
        assert response.status_code == 422

    def test_empty_data(self, client, spooler):
        response = client.post("/print", json={"data": []})
        assert response.status_code == 422
        assert spooler.submitted == []

    def test_data_not_a_list(self, client):
        response = client.post("/print", json={"data": "tea"})
        assert response.status_code == 422

    def test_malformed_row(self, client):
        response = client.post("/print", json={"data": [[1, "Tea"]]})
        assert response.status_code == 422

    def test_sequence_number_must_be_positive(self, client):
        response = client.post("/print", json={"data": [[0, "Tea", 1]]})
        assert response.status_code == 422


class TestPreview:
    """Tests for POST /preview."""

    def test_preview_does_not_print(self, client, spooler):
        response = client.post("/preview", json=PAYLOAD)

        assert response.status_code == 200
        body = response.json()
        assert body["lines"][0] == "Test Org"
        assert body["lines"][2] == "-" * 32
        assert body["text"].endswith("-" * 32 + "\n")
        assert spooler.submitted == []


class TestPayloadTest:
    """Tests for GET /payload-test."""

    def test_sample_payload(self, client):
        response = client.get("/payload-test")
        assert response.status_code == 200
        data = response.json()["payload"]["data"]
        assert data[0] == [1, "Test Item 1", 5]
        assert any("चिया" in row[1] for row in data)

    def test_sample_payload_is_printable(self, client):
        """The sample round-trips through /print."""
        payload = client.get("/payload-test").json()["payload"]
        assert client.post("/print", json=payload).status_code == 200
