from datetime import datetime

from fastapi.testclient import TestClient

from clinic.config import Settings
from clinic.main import create_app


class FixedClock:
    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now


NOW = datetime(2024, 1, 10, 12, 0)


def make_client(seed: bool = True) -> TestClient:
    app = create_app(Settings(SEED_DEMO_DATA=seed, LOG_LEVEL="WARNING"), clock=FixedClock(NOW))
    return TestClient(app)


def test_health():
    client = make_client()
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    # demo data: 6 doctors added, 1 removed; 4 patients added, 1 removed
    assert body["data"]["doctors"] == 5
    assert body["data"]["patients"] == 3
    assert body["data"]["appointments"] == 3


def test_empty_registry_without_seed():
    client = make_client(seed=False)
    assert client.get("/doctors/").json() == []
    assert client.get("/appointments/").json() == []


def test_search_doctors_by_specialization():
    client = make_client()
    resp = client.get("/doctors/", params={"specialization": "pediatrician"})
    assert resp.status_code == 200
    names = [d["full_name"] for d in resp.json()]
    assert names == ["Williams Michael", "Peterson Will"]


def test_doctor_not_found_uses_error_envelope():
    client = make_client()
    resp = client.get("/doctors/1")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "data": None, "error": "Doctor with ID 1 was not found."}


def test_doctor_appointments_in_range():
    client = make_client()
    resp = client.get(
        "/doctors/6/appointments",
        params={"start": "2024-01-11T00:00:00", "end": "2024-01-11T23:59:59"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 1
    assert body[0]["appointment_date"] == "2024-01-11T11:00:00"
    assert body[0]["patient_name"] == "Johnson Anna"


def test_doctor_appointments_range_needs_both_bounds():
    client = make_client()
    resp = client.get("/doctors/6/appointments", params={"start": "2024-01-11T00:00:00"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_patient_search_and_visits():
    client = make_client()
    resp = client.get("/patients/", params={"last_name": "taylor", "first_name": "chris"})
    assert [p["id"] for p in resp.json()] == [4]

    visits = client.get("/patients/1/visits").json()
    assert [v["diagnosis"]["code"] for v in visits] == ["J01", "I10", "R50"]
    assert client.get("/patients/2/visits").status_code == 404


def test_patient_appointments():
    client = make_client()
    body = client.get("/patients/4/appointments").json()
    assert [a["doctor_id"] for a in body] == [2, 4]


def test_appointments_at_exact_time_and_upcoming():
    client = make_client()
    at = client.get("/appointments/", params={"at": "2024-01-12T10:00:00"}).json()
    assert [a["doctor_name"] for a in at] == ["Jones Emily"]

    upcoming = client.get("/appointments/upcoming").json()
    assert [a["appointment_date"] for a in upcoming] == [
        "2024-01-11T11:00:00",
        "2024-01-12T10:00:00",
        "2024-01-13T14:00:00",
    ]


def test_doctor_appointments_range_accepts_utc_suffix():
    client = make_client()
    resp = client.get(
        "/doctors/6/appointments",
        params={"start": "2024-01-10T00:00:00Z", "end": "2024-01-14T00:00:00Z"},
    )
    assert resp.status_code == 200
    assert [a["appointment_date"] for a in resp.json()] == ["2024-01-11T11:00:00"]


def test_doctor_appointments_range_mixed_offsets():
    client = make_client()
    resp = client.get(
        "/doctors/6/appointments",
        params={"start": "2024-01-10T00:00:00", "end": "2024-01-14T00:00:00Z"},
    )
    assert resp.status_code == 200
    assert len(resp.json()) == 1


def test_appointments_at_time_with_offset():
    client = make_client()
    local = datetime(2024, 1, 12, 10, 0).astimezone()
    at = client.get("/appointments/", params={"at": local.isoformat()}).json()
    assert [a["doctor_name"] for a in at] == ["Jones Emily"]
