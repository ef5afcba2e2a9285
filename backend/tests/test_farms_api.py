from datetime import date, timedelta
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from dependencies import get_farm_service
from exceptions import DatabaseError
from services.interfaces import IFarmService

BASE = "/api/v1/farms"


def _create(client, **overrides):
    payload = {"name": "Sunrise", "location": "Valencia"}
    payload.update(overrides)
    response = client.post(BASE, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_get_delete_scenario(client):
    created = _create(client)
    assert created["id"] == 1
    assert created["name"] == "Sunrise"
    assert created["location"] == "Valencia"

    response = client.get(f"{BASE}/1")
    assert response.status_code == 200
    assert response.json() == created

    response = client.delete(f"{BASE}/1")
    assert response.status_code == 204
    assert response.content == b""

    response = client.get(f"{BASE}/1")
    assert response.status_code == 404


def test_list_all_empty_and_populated(client):
    response = client.get(BASE)
    assert response.status_code == 200
    assert response.json() == []

    first = _create(client, name="A")
    second = _create(client, name="B")
    assert client.get(BASE).json() == [first, second]


def test_create_echoes_all_fields(client):
    created = _create(client, area=12.5, creation_date="2021-03-15")
    assert created == {
        "id": 1,
        "name": "Sunrise",
        "location": "Valencia",
        "area": 12.5,
        "area_formatted": "12.50 ha",
        "creation_date": "2021-03-15",
    }


def test_get_returns_matching_entity(client):
    farms = [_create(client, name=f"Farm {i}") for i in range(3)]
    for farm in farms:
        response = client.get(f"{BASE}/{farm['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == farm["id"]


def test_get_absent_id_is_404(client):
    response = client.get(f"{BASE}/99")
    assert response.status_code == 404
    assert response.json() == {"detail": "Farm with id 99 not found"}


@pytest.mark.parametrize("payload", [
    {},
    {"name": "Sunrise"},
    {"name": "   ", "location": "Valencia"},
    {"name": "Sunrise", "location": "Valencia", "area": 0},
    {"name": "Sunrise", "location": "Valencia", "area": -3},
    {"name": "x" * 256, "location": "Valencia"},
    {"name": "Sunrise", "location": "Valencia", "creation_date": (date.today() + timedelta(days=1)).isoformat()},
])
def test_create_invalid_payload_is_400(client, payload):
    response = client.post(BASE, json=payload)
    assert response.status_code == 400
    assert "detail" in response.json()
    assert client.get(BASE).json() == []


def test_malformed_json_is_400(client):
    response = client.post(BASE, content="{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400


@pytest.mark.parametrize("area", ["1e999", "-1e999", "NaN", "Infinity"])
def test_non_finite_area_is_400(client, area):
    body = f'{{"name": "Sunrise", "location": "Valencia", "area": {area}}}'
    headers = {"Content-Type": "application/json"}

    response = client.post(BASE, content=body, headers=headers)
    assert response.status_code == 400
    assert "detail" in response.json()
    assert client.get(BASE).json() == []

    created = _create(client, area=10)
    response = client.put(f"{BASE}/{created['id']}", content=body, headers=headers)
    assert response.status_code == 400
    assert client.get(f"{BASE}/{created['id']}").json()["area"] == 10


def test_non_integer_id_is_400(client):
    assert client.get(f"{BASE}/abc").status_code == 400


def test_update(client):
    created = _create(client, area=10)
    response = client.put(f"{BASE}/{created['id']}", json={"name": "Sunrise II", "location": "Castellon", "area": 15})
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["name"] == "Sunrise II"
    assert body["location"] == "Castellon"
    assert body["area"] == 15
    assert client.get(f"{BASE}/{created['id']}").json() == body


def test_update_absent_id_is_404_and_creates_nothing(client):
    response = client.put(f"{BASE}/5", json={"name": "Ghost", "location": "Nowhere"})
    assert response.status_code == 404
    assert client.get(BASE).json() == []


def test_update_invalid_payload_is_400(client):
    created = _create(client)
    response = client.put(f"{BASE}/{created['id']}", json={"name": "", "location": "Valencia"})
    assert response.status_code == 400
    assert client.get(f"{BASE}/{created['id']}").json() == created


def test_delete_absent_id_is_404(client):
    assert client.delete(f"{BASE}/3").status_code == 404


def test_search(client):
    sunrise = _create(client, name="Sunrise", location="Valencia")
    sunset = _create(client, name="Sunset", location="Murcia")
    grove = _create(client, name="Orange Grove", location="Valencia")

    response = client.get(f"{BASE}/search")
    assert response.status_code == 200
    assert response.json() == client.get(BASE).json()

    assert client.get(f"{BASE}/search", params={"name": "sun"}).json() == [sunrise, sunset]
    assert client.get(f"{BASE}/search", params={"location": "Valencia"}).json() == [sunrise, grove]
    assert client.get(f"{BASE}/search", params={"name": "Sunrise", "location": "Valencia"}).json() == [sunrise]
    assert client.get(f"{BASE}/search", params={"name": "Sunrise", "location": "Murcia"}).json() == []


def test_search_overlong_filter_is_400(client):
    response = client.get(f"{BASE}/search", params={"name": "x" * 256})
    assert response.status_code == 400


class _FailingFarmService(IFarmService):
    def __init__(self, error):
        self.error = error

    def find_all(self):
        raise self.error

    def find_by_id(self, farm_id):
        raise self.error

    def create(self, dto):
        raise self.error

    def update(self, farm_id, dto):
        raise self.error

    def delete(self, farm_id):
        raise self.error

    def find_farms_by_criteria(self, name=None, location=None):
        raise self.error


@pytest.mark.parametrize("method, path", [
    ("get", BASE),
    ("get", f"{BASE}/1"),
    ("delete", f"{BASE}/1"),
    ("get", f"{BASE}/search"),
])
def test_unexpected_service_failure_is_500(app, client, method, path):
    app.dependency_overrides[get_farm_service] = lambda: _FailingFarmService(RuntimeError("boom"))
    response = getattr(client, method)(path)
    assert response.status_code == 500
    assert "boom" not in response.json()["detail"]


def test_database_error_is_500(app, client):
    app.dependency_overrides[get_farm_service] = lambda: _FailingFarmService(
        DatabaseError("create_farm", "connection lost")
    )
    response = client.post(BASE, json={"name": "Sunrise", "location": "Valencia"})
    assert response.status_code == 500
    assert response.json()["detail"] == "Database operation failed: connection lost"


def test_database_failure_detail_hides_driver_text(client):
    error = OperationalError("INSERT INTO farms (name) VALUES (?)", {}, Exception("disk I/O error"))
    with patch.object(Session, "commit", side_effect=error):
        response = client.post(BASE, json={"name": "Sunrise", "location": "Valencia"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Database operation failed: Could not create farm"}
    assert client.get(BASE).json() == []


def test_request_id_header_is_echoed(client):
    response = client.get(BASE, headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"
    assert client.get(BASE).headers["X-Request-ID"]


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_id_beyond_integer_column_range_is_404(client, method):
    _create(client)
    path = f"{BASE}/{2 ** 63}"
    if method == "put":
        response = client.put(path, json={"name": "Sunrise", "location": "Valencia"})
    else:
        response = getattr(client, method)(path)
    assert response.status_code == 404
    assert len(client.get(BASE).json()) == 1
