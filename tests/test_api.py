"""
Tests for the HTTP routes, run through FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from employee_api.caching.cache_context import CacheContext
from employee_api.main import create_app


@pytest.fixture
def client(test_settings, db_service, clock):
    """Create a client whose app runs over the seeded in-memory database."""
    app = create_app(
        test_settings,
        database=db_service,
        cache_context=CacheContext.from_settings(test_settings, clock=clock),
    )
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database_ready": True, "cache_ready": True}


def test_get_employee(client):
    response = client.get("/api/employees/1")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "John Smith"
    assert body["hire_date"] == "2020-01-15"


def test_get_employee_not_found(client):
    response = client.get("/api/employees/12345")

    assert response.status_code == 404


def test_repeated_lookup_hits_cache(client):
    """Test the second request for the same id is counted as a cache hit."""
    client.get("/api/employees/42")
    client.get("/api/employees/42")

    stats = client.get("/api/cache/stats").json()["caches"]["employee"]
    assert stats["requests"] == 2
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["current_size"] == 1


def test_search(client):
    response = client.get("/api/employees/search", params={"name": "john"})

    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [1, 2]


@pytest.mark.parametrize("params", [{}, {"name": ""}, {"name": "   "}])
def test_search_requires_name(client, params):
    response = client.get("/api/employees/search", params=params)

    assert response.status_code == 400


def test_count(client):
    assert client.get("/api/employees/count").json() == {"count": 6}


def test_departments(client):
    response = client.get("/api/departments")

    assert response.status_code == 200
    assert [d["name"] for d in response.json()] == ["Engineering", "Sales", "Research"]


def test_get_department(client):
    assert client.get("/api/departments/2").json()["name"] == "Sales"
    assert client.get("/api/departments/99").status_code == 404


def test_department_employees(client):
    response = client.get("/api/departments/2/employees")

    assert [e["id"] for e in response.json()] == [3, 4, 5]
    assert client.get("/api/departments/3/employees").json() == []


def test_employee_profile_report(client):
    response = client.get("/api/reports/employee-profile/42")

    assert response.status_code == 200
    body = response.json()
    assert body["employee"]["id"] == 42
    assert body["department"] is None
    assert client.get("/api/reports/employee-profile/12345").status_code == 404


def test_department_analytics_report(client):
    response = client.get("/api/reports/department-analytics/1")

    assert response.status_code == 200
    body = response.json()
    assert body["salary_statistics"]["employee_count"] == 2
    assert body["employees_by_hire_year"] == {"2020": 1, "2021": 1}
    assert client.get("/api/reports/department-analytics/99").status_code == 404


def test_company_overview(client):
    body = client.get("/api/dashboard/company-overview").json()

    assert body["total_employees"] == 6
    assert body["total_departments"] == 3


def test_cache_clear(client):
    client.get("/api/employees/1")

    response = client.post("/api/cache/clear")
    assert response.status_code == 200
    stats = client.get("/api/cache/stats").json()["caches"]["employee"]
    assert stats["current_size"] == 0
    assert stats["requests"] == 1

    client.post("/api/cache/clear", params={"reset_counters": "true"})
    stats = client.get("/api/cache/stats").json()["caches"]["employee"]
    assert stats["requests"] == 0


def test_storage_failure_returns_503(client, db_service):
    """Test a broken database surfaces as 503 instead of 404 or 500."""
    with db_service.engine.begin() as conn:
        conn.exec_driver_sql("DROP TABLE employees")

    response = client.get("/api/employees/1")

    assert response.status_code == 503
    body = response.json()
    assert body["error"] == "StorageError"
    assert body["details"]["operation"] == "find_by_id"
