"""
Tests for the database build script.
"""

from employee_api.scripts import build_database
from employee_api.services.database_service import DatabaseService


def test_build_creates_schema_and_demo_rows(tmp_path):
    url = f"sqlite:///{tmp_path / 'data' / 'employees.db'}"

    assert build_database.main(["--database-url", url, "--demo"]) == 0

    db = DatabaseService(database_url=url)
    db.connect()
    try:
        assert db.employee_count() == len(build_database.DEMO_EMPLOYEES)
    finally:
        db.disconnect()


def test_demo_rows_not_inserted_twice(tmp_path):
    url = f"sqlite:///{tmp_path / 'employees.db'}"

    assert build_database.main(["--database-url", url, "--demo"]) == 0
    assert build_database.main(["--database-url", url, "--demo"]) == 0

    db = DatabaseService(database_url=url)
    db.connect()
    try:
        assert db.employee_count() == len(build_database.DEMO_EMPLOYEES)
    finally:
        db.disconnect()


def test_schema_only(tmp_path):
    url = f"sqlite:///{tmp_path / 'empty.db'}"

    assert build_database.main(["--database-url", url]) == 0

    db = DatabaseService(database_url=url)
    db.connect()
    try:
        assert db.employee_count() == 0
    finally:
        db.disconnect()
