#!/usr/bin/env python3
"""
Script to create the employee database schema, optionally with demo rows

Usage:
    python -m employee_api.scripts.build_database [--database-url URL] [--demo]
"""

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal
from typing import List, Optional

from dotenv import load_dotenv

from employee_api.config import Settings
from employee_api.exceptions import EmployeeApiError
from employee_api.logging_config import configure_logging
from employee_api.models.employee import Department, Employee
from employee_api.services.database_service import DatabaseService

logger = logging.getLogger(__name__)

DEMO_DEPARTMENTS = [
    Department(id=1, name="Engineering", location="Building A", manager_id=1),
    Department(id=2, name="Sales", location="Building B", manager_id=3),
    Department(id=3, name="Human Resources", location="Building A", manager_id=None),
]

DEMO_EMPLOYEES = [
    Employee(id=1, name="John Smith", email="john.smith@example.com", department_id=1,
             salary=Decimal("95000.00"), hire_date=date(2019, 4, 1), phone="555-0101"),
    Employee(id=2, name="Johanna Berg", email="johanna.berg@example.com", department_id=1,
             salary=Decimal("88000.00"), hire_date=date(2021, 8, 16), phone="555-0102"),
    Employee(id=3, name="Maria Garcia", email="maria.garcia@example.com", department_id=2,
             salary=Decimal("72000.00"), hire_date=date(2020, 1, 6), phone="555-0103"),
    Employee(id=4, name="Wei Chen", email="wei.chen@example.com", department_id=2,
             salary=Decimal("68500.50"), hire_date=date(2022, 11, 14)),
    Employee(id=5, name="Amara Okafor", email="amara.okafor@example.com", department_id=3,
             salary=Decimal("61000.00"), hire_date=date(2023, 3, 20)),
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the employee database schema")
    parser.add_argument("--database-url", help="SQLAlchemy URL (defaults to DATABASE_URL / settings)")
    parser.add_argument("--demo", action="store_true", help="Insert a handful of demo rows into an empty database")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    # Load environment variables
    load_dotenv()
    args = parse_args(argv)

    settings = Settings()
    configure_logging(settings.log_level)

    db = DatabaseService.from_settings(settings)
    if args.database_url:
        db.database_url = args.database_url

    try:
        db.connect()
        db.initialize_schema()

        if args.demo:
            existing = db.employee_count()
            if existing:
                logger.warning(f"Database already holds {existing:,} employees, skipping demo rows")
            else:
                db.seed(DEMO_DEPARTMENTS, DEMO_EMPLOYEES)

        logger.info(f"Database ready with {db.employee_count():,} employees")
        return 0
    except EmployeeApiError as e:
        logger.error(f"Database build failed: {e.message}")
        return 1
    finally:
        db.disconnect()


if __name__ == "__main__":
    sys.exit(main())
