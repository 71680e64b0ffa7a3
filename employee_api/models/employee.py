"""Domain records for employees and departments"""
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

CENTS = Decimal("0.01")


def to_money(value: Optional[Decimal]) -> Optional[Decimal]:
    """Quantize a monetary value to two fraction digits (HALF_UP)."""
    if value is None:
        return None
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


class Department(BaseModel):
    """A department. manager_id points at an employee but is not enforced."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    location: Optional[str] = None
    manager_id: Optional[int] = None


class Employee(BaseModel):
    """
    Immutable employee snapshot.

    Instances are what the storage layer returns and what the caches hold, so
    they are frozen to keep cached copies identical to what was read.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    department_id: Optional[int] = None
    salary: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    hire_date: Optional[date] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator("salary", mode="before")
    @classmethod
    def _quantize_salary(cls, value):
        if value is None:
            return None
        return to_money(Decimal(str(value)))
