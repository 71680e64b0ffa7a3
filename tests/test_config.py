"""
Tests for settings loading and validation.
"""

import pytest

from employee_api.caching.cache_context import CacheContext
from employee_api.config import Settings
from employee_api.exceptions import ConfigurationError


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.cache_employee_max_size == 50000
    assert settings.cache_search_ttl_minutes == 2
    settings.validate_cache_settings()


def test_environment_overrides(monkeypatch):
    """Test values come from the environment, case-insensitively."""
    monkeypatch.setenv("CACHE_EMPLOYEE_MAX_SIZE", "10")
    monkeypatch.setenv("cache_search_ttl_minutes", "0.5")

    settings = Settings(_env_file=None)

    assert settings.cache_employee_max_size == 10
    assert settings.cache_search_ttl_minutes == 0.5


@pytest.mark.parametrize("field", [
    "cache_employee_max_size",
    "cache_department_max_size",
    "cache_search_max_size",
    "cache_employee_ttl_minutes",
    "cache_department_list_ttl_minutes",
])
def test_non_positive_cache_settings_rejected(field):
    settings = Settings(_env_file=None, **{field: 0})

    with pytest.raises(ConfigurationError) as exc_info:
        settings.validate_cache_settings()

    assert exc_info.value.details["field"] == field


def test_cache_context_refuses_invalid_settings():
    settings = Settings(_env_file=None, cache_department_ttl_minutes=-1)

    with pytest.raises(ConfigurationError):
        CacheContext.from_settings(settings)
