"""
Tests for the cache context lifecycle and statistics reporting.
"""

import logging

import pytest

from employee_api.caching.cache_context import CacheContext
from employee_api.services.statistics_service import CacheStatisticsReporter


@pytest.fixture
def context(test_settings, clock):
    """Create an initialized cache context from test settings."""
    ctx = CacheContext.from_settings(test_settings, clock=clock)
    ctx.initialize()
    return ctx


@pytest.fixture
def reporter(context):
    return CacheStatisticsReporter(context)


def test_from_settings_applies_default_policy(context):
    """Test each cache gets its configured size and TTL."""
    assert context.employee_cache.max_size == 50000
    assert context.employee_cache.ttl_seconds == 5 * 60
    assert context.department_cache.max_size == 10
    assert context.department_cache.ttl_seconds == 30 * 60
    assert context.department_list_cache.max_size == 1
    assert context.department_list_cache.ttl_seconds == 30 * 60
    assert context.search_cache.max_size == 5000
    assert context.search_cache.ttl_seconds == 2 * 60
    assert context.is_initialized


def test_report_has_one_entry_per_cache(context, reporter):
    context.employee_cache.put(1, "a")
    context.employee_cache.get(1)
    context.search_cache.get("nobody")

    report = reporter.report()

    assert list(report.caches) == ["employee", "department", "department_list", "search"]
    assert report.caches["employee"].hits == 1
    assert report.caches["employee"].current_size == 1
    assert report.caches["search"].misses == 1
    assert report.total_requests == 2
    assert report.total_hits == 1
    assert report.total_misses == 1
    assert report.overall_hit_rate == pytest.approx(0.5)


def test_reset_clears_entries_but_keeps_counters(context, reporter):
    context.employee_cache.put(1, "a")
    context.employee_cache.get(1)

    reporter.reset()
    report = reporter.report()

    assert report.caches["employee"].current_size == 0
    assert report.caches["employee"].hits == 1


def test_reset_with_counters(context, reporter):
    context.employee_cache.put(1, "a")
    context.employee_cache.get(1)

    reporter.reset(reset_counters=True)
    report = reporter.report()

    assert report.caches["employee"].current_size == 0
    assert report.total_requests == 0


def test_report_serializes_derived_rates(context, reporter):
    context.department_cache.get(1)
    payload = reporter.report().model_dump()

    assert payload["caches"]["department"]["miss_rate"] == 1.0
    assert payload["caches"]["department"]["hit_rate"] == 0.0
    assert "total_evictions" in payload


def test_close_logs_summary_and_clears(context, caplog):
    """Test shutdown writes the statistics summary and drops every entry."""
    context.employee_cache.put(1, "a")

    with caplog.at_level(logging.INFO):
        context.close()

    assert "=== Cache Statistics ===" in caplog.text
    assert "employee: size=1/50000" in caplog.text
    assert context.employee_cache.get_stats().current_size == 0
    assert not context.is_initialized
