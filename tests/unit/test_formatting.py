"""Unit tests for jobboard/formatting.py"""

from datetime import datetime, timezone

import pytest

from jobboard.formatting import (
    SALARY_NOT_SPECIFIED,
    format_amount,
    format_experience_level,
    format_job_type,
    format_posted_date,
    format_remote,
    format_salary,
)
from jobboard.models import ExperienceLevel, JobType


class TestFormatSalary:
    """Each of the four salary rules."""

    def test_both_bounds(self):
        assert format_salary(120000, 180000, "USD") == "$120,000 - $180,000"

    def test_min_only(self):
        assert format_salary(50000, None) == "$50,000+"

    def test_max_only(self):
        assert format_salary(None, 90000) == "Up to $90,000"

    def test_neither(self):
        assert format_salary(None, None) == SALARY_NOT_SPECIFIED
        assert format_salary() == "Salary not specified"

    def test_zero_counts_as_absent(self):
        assert format_salary(0, 0) == SALARY_NOT_SPECIFIED
        assert format_salary(0, 90000) == "Up to $90,000"
        assert format_salary(50000, 0) == "$50,000+"

    def test_currency_does_not_change_symbol(self):
        assert format_salary(1000, 2000, "EUR") == "$1,000 - $2,000"

    def test_small_amounts_have_no_separator(self):
        assert format_salary(900, None) == "$900+"


class TestFormatAmount:

    @pytest.mark.parametrize("value,expected", [
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (1234567, "1,234,567"),
        (120000.0, "120,000"),
        (95000.5, "95,000.5"),
    ])
    def test_grouping(self, value, expected):
        assert format_amount(value) == expected


class TestLabels:

    @pytest.mark.parametrize("value,expected", [
        ("full-time", "Full Time"),
        ("part-time", "Part Time"),
        ("contract", "Contract"),
        ("internship", "Internship"),
        (JobType.FULL_TIME, "Full Time"),
    ])
    def test_job_type(self, value, expected):
        assert format_job_type(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("entry", "Entry Level"),
        ("mid", "Mid Level"),
        ("senior", "Senior Level"),
        (ExperienceLevel.EXECUTIVE, "Executive Level"),
    ])
    def test_experience_level(self, value, expected):
        assert format_experience_level(value) == expected

    def test_remote(self):
        assert format_remote(True) == "Yes"
        assert format_remote(False) == "No"

    def test_posted_date_has_no_zero_padding(self):
        created_at = datetime(2025, 3, 7, 23, 59, tzinfo=timezone.utc)
        assert format_posted_date(created_at) == "3/7/2025"

    def test_posted_date_two_digit_parts(self):
        assert format_posted_date(datetime(2024, 12, 25)) == "12/25/2024"
