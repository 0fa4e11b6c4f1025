"""
Display formatting for job postings.

format_salary() is the only rule with real branching; the remaining helpers
turn enum values and timestamps into the labels shown on cards and the
detail view.
"""

from datetime import datetime
from typing import Optional, Union

from jobboard.models import ExperienceLevel, JobType

Number = Union[int, float]

SALARY_NOT_SPECIFIED = "Salary not specified"


def format_amount(value: Number) -> str:
    """
    Group thousands with commas (en-US convention).

    Integral floats drop their trailing ".0" so 120000.0 renders like 120000.

    Examples:
        >>> format_amount(120000)
        '120,000'
        >>> format_amount(95000.5)
        '95,000.5'
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value:,}"


def format_salary(
    salary_min: Optional[Number] = None,
    salary_max: Optional[Number] = None,
    currency: str = "USD",
) -> str:
    """
    Format a salary range for display.

    Rules, in order:
    1. Neither bound present -> "Salary not specified"
    2. Both present          -> "$<min> - $<max>"
    3. Only min present      -> "$<min>+"
    4. Only max present      -> "Up to $<max>"

    A zero bound counts as absent. The "$" glyph is used for every currency;
    `currency` is accepted for callers that pass the job's currency code but
    does not change the output.

    Args:
        salary_min: Lower bound or None
        salary_max: Upper bound or None
        currency: 3-letter currency code of the posting

    Returns:
        Display string
    """
    if not salary_min and not salary_max:
        return SALARY_NOT_SPECIFIED
    if salary_min and salary_max:
        return f"${format_amount(salary_min)} - ${format_amount(salary_max)}"
    if salary_min:
        return f"${format_amount(salary_min)}+"
    return f"Up to ${format_amount(salary_max)}"


def format_job_type(job_type: Union[JobType, str]) -> str:
    """'full-time' -> 'Full Time'."""
    value = job_type.value if isinstance(job_type, JobType) else job_type
    return value.replace("-", " ").title()


def format_experience_level(level: Union[ExperienceLevel, str]) -> str:
    """'senior' -> 'Senior Level'."""
    value = level.value if isinstance(level, ExperienceLevel) else level
    return f"{value.capitalize()} Level"


def format_remote(is_remote: bool) -> str:
    return "Yes" if is_remote else "No"


def format_posted_date(created_at: datetime) -> str:
    """Short date as M/D/YYYY, e.g. 3/7/2025."""
    return f"{created_at.month}/{created_at.day}/{created_at.year}"
