"""
Job record model for the job board.

The Job record is closed and immutable: unknown fields are rejected and
instances cannot be modified after construction. Python attributes are
snake_case; the camelCase names used by the JSON API (salaryMin, jobType,
applicationEmail, ...) are accepted as aliases and used when serializing.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class JobType(str, Enum):
    """Employment type of a posting."""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class ExperienceLevel(str, Enum):
    """Seniority a posting is aimed at."""
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    EXECUTIVE = "executive"


class ApplicationType(str, Enum):
    """How a candidate responds to a posting."""
    EMAIL = "email"
    EXTERNAL = "external"


# Select options rendered by the filter bar (value, label); "" means no constraint
JOB_TYPE_OPTIONS = [
    ("", "All Types"),
    (JobType.FULL_TIME.value, "Full Time"),
    (JobType.PART_TIME.value, "Part Time"),
    (JobType.CONTRACT.value, "Contract"),
    (JobType.INTERNSHIP.value, "Internship"),
]

EXPERIENCE_LEVEL_OPTIONS = [
    ("", "All Levels"),
    (ExperienceLevel.ENTRY.value, "Entry Level"),
    (ExperienceLevel.MID.value, "Mid Level"),
    (ExperienceLevel.SENIOR.value, "Senior Level"),
    (ExperienceLevel.EXECUTIVE.value, "Executive"),
]

SalaryAmount = Union[int, float]

# Plain addresses only; characters with meaning inside a mailto: URI (?, &, =, %, #, /) are rejected
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._+'-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+$")


class JobFields(BaseModel):
    """
    Descriptive fields shared by a submitted draft and a stored Job.

    Attributes:
        title: Job title shown on the card
        company: Hiring company name
        location: Free-text location (e.g. "San Francisco, CA", "Remote")
        description: Long-form description
        requirements: Optional requirements text
        benefits: Optional benefits text
        salary_min: Optional lower salary bound (non-negative)
        salary_max: Optional upper salary bound (non-negative)
        salary_currency: 3-letter currency code
        job_type: Employment type
        experience_level: Seniority level
        tags: Ordered skill/keyword tags
        application_type: Email or external link
        application_email: Address used when application_type is email
        application_url: URL used when application_type is external
        is_remote: Remote position flag
        is_featured: Featured posting flag
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    title: str
    company: str
    location: str
    description: str
    requirements: Optional[str] = None
    benefits: Optional[str] = None
    salary_min: Optional[SalaryAmount] = None
    salary_max: Optional[SalaryAmount] = None
    salary_currency: str = Field(default="USD", min_length=3, max_length=3)
    job_type: JobType
    experience_level: ExperienceLevel
    tags: Tuple[str, ...] = ()
    application_type: ApplicationType = ApplicationType.EMAIL
    application_email: Optional[str] = None
    application_url: Optional[str] = None
    is_remote: bool = False
    is_featured: bool = False

    @field_validator("salary_min", "salary_max")
    @classmethod
    def validate_non_negative(cls, v: Optional[SalaryAmount]) -> Optional[SalaryAmount]:
        """Salaries are non-negative; min <= max is expected but not enforced."""
        if v is not None and v < 0:
            raise ValueError("salary must be non-negative")
        return v

    @field_validator("salary_currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.upper()

    @field_validator("application_email")
    @classmethod
    def validate_application_email(cls, v: Optional[str]) -> Optional[str]:
        if v and not EMAIL_PATTERN.fullmatch(v):
            raise ValueError("must be a valid email address")
        return v


class JobDraft(JobFields):
    """A validated posting that has not been assigned identity or provenance yet."""


class Job(JobFields):
    """
    A single job posting.

    Immutable once created. `application_type` decides which of
    `application_email` / `application_url` is meaningful; the other is
    ignored even when present.
    """

    id: str
    user_id: str
    created_at: datetime

    @classmethod
    def from_draft(
        cls,
        draft: JobDraft,
        job_id: str,
        user_id: str,
        created_at: datetime,
    ) -> "Job":
        """Attach identity and provenance to a validated draft."""
        return cls(
            id=job_id,
            user_id=user_id,
            created_at=created_at,
            **draft.model_dump(),
        )

    def to_public_dict(self) -> Dict[str, Any]:
        """Serialize for JSON responses (camelCase keys, ISO timestamps)."""
        return self.model_dump(mode="json", by_alias=True)
