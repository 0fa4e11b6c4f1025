"""
Post-job form boundary.

The post-job form submits a flat set of string and checkbox fields. This
module validates and coerces them into a JobDraft before anything else sees
them; in particular salary inputs that are not numeric are rejected here so
the salary formatter only ever receives numbers or None.

Field names follow the form (and JSON API) naming: title, company, location,
salaryMin, salaryMax, description, requirements, benefits, jobType,
experienceLevel, tags, applicationType, applicationEmail, applicationUrl,
isRemote, isFeatured.
"""

import math
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from jobboard.errors import FormValidationError
from jobboard.models import EMAIL_PATTERN, JobDraft

REQUIRED_TEXT_FIELDS = ("title", "company", "location", "description")
REQUIRED_CHOICE_FIELDS = ("jobType", "experienceLevel")
OPTIONAL_TEXT_FIELDS = ("requirements", "benefits", "applicationEmail", "applicationUrl")
CHECKBOX_FIELDS = ("isRemote", "isFeatured")

TRUTHY_CHECKBOX_VALUES = {"on", "true", "1", "yes"}

FIELD_LABELS = {
    "title": "Job Title",
    "company": "Company",
    "location": "Location",
    "description": "Job Description",
    "jobType": "Job Type",
    "experienceLevel": "Experience Level",
    "salaryMin": "Minimum Salary",
    "salaryMax": "Maximum Salary",
    "applicationType": "Application Method",
    "applicationEmail": "Application Email",
    "applicationUrl": "Application URL",
}


def _text(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    if value is None:
        return ""
    return str(value).strip()


def parse_salary(raw: Any) -> Optional[Union[int, float]]:
    """
    Coerce a salary input to a number.

    Blank input means "not specified". Thousands separators are tolerated
    ("120,000"). Anything else that is not a finite non-negative number
    raises ValueError.

    Examples:
        >>> parse_salary("")
        >>> parse_salary("120000")
        120000
        >>> parse_salary("95000.50")
        95000.5
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError("must be a number")
    if isinstance(raw, (int, float)):
        value = raw
    else:
        text = str(raw).strip().replace(",", "")
        if not text:
            return None
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                raise ValueError("must be a number") from None
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("must be a finite number")
        if value.is_integer():
            value = int(value)
    if value < 0:
        raise ValueError("must not be negative")
    return value


def parse_tags(raw: Any) -> List[str]:
    """Split comma-separated tags, trimming whitespace and dropping blanks."""
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        parts = [str(item) for item in raw]
    else:
        parts = str(raw).split(",")
    return [part.strip() for part in parts if part.strip()]


def parse_checkbox(raw: Any) -> bool:
    """HTML checkboxes submit "on" when checked and nothing when not."""
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    return str(raw).strip().lower() in TRUTHY_CHECKBOX_VALUES


def parse_job_form(form: Mapping[str, Any]) -> JobDraft:
    """
    Validate submitted form fields and build a JobDraft.

    Args:
        form: Request form (or JSON body) with the post-job fields

    Returns:
        Validated draft ready for JobRepository.create()

    Raises:
        FormValidationError: With one message per invalid field
    """
    if not isinstance(form, Mapping):
        raise FormValidationError({"form": "Expected a JSON object"})

    errors: Dict[str, str] = {}
    data: Dict[str, Any] = {}

    for name in REQUIRED_TEXT_FIELDS + REQUIRED_CHOICE_FIELDS:
        value = _text(form, name)
        if not value:
            errors[name] = f"{FIELD_LABELS[name]} is required"
        data[name] = value

    for name in OPTIONAL_TEXT_FIELDS:
        data[name] = _text(form, name) or None

    email = data["applicationEmail"]
    if email and not EMAIL_PATTERN.fullmatch(email):
        errors["applicationEmail"] = f"{FIELD_LABELS['applicationEmail']} must be a valid email address"

    for name in ("salaryMin", "salaryMax"):
        try:
            data[name] = parse_salary(form.get(name))
        except ValueError as e:
            errors[name] = f"{FIELD_LABELS[name]} {e}"

    data["tags"] = parse_tags(form.get("tags"))
    data["applicationType"] = _text(form, "applicationType") or "email"

    for name in CHECKBOX_FIELDS:
        data[name] = parse_checkbox(form.get(name))

    if errors:
        raise FormValidationError(errors)

    try:
        return JobDraft(**data)
    except ValidationError as e:
        raise FormValidationError(_pydantic_errors(e)) from e


def _pydantic_errors(error: ValidationError) -> Dict[str, str]:
    """Map pydantic errors back onto form field names."""
    fields: Dict[str, str] = {}
    for item in error.errors():
        name = str(item["loc"][0]) if item.get("loc") else "form"
        label = FIELD_LABELS.get(name, name)
        fields.setdefault(name, f"{label}: {item['msg']}")
    return fields
