"""
Search/filter engine for the job board.

Combines four independent predicates over an in-memory job collection:
- text: search term in title, company or any tag (case-insensitive substring)
- location: location filter in location (case-insensitive substring)
- job type: exact, case-sensitive match on the job type value
- experience: exact, case-sensitive match on the experience level value

An empty criterion is vacuously true. A job is kept only when every active
predicate holds. The result is a new list in input order; nothing is ranked
and nothing is cached between calls.

Case-insensitive comparison uses str.casefold(), which is locale-independent
Unicode case folding ("Straße" matches "STRASSE").

Usage:
    from jobboard.filters import FilterCriteria, filter_jobs

    criteria = FilterCriteria(search_term="react", job_type="full-time")
    visible = filter_jobs(jobs, criteria)
"""

from dataclasses import asdict, dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Tuple

from jobboard.models import Job


@dataclass(frozen=True)
class FilterCriteria:
    """
    Transient filter inputs for one render of the board.

    Each field is either "" (no constraint) or a non-empty string.
    """
    search_term: str = ""
    location: str = ""
    job_type: str = ""
    experience_level: str = ""

    # Query parameter names used by the board UI and the JSON API
    QUERY_PARAMS = {
        "search_term": "query",
        "location": "location",
        "job_type": "job_type",
        "experience_level": "experience",
    }

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "FilterCriteria":
        """
        Build criteria from request query parameters.

        Missing parameters become "" and surrounding whitespace is stripped,
        so a search box containing only spaces imposes no constraint.
        """
        values = {
            field: (args.get(param) or "").strip()
            for field, param in cls.QUERY_PARAMS.items()
        }
        return cls(**values)

    def is_empty(self) -> bool:
        """True when no criterion is active."""
        return not any(asdict(self).values())

    def to_query_params(self) -> Dict[str, str]:
        """Inverse of from_args, dropping inactive criteria."""
        return {
            param: getattr(self, field)
            for field, param in self.QUERY_PARAMS.items()
            if getattr(self, field)
        }


def _contains(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


def matches_text(job: Job, search_term: str) -> bool:
    """Search term in title, company, or any tag."""
    if not search_term:
        return True
    return (
        _contains(job.title, search_term)
        or _contains(job.company, search_term)
        or any(_contains(tag, search_term) for tag in job.tags)
    )


def matches_location(job: Job, location: str) -> bool:
    """Location filter is a substring of the job location, not an exact match."""
    if not location:
        return True
    return _contains(job.location, location)


def matches_job_type(job: Job, job_type: str) -> bool:
    if not job_type:
        return True
    return job.job_type.value == job_type


def matches_experience_level(job: Job, experience_level: str) -> bool:
    if not experience_level:
        return True
    return job.experience_level.value == experience_level


# Predicate name -> (criteria field, predicate)
PREDICATES: Dict[str, Tuple[str, Callable[[Job, str], bool]]] = {
    "text": ("search_term", matches_text),
    "location": ("location", matches_location),
    "job_type": ("job_type", matches_job_type),
    "experience_level": ("experience_level", matches_experience_level),
}


def failed_predicates(job: Job, criteria: FilterCriteria) -> List[str]:
    """
    Names of the active predicates that reject the job.

    An empty list means the job passes the filter. Inactive criteria never
    appear here.

    Args:
        job: Job to check
        criteria: Current filter inputs

    Returns:
        Predicate names from PREDICATES, in declaration order
    """
    failed = []
    for name, (field, predicate) in PREDICATES.items():
        value = getattr(criteria, field)
        if value and not predicate(job, value):
            failed.append(name)
    return failed


def matches(job: Job, criteria: FilterCriteria) -> bool:
    """True iff every active predicate holds for the job."""
    return (
        matches_text(job, criteria.search_term)
        and matches_location(job, criteria.location)
        and matches_job_type(job, criteria.job_type)
        and matches_experience_level(job, criteria.experience_level)
    )


def filter_jobs(jobs: Iterable[Job], criteria: FilterCriteria) -> List[Job]:
    """
    Filter a job collection by the given criteria.

    Args:
        jobs: Full job collection, in display order
        criteria: Current filter inputs

    Returns:
        New list with the matching jobs, preserving relative order
    """
    return [job for job in jobs if matches(job, criteria)]
