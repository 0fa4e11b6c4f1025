"""
Repository Pattern for Job Postings

Public API:
- get_job_repository(): Factory to get job repository instance
- reset_repository(): Drop the singleton (tests, config reloads)
- JobRepositoryInterface: Abstract interface for job postings
- InMemoryJobRepository: Sample-data implementation with a logging create()

Usage:
    from jobboard.repositories import get_job_repository

    repo = get_job_repository()
    jobs = repo.list_jobs()
    job = repo.create(draft, user_id="someone@example.com")
"""

from .base import JobRepositoryInterface
from .config import (
    get_job_repository,
    reset_repository,
    RepositoryConfig,
)
from .memory_repository import InMemoryJobRepository

__all__ = [
    "get_job_repository",
    "reset_repository",
    "JobRepositoryInterface",
    "InMemoryJobRepository",
    "RepositoryConfig",
]
