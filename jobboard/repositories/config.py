"""
Repository Configuration and Factory

Provides factory function to get the appropriate repository implementation
based on configuration.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from jobboard.config import get_settings
from jobboard.sample_jobs import build_sample_jobs

from .base import JobRepositoryInterface

logger = logging.getLogger(__name__)


@dataclass
class RepositoryConfig:
    """
    Configuration for repository initialization.

    Loaded from BoardSettings with sensible defaults.
    """
    seed_sample_jobs: bool = True

    @classmethod
    def from_settings(cls) -> "RepositoryConfig":
        """
        Load configuration from validated settings.

        Environment variables:
        - SEED_SAMPLE_JOBS: Serve the built-in sample postings (true/false)
        """
        settings = get_settings()
        return cls(seed_sample_jobs=settings.seed_sample_jobs)


# Singleton repository instance
_repository_instance: Optional[JobRepositoryInterface] = None


def get_job_repository() -> JobRepositoryInterface:
    """
    Get the job repository instance.

    Factory function that returns the configured repository implementation.
    Uses singleton pattern so every request sees the same collection.
    """
    global _repository_instance

    if _repository_instance is None:
        config = RepositoryConfig.from_settings()

        from .memory_repository import InMemoryJobRepository
        jobs = build_sample_jobs() if config.seed_sample_jobs else []
        _repository_instance = InMemoryJobRepository(jobs)
        logger.info(f"Initialized in-memory job repository with {len(jobs)} jobs")

    return _repository_instance


def reset_repository() -> None:
    """Reset the repository singleton."""
    global _repository_instance
    _repository_instance = None
    logger.info("Repository singleton reset")
