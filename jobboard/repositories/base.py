"""
Repository Interface Definitions

Defines the abstract interface for job repository operations.
This enables swapping implementations (in-memory sample board, a real
store later) without changing consumer code.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from jobboard.models import Job, JobDraft


class JobRepositoryInterface(ABC):
    """
    Abstract interface for job postings.

    Implementations:
    - InMemoryJobRepository: fixed collection, create() logs only

    Read operations never mutate the collection. create() either returns the
    created Job or raises RepositoryError.
    """

    @abstractmethod
    def list_jobs(self) -> List[Job]:
        """All postings, in display order."""
        pass

    @abstractmethod
    def get_job(self, job_id: str) -> Optional[Job]:
        """A single posting, or None if the id is unknown."""
        pass

    @abstractmethod
    def create(self, draft: JobDraft, user_id: str) -> Job:
        """Create a posting owned by user_id from a validated draft."""
        pass
