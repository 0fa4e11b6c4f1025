"""
In-Memory Job Repository

Serves a fixed job collection held in process memory. Posting a job does not
add it to the board: create() stamps identity and provenance, logs the
posting and hands the Job back to the caller.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from jobboard.errors import RepositoryError
from jobboard.models import Job, JobDraft

from .base import JobRepositoryInterface

logger = logging.getLogger(__name__)


class InMemoryJobRepository(JobRepositoryInterface):
    """
    Read-only job collection with a logging create() sink.

    The collection is copied at construction and never mutated afterwards,
    so list_jobs() always returns the same postings in the same order.
    """

    def __init__(
        self,
        jobs: Optional[Iterable[Job]] = None,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        """
        Args:
            jobs: Initial postings (default: empty board)
            id_factory: Produces ids for created postings
            clock: Produces creation timestamps
        """
        self._jobs: List[Job] = list(jobs or [])
        self._id_factory = id_factory
        self._clock = clock

    def list_jobs(self) -> List[Job]:
        return list(self._jobs)

    def get_job(self, job_id: str) -> Optional[Job]:
        for job in self._jobs:
            if job.id == job_id:
                return job
        return None

    def create(self, draft: JobDraft, user_id: str) -> Job:
        """
        Build the Job for a submitted posting and log it.

        Raises:
            RepositoryError: If the draft cannot be turned into a Job
        """
        try:
            job = Job.from_draft(
                draft,
                job_id=self._id_factory(),
                user_id=user_id,
                created_at=self._clock(),
            )
        except ValueError as e:
            raise RepositoryError("Failed to create job posting", cause=e) from e

        logger.info(
            f"Job posted: id={job.id} title={job.title!r} company={job.company!r} "
            f"user={user_id} payload={job.to_public_dict()}"
        )
        return job
