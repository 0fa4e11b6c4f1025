"""
Sample postings used to seed the board.

Usage:
    from jobboard.sample_jobs import build_sample_jobs

    jobs = build_sample_jobs()
"""

from datetime import datetime, timezone
from typing import List, Optional

from jobboard.models import Job

SAMPLE_USER_ID = "sample"

SAMPLE_JOB_DATA = [
    {
        "id": "1",
        "title": "Senior Frontend Developer",
        "company": "TechCorp",
        "location": "San Francisco, CA",
        "salaryMin": 120000,
        "salaryMax": 180000,
        "salaryCurrency": "USD",
        "description": "We are looking for a Senior Frontend Developer to join our team and help build amazing user experiences.",
        "requirements": "React, TypeScript, 5+ years experience",
        "benefits": "Health insurance, 401k, Remote work",
        "jobType": "full-time",
        "experienceLevel": "senior",
        "tags": ["React", "TypeScript", "Frontend"],
        "applicationType": "email",
        "applicationEmail": "jobs@techcorp.com",
        "isRemote": True,
        "isFeatured": True,
    },
    {
        "id": "2",
        "title": "Product Manager",
        "company": "StartupXYZ",
        "location": "New York, NY",
        "salaryMin": 100000,
        "salaryMax": 140000,
        "salaryCurrency": "USD",
        "description": "Join our product team to drive innovation and growth.",
        "requirements": "MBA preferred, 3+ years PM experience",
        "benefits": "Equity, Health insurance, Flexible hours",
        "jobType": "full-time",
        "experienceLevel": "mid",
        "tags": ["Product Management", "Strategy", "Analytics"],
        "applicationType": "external",
        "applicationUrl": "https://startupxyz.com/careers",
        "isRemote": False,
        "isFeatured": False,
    },
    {
        "id": "3",
        "title": "UX Designer",
        "company": "DesignStudio",
        "location": "Remote",
        "salaryMin": 80000,
        "salaryMax": 120000,
        "salaryCurrency": "USD",
        "description": "Create beautiful and intuitive user experiences for our clients.",
        "requirements": "Figma, Adobe Creative Suite, Portfolio required",
        "benefits": "Remote work, Professional development budget",
        "jobType": "contract",
        "experienceLevel": "mid",
        "tags": ["UX Design", "Figma", "User Research"],
        "applicationType": "email",
        "applicationEmail": "hello@designstudio.com",
        "isRemote": True,
        "isFeatured": False,
    },
]


def build_sample_jobs(created_at: Optional[datetime] = None) -> List[Job]:
    """
    Build the sample postings.

    Args:
        created_at: Timestamp stamped on every sample (default: now, UTC)

    Returns:
        Sample jobs in display order
    """
    created_at = created_at or datetime.now(timezone.utc)
    return [
        Job(**data, userId=SAMPLE_USER_ID, createdAt=created_at)
        for data in SAMPLE_JOB_DATA
    ]
