"""
Application dispatcher.

Decides how a candidate applies to a posting without performing the action
itself. The web layer turns the returned action into a redirect:
- ComposeEmail -> mailto: URI for the platform mail client
- OpenExternal -> the posting's careers URL, opened in a new tab
- NoAction     -> nothing happens; the reason is logged

Only http and https URLs are ever returned as OpenExternal. Any other scheme
(javascript:, file:, custom handlers) resolves to NoAction.
"""

import logging
from dataclasses import dataclass
from typing import Union
from urllib.parse import quote, urlparse

from jobboard.models import ApplicationType, Job

logger = logging.getLogger(__name__)

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True)
class ComposeEmail:
    """Open the mail client addressed to the posting's contact."""
    to: str
    subject: str
    body: str

    kind = "email"

    def mailto_uri(self) -> str:
        """
        Build a mailto: URI; the address, subject and body are percent-encoded.

        Example:
            mailto:jobs@techcorp.com?subject=Application%20for%20...&body=Hi%2C%20...
        """
        to = quote(self.to, safe="@")
        subject = quote(self.subject, safe="")
        body = quote(self.body, safe="")
        return f"mailto:{to}?subject={subject}&body={body}"


@dataclass(frozen=True)
class OpenExternal:
    """Open the posting's external application page."""
    url: str

    kind = "external"


@dataclass(frozen=True)
class NoAction:
    """The posting has no usable contact for its application type."""
    reason: str

    kind = "none"


ApplicationAction = Union[ComposeEmail, OpenExternal, NoAction]


def application_subject(job: Job) -> str:
    return f"Application for {job.title}"


def application_body(job: Job) -> str:
    return f"Hi, I'm interested in the {job.title} position at {job.company}."


def is_allowed_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    parsed = urlparse(url.strip())
    return parsed.scheme.lower() in ALLOWED_URL_SCHEMES and bool(parsed.netloc)


def resolve_application_action(job: Job) -> ApplicationAction:
    """
    Resolve the apply action for a job.

    The job's application_type decides which contact field is read; the
    other field is ignored even if present. A missing contact field yields
    NoAction rather than an error.

    Args:
        job: Posting the candidate is applying to

    Returns:
        ComposeEmail, OpenExternal or NoAction
    """
    if job.application_type == ApplicationType.EMAIL:
        if not job.application_email:
            return NoAction(reason="missing application email")
        return ComposeEmail(
            to=job.application_email,
            subject=application_subject(job),
            body=application_body(job),
        )

    if job.application_type == ApplicationType.EXTERNAL:
        if not job.application_url:
            return NoAction(reason="missing application url")
        if not is_allowed_url(job.application_url):
            logger.warning(
                f"Refusing non-http(s) application url for job {job.id}: {job.application_url!r}"
            )
            return NoAction(reason="unsupported application url scheme")
        return OpenExternal(url=job.application_url.strip())

    return NoAction(reason=f"unknown application type {job.application_type}")
