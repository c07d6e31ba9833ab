"""
Share and submission payloads.

Mail composers and share sheets are outside this package; these payloads
carry everything such a collaborator needs.
"""

import re
from dataclasses import dataclass

from ohcraps.config import settings
from ohcraps.models.strategy import Strategy
from ohcraps.models.user_strategy import UserStrategy
from ohcraps.services.share_formatter import share_text

SHARE_SUBJECT_PREFIX = "Oh Craps! Strategy - "
SUBMISSION_SUBJECT_PREFIX = "Oh Craps! Strategy Submission - "
SHARE_FILENAME_SUFFIX = "_OhCraps.txt"
DEFAULT_FILENAME = "Strategy"

# Characters not allowed in shared file names
INVALID_FILENAME_CHARS = re.compile(r'[/\\?%*|"<>:]')


@dataclass(frozen=True, slots=True)
class SharePayload:
    subject: str
    filename: str
    text: str


@dataclass(frozen=True, slots=True)
class SubmissionEmail:
    recipient: str
    subject: str
    body: str


def sanitized_filename(name: str) -> str:
    cleaned = INVALID_FILENAME_CHARS.sub("_", name).strip()
    return cleaned or DEFAULT_FILENAME


def share_filename(name: str) -> str:
    """File name for a shared strategy attachment."""
    return sanitized_filename(name) + SHARE_FILENAME_SUFFIX


def build_share_payload(strategy: Strategy | UserStrategy) -> SharePayload:
    return SharePayload(
        subject=SHARE_SUBJECT_PREFIX + strategy.name,
        filename=share_filename(strategy.name),
        text=share_text(strategy),
    )


def build_submission_email(strategy: UserStrategy, recipient: str | None = None) -> SubmissionEmail:
    """
    Draft the email that submits a user strategy for inclusion.

    Args:
        strategy: Strategy being submitted
        recipient: Override for the configured submission address
    """
    return SubmissionEmail(
        recipient=recipient if recipient is not None else settings.submission_email,
        subject=SUBMISSION_SUBJECT_PREFIX + strategy.name,
        body=share_text(strategy),
    )
