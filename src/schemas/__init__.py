"""Schema definitions for department submissions."""

from .drafts import (
    PARTICIPANT_TYPES,
    PROJECT_TYPES,
    RESEARCH_STATUSES,
    RESEARCH_TYPES,
    Draft,
    EntityType,
    JournalDraft,
    ProjectDraft,
    ResearchDraft,
)
from .otp import OtpPurpose, OtpStatus, OtpVerification
from .payloads import (
    AuthorPayload,
    JournalPayload,
    MemberPayload,
    ParticipantPayload,
    ProjectPayload,
    ResearchPayload,
    SubmissionPayload,
)
from .subentities import Author, Participant, Subentity, TeamMember

__all__ = [
    "Author",
    "AuthorPayload",
    "Draft",
    "EntityType",
    "JournalDraft",
    "JournalPayload",
    "MemberPayload",
    "OtpPurpose",
    "OtpStatus",
    "OtpVerification",
    "PARTICIPANT_TYPES",
    "PROJECT_TYPES",
    "Participant",
    "ParticipantPayload",
    "ProjectDraft",
    "ProjectPayload",
    "RESEARCH_STATUSES",
    "RESEARCH_TYPES",
    "ResearchDraft",
    "ResearchPayload",
    "Subentity",
    "SubmissionPayload",
    "TeamMember",
]
