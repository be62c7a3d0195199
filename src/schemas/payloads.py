"""Normalized payloads accepted by the upstream content API.

Optional fields default to None and are dropped when serialized with
``exclude_none=True``, so the upstream sees them as absent rather than empty.
"""

from datetime import date

from pydantic import BaseModel


class AuthorPayload(BaseModel):
    given_name: str
    family_name: str | None = None
    email: str | None = None
    affiliation: str | None = None
    country: str | None = None


class MemberPayload(BaseModel):
    full_name: str
    roll_number: str
    email: str | None = None
    role: str | None = None


class ParticipantPayload(BaseModel):
    full_name: str
    participant_type: str
    email: str | None = None
    role: str | None = None
    department: str


class SubmissionPayload(BaseModel):
    """Fields every entity payload carries."""

    submitted_by_name: str
    submitted_by_email: str
    department: str
    otp_session: str

    def to_json(self) -> dict:
        """Serialize for the wire, omitting absent optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


class JournalPayload(SubmissionPayload):
    title: str
    genre: str
    abstract: str
    keywords: str | None = None
    discipline: str | None = None
    year: int | None = None
    volume: int | None = None
    number: int | None = None
    pages: str | None = None
    authors: list[AuthorPayload]


class ProjectPayload(SubmissionPayload):
    title: str
    abstract: str | None = None
    description: str | None = None
    project_type: str
    supervisor_name: str
    supervisor_email: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    academic_year: str | None = None
    github_url: str | None = None
    demo_url: str | None = None
    technologies_used: str | None = None
    members: list[MemberPayload]


class ResearchPayload(SubmissionPayload):
    title: str
    abstract: str | None = None
    description: str | None = None
    research_type: str
    status: str
    principal_investigator: str
    pi_email: str
    start_date: date | None = None
    end_date: date | None = None
    funding_agency: str | None = None
    funding_amount: float | None = None
    keywords: str | None = None
    methodology: str | None = None
    expected_outcomes: str | None = None
    publications_url: str | None = None
    project_url: str | None = None
    github_url: str | None = None
    participants: list[ParticipantPayload]
