"""In-progress submission drafts.

Drafts hold exactly what the user typed. Nothing here is trimmed or parsed;
that happens when the payload is built.
"""

from typing import Literal

from pydantic import BaseModel

EntityType = Literal["project", "research", "journal"]

PROJECT_TYPES = (
    "final_year",
    "minor",
    "major",
    "research",
    "other",
)
RESEARCH_TYPES = (
    "basic",
    "applied",
    "experimental",
    "theoretical",
    "interdisciplinary",
)
RESEARCH_STATUSES = (
    "proposed",
    "ongoing",
    "completed",
    "published",
    "cancelled",
)
PARTICIPANT_TYPES = (
    "student",
    "faculty",
    "staff",
    "external",
)


class Draft(BaseModel):
    """Fields shared by every submission draft."""

    submitted_by_name: str = ""
    submitted_by_email: str = ""

    model_config = {"validate_assignment": True, "extra": "forbid"}


class JournalDraft(Draft):
    title: str = ""
    genre: str = ""
    abstract: str = ""
    keywords: str = ""
    discipline: str = ""
    year: str = ""
    volume: str = ""
    number: str = ""
    pages: str = ""


class ProjectDraft(Draft):
    title: str = ""
    abstract: str = ""
    description: str = ""
    project_type: str = "final_year"
    supervisor_name: str = ""
    supervisor_email: str = ""
    start_date: str = ""
    end_date: str = ""
    academic_year: str = ""
    github_url: str = ""
    demo_url: str = ""
    technologies_used: str = ""


class ResearchDraft(Draft):
    title: str = ""
    abstract: str = ""
    description: str = ""
    research_type: str = "applied"
    status: str = "proposed"
    principal_investigator: str = ""
    pi_email: str = ""
    start_date: str = ""
    end_date: str = ""
    funding_agency: str = ""
    funding_amount: str = ""
    keywords: str = ""
    methodology: str = ""
    expected_outcomes: str = ""
    publications_url: str = ""
    project_url: str = ""
    github_url: str = ""
