"""Repeatable sub-records edited inside a submission draft.

Every record carries a ``key`` that identifies it independently of its
position, so removing one row never disturbs state bound to another.
"""

from uuid import uuid4

from pydantic import BaseModel, Field


def new_key() -> str:
    return uuid4().hex


class Subentity(BaseModel):
    """Base for editable sub-records. Fields other than ``key`` are raw strings."""

    key: str = Field(default_factory=new_key)

    model_config = {"validate_assignment": True, "extra": "forbid"}


class Author(Subentity):
    """A journal article author. ``given_name`` identifies the row."""

    given_name: str = ""
    family_name: str = ""
    email: str = ""
    affiliation: str = ""
    country: str = ""


class TeamMember(Subentity):
    """A project team member. ``full_name`` and ``roll_number`` identify the row."""

    full_name: str = ""
    roll_number: str = ""
    email: str = ""
    role: str = "Team Member"


class Participant(Subentity):
    """A research participant. ``full_name`` identifies the row."""

    full_name: str = ""
    participant_type: str = "student"
    email: str = ""
    role: str = "Researcher"
