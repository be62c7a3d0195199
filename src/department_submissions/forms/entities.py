"""Per-entity submission rules.

Projects, research records and journal articles go through the same
workflow. What differs between them is data: the draft and sub-record
shapes, which fields are required or must be well-formed, and how a
draft maps onto the upstream payload. Each EntityDefinition carries
exactly that, and SubmissionFormController does the rest.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from schemas.drafts import (
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
from schemas.otp import OtpPurpose
from schemas.payloads import (
    AuthorPayload,
    JournalPayload,
    MemberPayload,
    ParticipantPayload,
    ProjectPayload,
    ResearchPayload,
    SubmissionPayload,
)
from schemas.subentities import Author, Participant, Subentity, TeamMember

from .normalize import (
    is_email,
    is_url,
    optional,
    optional_date,
    optional_float,
    optional_int,
)

PayloadBuilder = Callable[[Draft, list, str, str], SubmissionPayload]

SUBMITTER_REQUIRED = {
    "submitted_by_name": "Your name is required",
    "submitted_by_email": "Campus email is required",
}


@dataclass(frozen=True)
class EntityDefinition:
    """Everything that distinguishes one submission type from another.

    Attributes:
        entity_type: Proxy path segment ("project", "research", "journal")
        purpose: OTP purpose used to verify the submitter
        label: Human name used in messages
        draft_model: Draft schema, instantiated with defaults for a new form
        subentity_model: Sub-record schema
        subentity_field: Payload key holding the sub-records
        subentity_label: Human name of one sub-record
        identifying_fields: Sub-record fields that must all be non-blank for
            the row to be kept
        required_fields: Draft fields that must be non-blank, with messages
        build_payload: Maps (draft, kept rows, department, otp session) to
            the payload model
        email_fields: Draft fields that must look like an email when given
        url_fields: Draft fields that must be http(s) URLs when given
        date_fields: Draft fields that must be ISO dates when given
        choice_fields: Draft fields restricted to a fixed set of values
        subentity_choices: Sub-record fields restricted to a fixed set
        success_message: Shown after the upstream accepts the submission
    """

    entity_type: EntityType
    purpose: OtpPurpose
    label: str
    draft_model: type[Draft]
    subentity_model: type[Subentity]
    subentity_field: str
    subentity_label: str
    identifying_fields: tuple[str, ...]
    required_fields: dict[str, str]
    build_payload: PayloadBuilder
    email_fields: tuple[str, ...] = ("submitted_by_email",)
    url_fields: tuple[str, ...] = ()
    date_fields: tuple[str, ...] = ()
    choice_fields: dict[str, tuple[str, ...]] = field(default_factory=dict)
    subentity_choices: dict[str, tuple[str, ...]] = field(default_factory=dict)
    success_message: str = "Submitted for review"

    def new_draft(self) -> Draft:
        return self.draft_model()

    def new_subentity(self) -> Subentity:
        return self.subentity_model()

    def complete_rows(self, rows: Iterable[Subentity]) -> list[Subentity]:
        """Rows whose identifying fields are all non-blank."""
        return [
            row
            for row in rows
            if all(getattr(row, name).strip() for name in self.identifying_fields)
        ]

    def validate(self, draft: Draft, rows: Iterable[Subentity]) -> dict[str, str]:
        """Check a draft and its sub-records.

        Returns:
            Field name to message for every problem found; empty when the
            draft can be submitted. Sub-record problems are keyed
            ``<subentity_field>.<index>.<field>``.
        """
        rows = list(rows)
        errors: dict[str, str] = {}

        for name, message in {**SUBMITTER_REQUIRED, **self.required_fields}.items():
            if not getattr(draft, name).strip():
                errors[name] = message

        for name in self.email_fields:
            value = getattr(draft, name)
            if value.strip() and not is_email(value):
                errors.setdefault(name, "Enter a valid email address")

        for name in self.url_fields:
            value = getattr(draft, name)
            if value.strip() and not is_url(value):
                errors.setdefault(name, "Enter a valid URL")

        for name in self.date_fields:
            value = getattr(draft, name)
            if value.strip() and optional_date(value) is None:
                errors.setdefault(name, "Use the YYYY-MM-DD format")

        if "start_date" in self.date_fields and "end_date" in self.date_fields:
            start = optional_date(draft.start_date)
            end = optional_date(draft.end_date)
            if start and end and end < start:
                errors.setdefault("end_date", "End date cannot be before the start date")

        for name, choices in self.choice_fields.items():
            if getattr(draft, name) not in choices:
                errors.setdefault(name, f"Choose one of: {', '.join(choices)}")

        for index, row in enumerate(rows):
            prefix = f"{self.subentity_field}.{index}"
            if row.email.strip() and not is_email(row.email):
                errors[f"{prefix}.email"] = "Enter a valid email address"
            for name, choices in self.subentity_choices.items():
                if getattr(row, name) not in choices:
                    errors[f"{prefix}.{name}"] = f"Choose one of: {', '.join(choices)}"

        if not self.complete_rows(rows):
            errors[self.subentity_field] = f"Add at least one {self.subentity_label}"

        return errors

    def payload(
        self,
        draft: Draft,
        rows: Iterable[Subentity],
        department: str,
        otp_session: str,
    ) -> dict:
        """Build the normalized wire payload for an already validated draft."""
        model = self.build_payload(draft, self.complete_rows(rows), department, otp_session)
        return model.to_json()


def _submitter(draft: Draft, department: str, otp_session: str) -> dict:
    return {
        "submitted_by_name": draft.submitted_by_name.strip(),
        "submitted_by_email": draft.submitted_by_email.strip(),
        "department": department,
        "otp_session": otp_session,
    }


def _journal_payload(
    draft: JournalDraft, rows: list[Author], department: str, otp_session: str
) -> JournalPayload:
    return JournalPayload(
        title=draft.title.strip(),
        genre=draft.genre.strip(),
        abstract=draft.abstract.strip(),
        keywords=optional(draft.keywords),
        discipline=optional(draft.discipline),
        year=optional_int(draft.year),
        volume=optional_int(draft.volume),
        number=optional_int(draft.number),
        pages=optional(draft.pages),
        authors=[
            AuthorPayload(
                given_name=author.given_name.strip(),
                family_name=optional(author.family_name),
                email=optional(author.email),
                affiliation=optional(author.affiliation),
                country=optional(author.country),
            )
            for author in rows
        ],
        **_submitter(draft, department, otp_session),
    )


def _project_payload(
    draft: ProjectDraft, rows: list[TeamMember], department: str, otp_session: str
) -> ProjectPayload:
    return ProjectPayload(
        title=draft.title.strip(),
        abstract=optional(draft.abstract),
        description=optional(draft.description),
        project_type=draft.project_type,
        supervisor_name=draft.supervisor_name.strip(),
        supervisor_email=optional(draft.supervisor_email),
        start_date=optional_date(draft.start_date),
        end_date=optional_date(draft.end_date),
        academic_year=optional(draft.academic_year),
        github_url=optional(draft.github_url),
        demo_url=optional(draft.demo_url),
        technologies_used=optional(draft.technologies_used),
        members=[
            MemberPayload(
                full_name=member.full_name.strip(),
                roll_number=member.roll_number.strip(),
                email=optional(member.email),
                role=optional(member.role),
            )
            for member in rows
        ],
        **_submitter(draft, department, otp_session),
    )


def _research_payload(
    draft: ResearchDraft, rows: list[Participant], department: str, otp_session: str
) -> ResearchPayload:
    return ResearchPayload(
        title=draft.title.strip(),
        abstract=optional(draft.abstract),
        description=optional(draft.description),
        research_type=draft.research_type,
        status=draft.status,
        principal_investigator=draft.principal_investigator.strip(),
        pi_email=draft.pi_email.strip(),
        start_date=optional_date(draft.start_date),
        end_date=optional_date(draft.end_date),
        funding_agency=optional(draft.funding_agency),
        funding_amount=optional_float(draft.funding_amount),
        keywords=optional(draft.keywords),
        methodology=optional(draft.methodology),
        expected_outcomes=optional(draft.expected_outcomes),
        publications_url=optional(draft.publications_url),
        project_url=optional(draft.project_url),
        github_url=optional(draft.github_url),
        participants=[
            ParticipantPayload(
                full_name=participant.full_name.strip(),
                participant_type=participant.participant_type,
                email=optional(participant.email),
                role=optional(participant.role),
                department=department,
            )
            for participant in rows
        ],
        **_submitter(draft, department, otp_session),
    )


JOURNAL = EntityDefinition(
    entity_type="journal",
    purpose=OtpPurpose.JOURNAL_SUBMISSION,
    label="journal article",
    draft_model=JournalDraft,
    subentity_model=Author,
    subentity_field="authors",
    subentity_label="author",
    identifying_fields=("given_name",),
    required_fields={
        "title": "Title is required",
        "genre": "Genre is required",
        "abstract": "Abstract is required",
    },
    build_payload=_journal_payload,
    success_message="Journal article submitted",
)

PROJECT = EntityDefinition(
    entity_type="project",
    purpose=OtpPurpose.PROJECT_SUBMISSION,
    label="project",
    draft_model=ProjectDraft,
    subentity_model=TeamMember,
    subentity_field="members",
    subentity_label="team member",
    identifying_fields=("full_name", "roll_number"),
    required_fields={
        "title": "Title is required",
        "supervisor_name": "Supervisor name is required",
    },
    build_payload=_project_payload,
    email_fields=("submitted_by_email", "supervisor_email"),
    url_fields=("github_url", "demo_url"),
    date_fields=("start_date", "end_date"),
    choice_fields={"project_type": PROJECT_TYPES},
    success_message="Project submitted for review",
)

RESEARCH = EntityDefinition(
    entity_type="research",
    purpose=OtpPurpose.RESEARCH_SUBMISSION,
    label="research",
    draft_model=ResearchDraft,
    subentity_model=Participant,
    subentity_field="participants",
    subentity_label="participant",
    identifying_fields=("full_name",),
    required_fields={
        "title": "Title is required",
        "principal_investigator": "Principal investigator is required",
        "pi_email": "Principal investigator email is required",
    },
    build_payload=_research_payload,
    email_fields=("submitted_by_email", "pi_email"),
    url_fields=("publications_url", "project_url", "github_url"),
    date_fields=("start_date", "end_date"),
    choice_fields={"research_type": RESEARCH_TYPES, "status": RESEARCH_STATUSES},
    subentity_choices={"participant_type": PARTICIPANT_TYPES},
    success_message="Research submitted for departmental review",
)

ENTITIES: dict[str, EntityDefinition] = {
    definition.entity_type: definition for definition in (PROJECT, RESEARCH, JOURNAL)
}


def get_entity(entity_type: str) -> EntityDefinition:
    """Look up a definition by its entity type.

    Raises:
        ValueError: If the type is unknown
    """
    try:
        return ENTITIES[entity_type]
    except KeyError:
        raise ValueError(f"Unknown submission type: {entity_type}") from None
