"""Submission form workflow shared by every entity type."""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from department_submissions.clients.gateway import FALLBACK_MESSAGES
from department_submissions.exceptions import (
    ClientError,
    PreconditionError,
    ValidationError,
)

from .entities import EntityDefinition
from .otp_session import OtpBackend, OtpSession
from .subentities import SubentityList

logger = logging.getLogger(__name__)


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"


class SubmissionFormController:
    """Drives one submission form from first keystroke to upstream response.

    Owns the draft, its sub-record list and an OTP session for the
    submitter's email. ``submit`` only goes to the network once the email is
    verified and the draft validates. A failed attempt returns to EDITING
    with ``last_error`` set and leaves the verification in place, so the
    user can fix the problem and resubmit straight away.

    Example:
        form = SubmissionFormController(JOURNAL, department, gateway, otp_client)
        form.set_field("submitted_by_email", "ram@tcioe.edu.np")
        await form.request_otp()
        await form.verify_otp("123456")
        await form.submit()
    """

    def __init__(
        self,
        entity: EntityDefinition,
        department: str,
        gateway,
        otp_backend: OtpBackend,
    ):
        if not department:
            raise ValueError("department is required")

        self.entity = entity
        self.department = department
        self._gateway = gateway
        self.otp = OtpSession(entity.purpose, otp_backend)
        self.draft = entity.new_draft()
        self.subentities: SubentityList = SubentityList(entity.new_subentity)
        self.otp_code = ""
        self.state = FormState.EDITING
        self.field_errors: dict[str, str] = {}
        self.last_error: str | None = None
        self.last_result: Any = None

    @property
    def can_submit(self) -> bool:
        return self.state is not FormState.SUBMITTING and self.otp.is_verified

    def set_field(self, name: str, value: Any) -> None:
        """Edit one draft field.

        Committing a different ``submitted_by_email`` resets the OTP session
        and clears the pending code.
        """
        if name not in type(self.draft).model_fields:
            raise ValueError(f"{self.entity.label} has no field '{name}'")

        setattr(self.draft, name, "" if value is None else str(value))
        self.field_errors.pop(name, None)
        if self.state is FormState.SUCCEEDED:
            self.state = FormState.EDITING

        if name == "submitted_by_email" and self.otp.bind_email(self.draft.submitted_by_email):
            self.otp_code = ""

    def load(self, data: Mapping[str, Any]) -> None:
        """Populate the draft and sub-records from a mapping.

        The sub-records are read from the key named by the entity's
        ``subentity_field`` (e.g. "authors") as a list of mappings.
        """
        rows = data.get(self.entity.subentity_field) or []
        for name, value in data.items():
            if name != self.entity.subentity_field:
                self.set_field(name, value)

        if not isinstance(rows, list):
            raise ValueError(f"'{self.entity.subentity_field}' must be a list of objects")
        for index, row in enumerate(rows):
            if not isinstance(row, Mapping):
                raise ValueError(
                    f"{self.entity.subentity_field}[{index}] must be an object, got {type(row).__name__}"
                )
            if index >= len(self.subentities):
                self.subentities.append()
            for field, value in row.items():
                self.subentities.update(index, field, "" if value is None else str(value))

    async def request_otp(self) -> None:
        await self.otp.request_otp(self.draft.submitted_by_email, self.draft.submitted_by_name)

    async def verify_otp(self, code: str | None = None) -> None:
        if code is not None:
            self.otp_code = code
        await self.otp.verify_otp(self.draft.submitted_by_email, self.otp_code)

    def validate(self) -> dict[str, str]:
        return self.entity.validate(self.draft, self.subentities)

    def build_payload(self) -> dict:
        if not self.otp.is_verified:
            raise PreconditionError("Verify your campus email before submitting")
        return self.entity.payload(
            self.draft, self.subentities, self.department, self.otp.session_id
        )

    def reset(self) -> None:
        """Discard the draft and any verification."""
        self.draft = self.entity.new_draft()
        self.subentities.reset()
        self.otp.reset()
        self.otp_code = ""
        self.field_errors = {}

    async def submit(self) -> Any:
        """Validate, normalize and send the draft.

        Returns:
            The upstream response body

        Raises:
            PreconditionError: If the email is not verified or a submission
                is already in flight; nothing is sent
            ValidationError: If the draft has field errors; nothing is sent
            ClientError: If the gateway call fails
        """
        if self.state is FormState.SUBMITTING:
            raise PreconditionError("A submission is already in progress")
        if not self.otp.is_verified:
            raise PreconditionError("Verify your campus email before submitting")

        errors = self.validate()
        self.field_errors = errors
        if errors:
            first = next(iter(errors.values()))
            raise ValidationError(first, errors=errors)

        payload = self.build_payload()
        self.state = FormState.SUBMITTING
        self.last_error = None
        try:
            result = await self._gateway.submit(self.entity.entity_type, payload)
        except ClientError as e:
            self.state = FormState.EDITING
            self.last_error = e.message
            logger.warning(f"{self.entity.label.capitalize()} submission failed: {e.message}")
            raise
        except Exception:
            self.state = FormState.EDITING
            self.last_error = FALLBACK_MESSAGES[self.entity.entity_type]
            logger.exception(f"{self.entity.label.capitalize()} submission failed")
            raise

        logger.info(f"{self.entity.success_message} by {self.draft.submitted_by_email}")
        self.reset()
        self.last_result = result
        self.state = FormState.SUCCEEDED
        return result
