"""OTP verification enums and backend response schema."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field


class OtpPurpose(str, Enum):
    """What a verification is for; keys the OTP backend together with the email."""

    PROJECT_SUBMISSION = "project_submission"
    RESEARCH_SUBMISSION = "research_submission"
    JOURNAL_SUBMISSION = "journal_submission"


class OtpStatus(str, Enum):
    """Lifecycle of one email verification attempt."""

    IDLE = "idle"
    SENDING = "sending"
    SENT = "sent"
    VERIFYING = "verifying"
    VERIFIED = "verified"
    ERROR = "error"


class OtpVerification(BaseModel):
    """Body returned by the OTP backend after a successful verification."""

    session_id: str = Field(
        validation_alias=AliasChoices("session_id", "otp_session", "sessionId"),
        min_length=1,
    )

    model_config = {"extra": "allow"}
