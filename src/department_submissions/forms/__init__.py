"""Client-side submission workflow: OTP verification, sub-records and forms."""

from .controller import FormState, SubmissionFormController
from .entities import ENTITIES, JOURNAL, PROJECT, RESEARCH, EntityDefinition, get_entity
from .otp_session import OtpBackend, OtpSession
from .subentities import SubentityList

__all__ = [
    "ENTITIES",
    "EntityDefinition",
    "FormState",
    "JOURNAL",
    "OtpBackend",
    "OtpSession",
    "PROJECT",
    "RESEARCH",
    "SubentityList",
    "SubmissionFormController",
    "get_entity",
]
