"""Email verification state for one submission form."""

import logging
from typing import Protocol

from department_submissions.exceptions import (
    ClientError,
    PreconditionError,
    UpstreamError,
    ValidationError,
)
from schemas.otp import OtpPurpose, OtpStatus

logger = logging.getLogger(__name__)


class OtpBackend(Protocol):
    """Anything that can send and check codes keyed by (purpose, email)."""

    async def request(self, purpose: OtpPurpose, email: str, full_name: str) -> None: ...

    async def verify(self, purpose: OtpPurpose, email: str, code: str) -> str: ...


class OtpSession:
    """Lifecycle of one email verification attempt for one purpose.

    ``session_id`` is set if and only if ``status`` is VERIFIED, and ``error``
    only while ``status`` is ERROR. Committing a different email resets the
    session, so a verification can never be reused for another address.

    Every reset bumps an epoch. A backend response that comes back after
    the epoch moved on belongs to a session that no longer exists and is
    dropped instead of applied.
    """

    def __init__(self, purpose: OtpPurpose | str, backend: OtpBackend, email: str = ""):
        self.purpose = OtpPurpose(purpose)
        self._backend = backend
        self._email = email.strip()
        self._epoch = 0
        self._code_delivered = False
        self.status = OtpStatus.IDLE
        self.session_id: str | None = None
        self.error: str | None = None

    @property
    def email(self) -> str:
        return self._email

    @property
    def in_flight(self) -> bool:
        return self.status in (OtpStatus.SENDING, OtpStatus.VERIFYING)

    @property
    def is_verified(self) -> bool:
        return self.status is OtpStatus.VERIFIED and bool(self.session_id)

    @property
    def can_verify(self) -> bool:
        if self.status is OtpStatus.SENT:
            return True
        return self.status is OtpStatus.ERROR and self._code_delivered

    def bind_email(self, email: str) -> bool:
        """Commit the email field's value. Returns True if it changed."""
        email = email.strip()
        if email == self._email:
            return False
        self._email = email
        self.reset()
        return True

    def reset(self) -> None:
        """Return to IDLE, forgetting any verification or error."""
        self._epoch += 1
        self._code_delivered = False
        self.status = OtpStatus.IDLE
        self.session_id = None
        self.error = None
        logger.debug(f"OTP session for {self.purpose.value} reset")

    def _fail(self, message: str) -> None:
        self.status = OtpStatus.ERROR
        self.session_id = None
        self.error = message

    async def request_otp(self, email: str, full_name: str) -> None:
        """Ask the backend to send a code to ``email``.

        Raises:
            ValidationError: If the email or name is blank
            PreconditionError: If another request is already in flight
            ClientError: If the backend call fails (after moving to ERROR)
        """
        email = email.strip()
        full_name = full_name.strip()
        errors = {}
        if not full_name:
            errors["submitted_by_name"] = "Required"
        if not email:
            errors["submitted_by_email"] = "Required"
        if errors:
            raise ValidationError("Enter your name and campus email", errors=errors)
        if self.in_flight:
            raise PreconditionError("A verification request is already in progress")

        self.bind_email(email)
        epoch = self._epoch
        self.status = OtpStatus.SENDING
        self.session_id = None
        self.error = None
        logger.debug(f"Requesting {self.purpose.value} code for {email}")

        try:
            await self._backend.request(self.purpose, email, full_name)
        except ClientError as e:
            if epoch != self._epoch:
                logger.debug(f"Discarding stale OTP request failure for {email}")
                return
            self._fail(e.message or "Unable to send verification code")
            raise
        except Exception:
            if epoch == self._epoch:
                self._fail("Unable to send verification code")
            raise

        if epoch != self._epoch:
            logger.debug(f"Discarding stale OTP request response for {email}")
            return
        self._code_delivered = True
        self.status = OtpStatus.SENT
        logger.info(f"Verification code sent to {email}")

    async def verify_otp(self, email: str, code: str) -> None:
        """Exchange ``code`` for a session id.

        Raises:
            ValidationError: If the code is blank
            PreconditionError: If no code has been sent to this email, or a
                request is already in flight
            ClientError: If the backend rejects the code (after moving to ERROR)
        """
        code = code.strip()
        if not code:
            raise ValidationError("Enter the OTP from your inbox", errors={"otp_code": "Required"})
        if self.in_flight:
            raise PreconditionError("A verification request is already in progress")
        if self.bind_email(email) or not self.can_verify:
            raise PreconditionError("Request a verification code first")

        epoch = self._epoch
        self.status = OtpStatus.VERIFYING
        self.error = None

        try:
            session_id = await self._backend.verify(self.purpose, self._email, code)
        except ClientError as e:
            if epoch != self._epoch:
                logger.debug(f"Discarding stale OTP verify failure for {self._email}")
                return
            self._fail(e.message or "Unable to verify the code")
            raise
        except Exception:
            if epoch == self._epoch:
                self._fail("Unable to verify the code")
            raise

        if epoch != self._epoch:
            logger.debug(f"Discarding stale OTP verification for {self._email}")
            return
        if not session_id:
            self._fail("Verification did not return a session")
            raise UpstreamError(self.error, status_code=200)
        self.status = OtpStatus.VERIFIED
        self.session_id = session_id
        logger.info(f"Email {self._email} verified for {self.purpose.value}")
