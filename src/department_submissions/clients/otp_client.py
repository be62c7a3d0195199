"""HTTP client for the submission OTP backend."""

import logging

from pydantic import ValidationError as PydanticValidationError

from department_submissions.exceptions import UpstreamError
from schemas.otp import OtpPurpose, OtpVerification

from .client import Client

logger = logging.getLogger(__name__)


class OtpClient(Client):
    """Requests and verifies one-time passwords keyed by (purpose, email).

    Example:
        async with OtpClient({"base_url": "https://cdn.tcioe.edu.np"}) as otp:
            await otp.request(OtpPurpose.JOURNAL_SUBMISSION, email, name)
            session_id = await otp.verify(OtpPurpose.JOURNAL_SUBMISSION, email, code)
    """

    REQUEST_PATH = "/api/v1/public/submission-otp/request/"
    VERIFY_PATH = "/api/v1/public/submission-otp/verify/"

    async def request(self, purpose: OtpPurpose, email: str, full_name: str) -> None:
        """Ask the backend to email a code to ``email``."""
        await self.post(
            self.REQUEST_PATH,
            {"purpose": purpose.value, "email": email, "full_name": full_name},
            fallback="Unable to send verification code",
        )

    async def verify(self, purpose: OtpPurpose, email: str, code: str) -> str:
        """Exchange a code for a verification session id.

        Raises:
            UpstreamError: If the code is rejected, or the backend accepts it
                without issuing a session id
        """
        data = await self.post(
            self.VERIFY_PATH,
            {"purpose": purpose.value, "email": email, "otp": code},
            fallback="Unable to verify the code",
        )
        try:
            return OtpVerification.model_validate(data).session_id
        except PydanticValidationError as e:
            logger.warning(f"Verification response without session id: {data!r}")
            raise UpstreamError(
                "Verification did not return a session",
                status_code=200,
                body=data,
            ) from e
