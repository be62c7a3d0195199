"""Network clients for the portal proxy, the OTP backend and the content API."""

from .client import Client, extract_message, parse_json
from .gateway import SubmissionGateway
from .otp_client import OtpClient
from .upstream import UpstreamClient

__all__ = [
    "Client",
    "OtpClient",
    "SubmissionGateway",
    "UpstreamClient",
    "extract_message",
    "parse_json",
]
