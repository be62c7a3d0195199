"""OTP-gated project, research and journal submissions for department portals."""

__version__ = "0.1.0"
