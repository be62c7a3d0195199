"""Pytest fixtures for department submissions tests."""

import asyncio

import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeOtpBackend:
    """In-memory OTP backend recording every call.

    Set ``request_error``/``verify_error`` to make the next calls fail, or
    ``gate`` to hold calls until the event is set.
    """

    def __init__(self, session_id: str = "sess-1"):
        self.session_id = session_id
        self.requests: list[tuple] = []
        self.verifications: list[tuple] = []
        self.request_error: Exception | None = None
        self.verify_error: Exception | None = None
        self.gate: asyncio.Event | None = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False

    async def request(self, purpose, email, full_name):
        self.requests.append((purpose, email, full_name))
        if self.gate is not None:
            await self.gate.wait()
        if self.request_error is not None:
            raise self.request_error

    async def verify(self, purpose, email, code):
        self.verifications.append((purpose, email, code))
        if self.gate is not None:
            await self.gate.wait()
        if self.verify_error is not None:
            raise self.verify_error
        return self.session_id


class FakeGateway:
    """Gateway stand-in that records payloads instead of sending them."""

    def __init__(self, result=None, error: Exception | None = None):
        self.result = {"id": "sub-1"} if result is None else result
        self.error = error
        self.calls: list[tuple] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False

    async def submit(self, entity_type, payload):
        self.calls.append((entity_type, payload))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def otp_backend():
    return FakeOtpBackend()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def journal_values():
    """Minimal journal draft that passes validation."""
    return {
        "title": "Edge AI",
        "genre": "Original Article",
        "abstract": "...",
        "submitted_by_name": "Ram Thapa",
        "submitted_by_email": "ram@tcioe.edu.np",
        "authors": [{"given_name": "Ram"}],
    }


@pytest.fixture
def project_values():
    """Minimal project draft that passes validation."""
    return {
        "title": "Smart Irrigation",
        "supervisor_name": "Dr. Sharma",
        "submitted_by_name": "Sita Rai",
        "submitted_by_email": "sita@tcioe.edu.np",
        "members": [{"full_name": "Sita Rai", "roll_number": "076BCT001"}],
    }


@pytest.fixture
def research_values():
    """Minimal research draft that passes validation."""
    return {
        "title": "Flood Forecasting",
        "principal_investigator": "Dr. Karki",
        "pi_email": "karki@tcioe.edu.np",
        "submitted_by_name": "Hari Karki",
        "submitted_by_email": "hari@tcioe.edu.np",
        "participants": [{"full_name": "Hari Karki"}],
    }
