"""Tests for submission exception classes."""

from department_submissions.exceptions import (
    ClientError,
    NetworkError,
    PreconditionError,
    SubmissionError,
    UpstreamError,
    ValidationError,
)


class TestSubmissionError:
    """Tests for the base SubmissionError exception."""

    def test_instantiation_with_message(self):
        """SubmissionError stores the error message."""
        error = SubmissionError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_inheritance(self):
        """SubmissionError is an Exception."""
        assert isinstance(SubmissionError("test"), Exception)


class TestValidationError:
    """Tests for ValidationError exception."""

    def test_stores_field_errors(self):
        """ValidationError keeps a copy of the field errors."""
        errors = {"title": "Title is required"}
        error = ValidationError("Title is required", errors=errors)
        errors["genre"] = "Genre is required"

        assert error.errors == {"title": "Title is required"}

    def test_default_errors_empty(self):
        """ValidationError defaults to no field errors."""
        assert ValidationError("Invalid").errors == {}

    def test_is_local(self):
        """ValidationError is not a remote failure."""
        error = ValidationError("Invalid")

        assert isinstance(error, SubmissionError)
        assert not isinstance(error, ClientError)


class TestPreconditionError:
    """Tests for PreconditionError exception."""

    def test_inheritance(self):
        error = PreconditionError("Verify your campus email before submitting")

        assert isinstance(error, SubmissionError)
        assert not isinstance(error, ClientError)


class TestNetworkError:
    """Tests for NetworkError exception."""

    def test_inheritance(self):
        """NetworkError inherits from ClientError."""
        error = NetworkError("Network unreachable")

        assert error.message == "Network unreachable"
        assert isinstance(error, ClientError)
        assert isinstance(error, SubmissionError)


class TestUpstreamError:
    """Tests for UpstreamError exception."""

    def test_instantiation_with_status_code(self):
        """UpstreamError stores message, status code and body."""
        error = UpstreamError("Duplicate title", status_code=400, body={"detail": "Duplicate title"})

        assert error.message == "Duplicate title"
        assert error.status_code == 400
        assert error.body == {"detail": "Duplicate title"}

    def test_default_body(self):
        """UpstreamError defaults to an empty body."""
        assert UpstreamError("Server error", status_code=500).body == {}

    def test_inheritance(self):
        """UpstreamError inherits from ClientError."""
        assert isinstance(UpstreamError("test", status_code=500), ClientError)
