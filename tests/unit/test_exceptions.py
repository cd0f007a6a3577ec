"""Tests for custom exception hierarchy."""

from bsdata_index.utils.exceptions import (
    BSDataIndexError,
    CompressionError,
    ConfigurationError,
    IndexingError,
    InvalidUrlError,
    MalformedDocumentError,
    SerializationError,
)


def test_base_exception_message() -> None:
    """Test that base exception stores message."""
    error = BSDataIndexError("test error")

    assert str(error) == "test error"
    assert error.message == "test error"
    assert error.is_retryable is False


def test_configuration_error_inheritance() -> None:
    """Test that ConfigurationError inherits from base exception."""
    error = ConfigurationError("config error")

    assert isinstance(error, BSDataIndexError)
    assert str(error) == "config error"


def test_indexing_errors_inheritance() -> None:
    """Test that all pipeline errors are IndexingErrors."""
    for error_class in [CompressionError, InvalidUrlError, SerializationError]:
        error = error_class("pipeline error")
        assert isinstance(error, IndexingError)
        assert isinstance(error, BSDataIndexError)
        assert error.is_retryable is False


def test_malformed_document_error_carries_tag_and_cause() -> None:
    """Test that MalformedDocumentError keeps the expected tag and the cause."""
    cause = ValueError("invalid integer 'x'")
    error = MalformedDocumentError("catalogue", "attribute 'revision'", cause=cause)

    assert isinstance(error, IndexingError)
    assert error.tag == "catalogue"
    assert error.cause is cause
    assert str(error) == "Invalid catalogue XML: attribute 'revision'"


def test_malformed_document_error_without_cause() -> None:
    """Test that the cause is optional."""
    error = MalformedDocumentError("roster", "no <roster> element found")

    assert error.cause is None
