"""Custom exception hierarchy for the repository indexer."""


class BSDataIndexError(Exception):
    """Base exception for all indexer errors."""

    def __init__(self, message: str, is_retryable: bool = False) -> None:
        """Initialize exception.

        Args:
            message: Error message
            is_retryable: Whether the operation can be retried
        """
        super().__init__(message)
        self.message = message
        self.is_retryable = is_retryable


class ConfigurationError(BSDataIndexError):
    """Configuration or environment setup error."""

    pass


class IndexingError(BSDataIndexError):
    """Repository indexing pipeline error."""

    pass


class MalformedDocumentError(IndexingError):
    """Data file is missing its root element or a required attribute."""

    def __init__(self, tag: str, message: str, cause: Exception | None = None) -> None:
        """Initialize exception.

        Args:
            tag: Root element name that was expected
            message: Error message
            cause: Underlying parse failure, if any
        """
        super().__init__(f"Invalid {tag} XML: {message}")
        self.tag = tag
        self.cause = cause


class CompressionError(IndexingError):
    """Zip archive could not be written or read."""

    pass


class InvalidUrlError(IndexingError):
    """Base URL and repository name do not form a valid index URL."""

    pass


class SerializationError(IndexingError):
    """Data index could not be written or read as XML."""

    pass
