"""Exception hierarchy for filedesk."""


class FiledeskError(Exception):
    """Base exception for all filedesk errors."""

    pass


class ValidationError(FiledeskError):
    """Raised when input validation fails."""

    pass


class StorageConfigurationError(FiledeskError):
    """Raised when object storage is not configured (bucket, credentials)."""

    def __init__(self, message: str):
        super().__init__(f"Storage Configuration Error: {message}")


class StorageOperationError(FiledeskError):
    """Raised when a listing, upload or delete call to the store fails."""

    pass


class EncryptionKeyMissingError(FiledeskError):
    """Raised when encryption is requested without a configured key."""

    pass


class DecryptionError(FiledeskError):
    """Raised when a stored value cannot be decrypted."""

    pass
