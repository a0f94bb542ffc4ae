"""
Photostat Exceptions
Custom exception classes for upload, storage and client operations
"""


class PhotostatError(Exception):
    """Base exception for all photostat errors"""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API responses"""
        result = {
            'error': self.message,
            'error_type': self.__class__.__name__
        }
        if self.error_code:
            result['error_code'] = self.error_code
        if self.details:
            result['details'] = self.details
        return result


class ValidationError(PhotostatError):
    """Raised when request fields are missing or malformed"""

    def __init__(self, message: str, field: str = None, value: str = None, missing_fields: list = None):
        self.field = field
        self.value = value
        self.missing_fields = missing_fields or []

        details = {}
        if field:
            details['field'] = field
        if value:
            details['value'] = value
        if self.missing_fields:
            details['missing_fields'] = self.missing_fields

        super().__init__(message, 'VALIDATION_ERROR', details)


class IssuerError(PhotostatError):
    """Raised when a signed upload URL cannot be produced or obtained"""

    def __init__(self, message: str, bucket: str = None, key: str = None, original_error: str = None):
        self.bucket = bucket
        self.key = key
        self.original_error = original_error

        details = {}
        if bucket:
            details['bucket'] = bucket
        if key:
            details['key'] = key
        if original_error:
            details['original_error'] = original_error

        super().__init__(message, 'ISSUER_ERROR', details)


class TransferError(PhotostatError):
    """Raised when the direct PUT to a signed URL does not succeed"""

    def __init__(self, message: str, status_code: int = None, key: str = None):
        self.status_code = status_code
        self.key = key

        details = {}
        if status_code:
            details['status_code'] = status_code
        if key:
            details['key'] = key

        super().__init__(message, 'TRANSFER_ERROR', details)


class StoreError(PhotostatError):
    """Raised when a phone record cannot be persisted"""

    def __init__(self, message: str, table: str = None, original_error: str = None):
        self.table = table
        self.original_error = original_error

        details = {}
        if table:
            details['table'] = table
        if original_error:
            details['original_error'] = original_error

        super().__init__(message, 'STORE_ERROR', details)


class PhoneFormatError(PhotostatError):
    """Raised client side when a phone number fails validation"""

    def __init__(self, message: str, value: str = None):
        self.value = value
        super().__init__(message, 'PHONE_FORMAT_ERROR', {'value': value} if value else None)


class ConfigurationError(PhotostatError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, config_key: str = None):
        self.config_key = config_key
        super().__init__(message, 'CONFIGURATION_ERROR', {'config_key': config_key} if config_key else None)
