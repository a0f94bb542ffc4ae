"""
Photostat Constants
"""


class HTTPConstants:
    """HTTP status codes and headers"""

    # Status codes
    OK = 200
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500

    # Headers
    CONTENT_TYPE = 'Content-Type'
    ACCESS_CONTROL_ALLOW_ORIGIN = 'Access-Control-Allow-Origin'
    ACCESS_CONTROL_ALLOW_HEADERS = 'Access-Control-Allow-Headers'
    ACCESS_CONTROL_ALLOW_METHODS = 'Access-Control-Allow-Methods'

    # MIME types
    JSON = 'application/json'


class UploadConstants:
    """Guest photo upload constants"""

    # Accepted selections: any image/* type plus HEIC files the OS may not label
    ACCEPTED_MIME_PREFIX = 'image/'
    ACCEPTED_EXTRA_EXTENSIONS = ['.heic']

    PUBLIC_URL_TEMPLATE = 'https://{bucket}.s3.{region}.amazonaws.com/{key}'


class PhoneConstants:
    """Phone number formatting and validation"""

    # E.164-like: optional +, leading 1-9, 2 to 15 digits total
    PHONE_PATTERN = r'^\+?[1-9]\d{1,14}$'
    DISPLAY_DIGITS = 10


class SessionConstants:
    """Client-side session marker"""

    HAS_UPLOADED_KEY = 'hasUploaded'
    HAS_UPLOADED_VALUE = 'true'


class TimingConstants:
    """Client-side timing (seconds)"""

    TICK_INTERVAL = 1.0
    SHAKE_DURATION = 0.5
    CONFIRMATION_DURATION = 2.0


class ErrorMessages:
    """Standard error messages"""

    INVALID_JSON = 'Invalid JSON in request body'
    INTERNAL_ERROR = 'Internal server error occurred'

    UPLOAD_URL_FAILED = 'Failed to generate upload URL'
    SIGNED_URL_FAILED = 'Failed to get signed URL'
    TRANSFER_FAILED = 'Failed to upload file'
    UNKNOWN_UPLOAD_ERROR = 'An unknown error occurred'

    STORE_PHONE_FAILED = 'Failed to store phone number'
    INVALID_SERVER_RESPONSE = 'Received invalid response from server'
    INVALID_PHONE = 'Please enter a valid phone number'
    PHONE_SAVE_FAILED = 'Failed to save your phone number. Please try again.'


class SuccessMessages:
    """Standard success messages"""

    PHONE_STORED = 'Phone number stored successfully'
    NOTIFICATION_CONFIRMED = "You'll be notified when your photos are ready!"
