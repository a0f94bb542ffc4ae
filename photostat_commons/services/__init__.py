from .upload_service import UploadGrantIssuer, S3UploadGrantIssuer
from .phone_service import PhoneRecordStore, DynamoPhoneRecordStore
from .service_container import get_service, register_service, clear_services

__all__ = [
    'UploadGrantIssuer',
    'S3UploadGrantIssuer',
    'PhoneRecordStore',
    'DynamoPhoneRecordStore',
    'get_service',
    'register_service',
    'clear_services',
]
