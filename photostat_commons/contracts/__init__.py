# Photostat Contracts
from .upload_contracts import UploadImageRequest, SignedUploadGrant
from .phone_contracts import StorePhoneNumberRequest, StorePhoneNumberResponse

__all__ = ['UploadImageRequest', 'SignedUploadGrant', 'StorePhoneNumberRequest', 'StorePhoneNumberResponse']
