"""
HTTP client for the photostat endpoints and the direct storage PUT
"""
from typing import Any, Dict, Optional
import requests
from ..constants import HTTPConstants, ErrorMessages
from ..contracts import UploadImageRequest, SignedUploadGrant, StorePhoneNumberRequest
from ..exceptions import IssuerError, TransferError, StoreError
from ..logger import client_logger as logger
from ..services.upload_service import UploadGrantIssuer
from ..services.phone_service import PhoneRecordStore
from .orchestrator import UploadTransport


UPLOAD_IMAGE_PATH = '/api/uploadImage'
STORE_PHONE_NUMBER_PATH = '/api/storePhoneNumber'


def _json_or_none(response: requests.Response) -> Optional[Dict[str, Any]]:
    content_type = response.headers.get(HTTPConstants.CONTENT_TYPE, '')
    if HTTPConstants.JSON not in content_type:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


class PhotostatClient(UploadGrantIssuer, UploadTransport, PhoneRecordStore):
    """
    Talks to the deployed API

    Doubles as the orchestrator's issuer and transport and as the
    notification form's record store.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 30):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def issue_upload_grant(self, filename: str, content_type: str) -> SignedUploadGrant:
        body = UploadImageRequest(filename=filename, content_type=content_type).to_dict()
        try:
            response = self.session.post(f"{self.base_url}{UPLOAD_IMAGE_PATH}", json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise IssuerError(str(e), original_error=type(e).__name__) from e

        data = _json_or_none(response)
        if not response.ok:
            message = (data or {}).get('error') or ErrorMessages.SIGNED_URL_FAILED
            raise IssuerError(message)

        try:
            grant = SignedUploadGrant.from_dict(data or {})
        except KeyError:
            raise IssuerError(ErrorMessages.SIGNED_URL_FAILED)

        logger.info("Received signed URL", filename=filename, s3_key=grant.key)
        return grant

    def transfer(self, grant: SignedUploadGrant, data: bytes, content_type: str) -> None:
        try:
            response = self.session.put(
                grant.upload_url,
                data=data,
                headers={HTTPConstants.CONTENT_TYPE: content_type},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransferError(str(e), key=grant.key) from e

        # Redirects count as failures; the signed URL must be answered directly
        if not 200 <= response.status_code < 300:
            logger.error("Upload failed", status_code=response.status_code, body=response.text[:500], s3_key=grant.key)
            raise TransferError(ErrorMessages.TRANSFER_FAILED, status_code=response.status_code, key=grant.key)

    def append_phone_record(self, phone_number: Optional[str]) -> str:
        """
        Returns:
            The confirmation message from the endpoint
        """
        body = StorePhoneNumberRequest(phone_number=phone_number).to_dict()
        try:
            response = self.session.post(f"{self.base_url}{STORE_PHONE_NUMBER_PATH}", json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise StoreError(str(e)) from e

        data = _json_or_none(response)
        if data is None:
            logger.error("Received non-JSON response", status_code=response.status_code, body=response.text[:500])
            raise StoreError(ErrorMessages.INVALID_SERVER_RESPONSE)

        if not response.ok:
            logger.error("Error response from API", status_code=response.status_code, response=data)
            raise StoreError(data.get('error') or ErrorMessages.STORE_PHONE_FAILED)

        return data.get('message', '')
