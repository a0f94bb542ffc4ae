"""
Upload service: issues signed PUT URLs for guest photos
"""
from abc import ABC, abstractmethod
from typing import Optional
import boto3
from botocore.config import Config as BotoConfig
from ..config import config
from ..contracts import SignedUploadGrant
from ..exceptions import IssuerError, ConfigurationError
from ..error_handler import error_handler
from ..logger import upload_logger as logger
from ..utils import generate_upload_key


class UploadGrantIssuer(ABC):
    """Anything that can hand out a SignedUploadGrant for a file"""

    @abstractmethod
    def issue_upload_grant(self, filename: str, content_type: str) -> SignedUploadGrant:
        """
        Raises:
            IssuerError: If no grant could be produced
        """


class S3UploadGrantIssuer(UploadGrantIssuer):
    """
    Presigns ``put_object`` requests against the photo bucket

    Issuing a grant never writes to the bucket; the object only appears once
    the client performs the PUT.
    """

    def __init__(
        self,
        bucket_name: Optional[str] = None,
        region: Optional[str] = None,
        expiry_seconds: Optional[int] = None,
        key_prefix: Optional[str] = None,
        s3_client=None
    ):
        self.bucket_name = bucket_name or config.photo_bucket_name
        self.region = region or config.aws_region
        self.expiry_seconds = expiry_seconds if expiry_seconds is not None else config.presigned_url_expiry
        self.key_prefix = key_prefix if key_prefix is not None else config.upload_key_prefix
        self._s3_client = s3_client

    @property
    def s3_client(self):
        """Lazy initialization of the S3 client (SigV4, regional endpoint)"""
        if self._s3_client is None:
            self._s3_client = boto3.client(
                's3',
                region_name=self.region,
                config=BotoConfig(signature_version='s3v4')
            )
        return self._s3_client

    def issue_upload_grant(self, filename: str, content_type: str) -> SignedUploadGrant:
        if not self.bucket_name:
            raise ConfigurationError("S3 bucket not configured", config_key='photo-bucket-name')

        key = generate_upload_key(filename, prefix=self.key_prefix)

        logger.log_service_operation(
            "issue_upload_grant",
            bucket_name=self.bucket_name,
            s3_key=key,
            content_type=content_type
        )

        try:
            upload_url = self.s3_client.generate_presigned_url(
                'put_object',
                Params={
                    'Bucket': self.bucket_name,
                    'Key': key,
                    'ContentType': content_type
                },
                ExpiresIn=self.expiry_seconds
            )
        except Exception as e:
            error_response = error_handler.handle_s3_error(e, 'generate_presigned_url', self.bucket_name, key)
            raise IssuerError(
                "Error generating signed URL",
                bucket=self.bucket_name,
                key=key,
                original_error=error_response['error_message']
            ) from e

        logger.log_s3_operation(self.bucket_name, 'presign_put', key=key, expires_in=self.expiry_seconds)
        return SignedUploadGrant(upload_url=upload_url, key=key)
