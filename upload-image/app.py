"""
Upload Image Lambda Function
Issues a signed S3 PUT URL for one guest photo
"""
import json
from photostat_commons.constants import HTTPConstants, ErrorMessages
from photostat_commons.contracts import UploadImageRequest
from photostat_commons.decorators import api_gateway_handler
from photostat_commons.exceptions import IssuerError, ConfigurationError
from photostat_commons.logger import upload_logger as logger
from photostat_commons.services.service_container import get_service
from photostat_commons.utils import create_response, create_error_response


@api_gateway_handler(
    required_fields=['filename', 'contentType'],
    error_message=ErrorMessages.UPLOAD_URL_FAILED
)
def lambda_handler(event, context):
    """
    POST /api/uploadImage

    Request:  {"filename": str, "contentType": str}
    Response: {"uploadUrl": str, "key": str}

    Missing fields are rejected with 400 by the decorator. Signing failures
    are returned as 500 and never retried here.
    """
    request = UploadImageRequest.from_body(event['parsed_body'])

    try:
        grant = get_service('upload_service').issue_upload_grant(request.filename, request.content_type)
    except (IssuerError, ConfigurationError) as e:
        logger.error("Error generating signed URL", error=e, filename=request.filename)
        return create_error_response(HTTPConstants.INTERNAL_SERVER_ERROR, ErrorMessages.UPLOAD_URL_FAILED, event)

    return create_response(HTTPConstants.OK, json.dumps(grant.to_dict()), event)
