"""
Store Phone Number Lambda Function
Records a phone number to text once the photos are developed
"""
import json
from photostat_commons.constants import HTTPConstants, ErrorMessages, SuccessMessages
from photostat_commons.contracts import StorePhoneNumberRequest, StorePhoneNumberResponse
from photostat_commons.decorators import api_gateway_handler
from photostat_commons.exceptions import StoreError
from photostat_commons.logger import phone_logger as logger
from photostat_commons.services.service_container import get_service
from photostat_commons.utils import create_response, create_error_response


@api_gateway_handler(error_message=ErrorMessages.STORE_PHONE_FAILED)
def lambda_handler(event, context):
    """
    POST /api/storePhoneNumber

    Request:  {"phoneNumber": str}
    Response: {"message": str}

    The value is stored as received; format checks happen in the client.
    Repeated submissions create repeated records.
    """
    request = StorePhoneNumberRequest.from_body(event['parsed_body'])

    try:
        get_service('phone_service').append_phone_record(request.phone_number)
    except StoreError as e:
        logger.error("Error inserting phone number", error=e)
        return create_error_response(HTTPConstants.INTERNAL_SERVER_ERROR, e.message, event)

    logger.info("Stored phone number")
    response = StorePhoneNumberResponse(message=SuccessMessages.PHONE_STORED)
    return create_response(HTTPConstants.OK, json.dumps(response.to_dict()), event)
