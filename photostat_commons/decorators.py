"""
Lambda request decorators for photostat
"""
import time
from functools import wraps
from typing import List, Callable
from .constants import HTTPConstants, ErrorMessages
from .exceptions import ValidationError
from .validation_utils import validate_required_fields
from .utils import create_error_response, parse_request_body
from .logger import logger


def api_gateway_handler(
    required_fields: List[str] = None,
    log_requests: bool = True,
    error_message: str = ErrorMessages.INTERNAL_ERROR
):
    """
    Decorator for API Gateway proxy handlers

    Parses the JSON body into ``event['parsed_body']``, rejects requests with
    missing fields, logs start/end and turns any escaping exception into a
    structured JSON error response.

    Args:
        required_fields: List of required, non-empty fields in the request body
        log_requests: Whether to log request start/end
        error_message: Message returned for unexpected failures
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(event, context):
            start_time = time.time()
            function_name = getattr(func, '__name__', 'unknown')

            if log_requests:
                logger.log_lambda_start(function_name, event, context)

            def finish(success: bool, **kwargs):
                if log_requests:
                    duration_ms = (time.time() - start_time) * 1000
                    logger.log_lambda_end(function_name, success, duration_ms, **kwargs)

            try:
                body = parse_request_body(event)
                event['parsed_body'] = body

                if required_fields:
                    missing_fields = validate_required_fields(body, required_fields)
                    if missing_fields:
                        raise ValidationError(
                            f'Missing required fields: {", ".join(missing_fields)}',
                            missing_fields=missing_fields
                        )

                result = func(event, context)

                finish(result.get('statusCode', HTTPConstants.OK) < HTTPConstants.BAD_REQUEST)
                return result

            except ValidationError as e:
                finish(False, error=e.message, **e.details)
                error_body = e.to_dict()
                # Field-level details sit at the top level of the response body
                error_body.update(error_body.pop('details', {}))
                message = error_body.pop('error')
                return create_error_response(HTTPConstants.BAD_REQUEST, message, event, error_body)

            except ValueError as e:
                finish(False, error=str(e))
                return create_error_response(HTTPConstants.BAD_REQUEST, str(e), event)

            except Exception as e:
                finish(False, error=str(e))
                logger.error(f"Unexpected error in {function_name}", error=e)
                return create_error_response(HTTPConstants.INTERNAL_SERVER_ERROR, error_message, event)

        return wrapper
    return decorator
