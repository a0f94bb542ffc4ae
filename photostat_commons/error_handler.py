"""
AWS error handling utilities for photostat
"""
from typing import Dict, Any
from botocore.exceptions import ClientError, BotoCoreError, ParamValidationError
from pynamodb.exceptions import PynamoDBException, PutError
from .constants import HTTPConstants
from .logger import logger


class AWSErrorHandler:
    """
    Centralized AWS error classification

    Every handler logs the failure and returns a dict describing it. The
    ``error_message`` field is always the underlying service message so it can
    be surfaced to callers as-is.
    """

    @staticmethod
    def _underlying_message(error: Exception) -> str:
        if isinstance(error, ClientError):
            return error.response.get('Error', {}).get('Message') or str(error)
        if isinstance(error, PynamoDBException):
            cause = getattr(error, 'cause', None)
            if isinstance(cause, ClientError):
                return AWSErrorHandler._underlying_message(cause)
            return error.msg or str(error)
        return str(error)

    @staticmethod
    def handle_dynamodb_error(error: Exception, operation: str, table_name: str = None) -> Dict[str, Any]:
        """
        Handle DynamoDB-related errors

        Args:
            error: The exception that occurred
            operation: The operation being performed
            table_name: Optional table name for context

        Returns:
            Standardized error description
        """
        message = AWSErrorHandler._underlying_message(error)
        error_context = {
            'operation': operation,
            'table_name': table_name or 'unknown',
        }

        if isinstance(error, PutError):
            error_type = 'PutError'
        elif isinstance(error, PynamoDBException):
            error_type = 'DatabaseError'
        elif isinstance(error, ClientError):
            error_type = error.response.get('Error', {}).get('Code', 'AWSError')
            error_context['aws_error_code'] = error_type
        else:
            error_type = type(error).__name__

        logger.error(f"DynamoDB operation failed: {operation}", error=error, **error_context)
        return {
            'success': False,
            'error_type': error_type,
            'error_message': message,
            'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
            'retryable': False
        }

    @staticmethod
    def handle_s3_error(error: Exception, operation: str, bucket_name: str = None, key: str = None) -> Dict[str, Any]:
        """
        Handle S3-related errors

        Args:
            error: The exception that occurred
            operation: The operation being performed
            bucket_name: Optional bucket name for context
            key: Optional S3 key for context

        Returns:
            Standardized error description
        """
        error_context = {
            'operation': operation,
            'bucket_name': bucket_name or 'unknown',
            's3_key': key or 'unknown',
        }

        if isinstance(error, ClientError):
            error_type = error.response.get('Error', {}).get('Code', 'AWSError')
            error_context['aws_error_code'] = error_type
        elif isinstance(error, ParamValidationError):
            error_type = 'ParamValidationError'
        elif isinstance(error, BotoCoreError):
            error_type = 'BotoCoreError'
        else:
            error_type = type(error).__name__

        logger.error(f"S3 operation failed: {operation}", error=error, **error_context)
        return {
            'success': False,
            'error_type': error_type,
            'error_message': AWSErrorHandler._underlying_message(error),
            'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
            'retryable': False
        }


# Global error handler instance
error_handler = AWSErrorHandler()
