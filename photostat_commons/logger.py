"""
CloudWatch logging utilities for photostat
"""
import json
import sys
import traceback
from datetime import datetime, timezone
from typing import TextIO
from .config import config


SENSITIVE_KEYS = ('password', 'token', 'secret', 'authorization', 'phonenumber', 'phone_number')


class PhotostatLogger:
    """
    Structured JSON-lines logger, one object per line
    """

    def __init__(self, service_name: str = "photostat", stream: TextIO = None):
        self.service_name = service_name
        self.environment = config.environment
        self.debug_enabled = config.enable_debug_logging
        self.stream = stream

    def _log(self, level: str, message: str, **kwargs):
        """Internal log method with structured format"""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level.upper(),
            'service': self.service_name,
            'environment': self.environment,
            'message': message
        }

        if kwargs:
            log_entry.update(kwargs)

        # Lambda: stdout is shipped to CloudWatch. Client: stderr keeps CLI output clean.
        print(json.dumps(log_entry, default=str), file=self.stream or sys.stdout)

    def debug(self, message: str, **kwargs):
        """Log debug message (only if debug enabled)"""
        if self.debug_enabled:
            self._log('debug', message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log('info', message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log('warning', message, **kwargs)

    def error(self, message: str, error: Exception = None, **kwargs):
        """Log error message with optional exception details"""
        log_data = kwargs.copy()

        if error:
            log_data['error_type'] = type(error).__name__
            log_data['error_message'] = str(error)
            log_data['traceback'] = traceback.format_exc()

        self._log('error', message, **log_data)

    def log_lambda_start(self, function_name: str, event: dict, context=None):
        """Log Lambda function start"""
        log_data = {
            'function_name': function_name,
            'request_id': getattr(context, 'aws_request_id', 'unknown') if context else 'unknown',
            'event_keys': list(event.keys()) if isinstance(event, dict) else 'non-dict',
        }

        if isinstance(event, dict):
            safe_event = {}
            for key, value in event.items():
                if key.lower() in SENSITIVE_KEYS:
                    safe_event[key] = '[REDACTED]'
                elif isinstance(value, (str, int, float, bool)):
                    safe_event[key] = value
                else:
                    safe_event[key] = str(type(value).__name__)
            # Request bodies may carry phone numbers
            if 'body' in safe_event:
                safe_event['body'] = '[REDACTED]'
            log_data['event'] = safe_event

        self._log('info', f"Lambda function {function_name} started", **log_data)

    def log_lambda_end(self, function_name: str, success: bool = True, duration_ms: float = None, **kwargs):
        """Log Lambda function completion"""
        log_data = {
            'function_name': function_name,
            'success': success,
        }

        if duration_ms is not None:
            log_data['duration_ms'] = round(duration_ms, 2)

        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"Lambda function {function_name} {'completed' if success else 'failed'}"

        self._log(level, message, **log_data)

    def log_service_operation(self, operation: str, **kwargs):
        self._log('info', f"Service operation: {operation}", operation=operation, **kwargs)

    def log_database_operation(self, table_name: str, operation: str, success: bool = True, **kwargs):
        """Log database operation"""
        log_data = {
            'table_name': table_name,
            'operation': operation,
            'success': success
        }
        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"Database {operation} on {table_name} {'succeeded' if success else 'failed'}"

        self._log(level, message, **log_data)

    def log_s3_operation(self, bucket_name: str, operation: str, key: str = None, success: bool = True, **kwargs):
        """Log S3 operation"""
        log_data = {
            'bucket_name': bucket_name,
            'operation': operation,
            'success': success
        }

        if key:
            log_data['s3_key'] = key

        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"S3 {operation} on {bucket_name} {'succeeded' if success else 'failed'}"

        self._log(level, message, **log_data)


# Global logger instances
logger = PhotostatLogger("photostat")
upload_logger = PhotostatLogger("upload-service")
phone_logger = PhotostatLogger("phone-service")
client_logger = PhotostatLogger("photostat-client", stream=sys.stderr)
