"""
Configuration management for photostat
Supports environment variables, SSM Parameter Store, and local .env files
"""
import os
from datetime import datetime
from typing import Optional, Any
from functools import lru_cache
import boto3
from botocore.exceptions import ClientError, BotoCoreError
from dotenv import load_dotenv


load_dotenv()


class Config:
    """
    Configuration manager with hybrid approach:
    1. Environment Variables (highest priority)
    2. AWS Parameter Store (environment-specific, Lambda only by default)
    3. Local defaults (development fallback)
    """

    def __init__(self):
        self.environment = os.environ.get('ENVIRONMENT', 'dev')
        self.parameter_store_prefix = os.environ.get(
            'PARAMETER_STORE_PREFIX',
            f'/photostat/{self.environment}'
        )
        self.use_parameter_store = (
            'AWS_LAMBDA_FUNCTION_NAME' in os.environ
            or os.environ.get('PHOTOSTAT_USE_PARAMETER_STORE', '').lower() in ('true', '1', 'yes')
        )
        self._ssm_client = None

    @property
    def ssm_client(self):
        """Lazy initialization of SSM client"""
        if self._ssm_client is None and self.use_parameter_store:
            try:
                self._ssm_client = boto3.client('ssm')
            except BotoCoreError:
                # No region/credentials available locally
                self._ssm_client = None
        return self._ssm_client

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """
        Get configuration parameter with fallback hierarchy:
        1. PHOTOSTAT_ prefixed environment variable
        2. Plain environment variable
        3. SSM Parameter Store
        4. Default value
        """
        env_name = key.upper().replace('-', '_')

        env_value = os.environ.get(f"PHOTOSTAT_{env_name}")
        if env_value is not None:
            return env_value

        env_value = os.environ.get(env_name)
        if env_value is not None:
            return env_value

        ssm_value = self.get_ssm_parameter(key)
        if ssm_value is not None:
            return ssm_value

        return default

    @lru_cache(maxsize=128)
    def get_ssm_parameter(self, key: str) -> Optional[str]:
        """
        Get parameter from AWS SSM Parameter Store with caching
        """
        if not self.ssm_client:
            return None

        parameter_name = f"{self.parameter_store_prefix}/{key}"

        try:
            response = self.ssm_client.get_parameter(Name=parameter_name)
            return response['Parameter']['Value']
        except ClientError as e:
            if e.response['Error']['Code'] != 'ParameterNotFound':
                print(f"Error getting SSM parameter {parameter_name}: {e}")
            return None
        except BotoCoreError as e:
            print(f"Unexpected error getting SSM parameter {parameter_name}: {e}")
            return None

    def get_int_parameter(self, key: str, default: int = 0) -> int:
        """Get integer parameter"""
        value = self.get_parameter(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def get_bool_parameter(self, key: str, default: bool = False) -> bool:
        """Get boolean parameter"""
        value = self.get_parameter(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return default

    def get_list_parameter(self, key: str, default: list = None) -> list:
        """Comma-separated string as a list of stripped, non-empty items"""
        value = self.get_parameter(key)
        if not isinstance(value, str):
            return list(default or [])
        return [item.strip() for item in value.split(',') if item.strip()]

    # Storage
    @property
    def photo_bucket_name(self) -> Optional[str]:
        """S3 bucket receiving guest uploads (no default, must be configured)"""
        return self.get_parameter('photo-bucket-name')

    @property
    def aws_region(self) -> str:
        return self.get_parameter('aws-region', os.environ.get('AWS_DEFAULT_REGION', 'us-east-1'))

    @property
    def upload_key_prefix(self) -> str:
        return self.get_parameter('upload-key-prefix', 'uploads')

    @property
    def presigned_url_expiry(self) -> int:
        """Get presigned upload URL expiry in seconds"""
        return self.get_int_parameter('presigned-url-expiry', 600)

    # Phone numbers
    @property
    def phone_table_name(self) -> str:
        return self.get_parameter('phone-table-name', f'PhoneNumbers-{self.environment}')

    # Client
    @property
    def api_base_url(self) -> str:
        return self.get_parameter('api-base-url', 'http://localhost:3000')

    @property
    def session_file(self) -> str:
        """Where the client keeps its local completion marker"""
        return self.get_parameter(
            'session-file',
            os.path.join(os.path.expanduser('~'), '.photostat', 'session.json')
        )

    @property
    def develop_target(self) -> datetime:
        """Wall-clock instant the current batch of photos is 'developed'"""
        return datetime.fromisoformat(self.get_parameter('develop-target', '2025-03-02T10:00:00-05:00'))

    @property
    def develop_duration_seconds(self) -> int:
        return self.get_int_parameter('develop-duration-seconds', 24 * 60 * 60)

    @property
    def enable_debug_logging(self) -> bool:
        """Get debug logging flag"""
        return self.get_bool_parameter('enable-debug-logging', False)

    @property
    def cors_allowed_origins(self) -> list:
        """Get CORS allowed origins"""
        if self.environment in ('dev', 'test'):
            return ['*']
        return self.get_list_parameter('allowed-origins', ['*'])


# Global configuration instance
config = Config()
