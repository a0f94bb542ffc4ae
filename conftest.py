"""
Pytest configuration and fixtures for photostat tests
Provides AWS mocking, API Gateway events and sample images
"""
import importlib.util
import json
import os
import pytest
import boto3
from moto import mock_aws
from unittest.mock import MagicMock
from PIL import Image


ROOT_DIR = os.path.dirname(os.path.abspath(__file__))

# Set test environment variables before any photostat module reads config
os.environ.update({
    'AWS_DEFAULT_REGION': 'us-east-1',
    'AWS_ACCESS_KEY_ID': 'testing',
    'AWS_SECRET_ACCESS_KEY': 'testing',
    'AWS_SECURITY_TOKEN': 'testing',
    'AWS_SESSION_TOKEN': 'testing',
    'ENVIRONMENT': 'test',
    'PHOTOSTAT_USE_PARAMETER_STORE': 'false',
    'PHOTOSTAT_PHOTO_BUCKET_NAME': 'photostat-photos-test',
    'PHOTOSTAT_AWS_REGION': 'us-east-1',
    'PHOTOSTAT_PHONE_TABLE_NAME': 'PhoneNumbers-test',
    'PHOTOSTAT_PRESIGNED_URL_EXPIRY': '600',
})

TEST_BUCKET = 'photostat-photos-test'
TEST_REGION = 'us-east-1'


def load_function_app(function_dir: str):
    """
    Import ``<function_dir>/app.py`` under a unique module name

    Every Lambda function ships a module called ``app``; loading by path keeps
    them from shadowing each other within one test session.
    """
    path = os.path.join(ROOT_DIR, function_dir, 'app.py')
    module_name = f"{function_dir.replace('-', '_')}_app"
    spec = importlib.util.spec_from_file_location(module_name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def reset_services():
    """Drop cached services so each test registers its own"""
    from photostat_commons.services.service_container import clear_services
    clear_services()
    yield
    clear_services()


@pytest.fixture
def aws_mock():
    """Moto-backed AWS with the photo bucket created"""
    with mock_aws():
        s3 = boto3.client('s3', region_name=TEST_REGION)
        s3.create_bucket(Bucket=TEST_BUCKET)
        yield {'s3': s3}


@pytest.fixture
def phone_table(aws_mock):
    """Moto-backed phone number table"""
    from photostat_commons.models.phone_number import PhoneNumber
    PhoneNumber.create_table(wait=True, billing_mode='PAY_PER_REQUEST')
    yield PhoneNumber


@pytest.fixture
def lambda_context():
    """Mock Lambda context"""
    context = MagicMock()
    context.function_name = 'test-function'
    context.function_version = '$LATEST'
    context.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:test-function'
    context.memory_limit_in_mb = 128
    context.aws_request_id = 'test-request-id'
    return context


@pytest.fixture
def api_gateway_event():
    """Mock API Gateway proxy event"""
    return {
        'httpMethod': 'POST',
        'path': '/test',
        'resource': '/test',
        'requestContext': {
            'accountId': '123456789012',
            'apiId': 'test-api',
            'stage': 'test',
            'requestId': 'test-request-id',
            'identity': {
                'sourceIp': '127.0.0.1'
            }
        },
        'headers': {
            'Content-Type': 'application/json'
        },
        'queryStringParameters': None,
        'body': json.dumps({}),
        'isBase64Encoded': False
    }


@pytest.fixture
def make_image(tmp_path):
    """Factory writing small test images to disk"""
    def _make(name: str = 'party.jpg', image_format: str = 'JPEG', color: str = 'red') -> str:
        path = tmp_path / name
        img = Image.new('RGB', (16, 16), color=color)
        img.save(path, format=image_format)
        return str(path)
    return _make


@pytest.fixture
def upload_image_app():
    """The upload-image Lambda module"""
    return load_function_app('upload-image')


@pytest.fixture
def store_phone_number_app():
    """The store-phone-number Lambda module"""
    return load_function_app('store-phone-number')
