"""
Unit tests for upload-image Lambda function
"""
import json
from unittest.mock import MagicMock

from photostat_commons.exceptions import IssuerError
from photostat_commons.services.service_container import register_service


def make_event(api_gateway_event, body):
    api_gateway_event['path'] = '/api/uploadImage'
    api_gateway_event['body'] = body if isinstance(body, str) else json.dumps(body)
    return api_gateway_event


class TestUploadImageHandler:

    def test_returns_signed_url_and_key(self, upload_image_app, aws_mock, api_gateway_event, lambda_context):
        event = make_event(api_gateway_event, {'filename': 'party.jpg', 'contentType': 'image/jpeg'})

        response = upload_image_app.lambda_handler(event, lambda_context)

        assert response['statusCode'] == 200
        assert response['headers']['Content-Type'] == 'application/json'
        assert response['headers']['Access-Control-Allow-Origin'] == '*'
        body = json.loads(response['body'])
        assert set(body) == {'uploadUrl', 'key'}
        assert body['key'].startswith('uploads/')
        assert body['key'].endswith('-party.jpg')
        assert 'X-Amz-Signature=' in body['uploadUrl']

    def test_missing_content_type(self, upload_image_app, api_gateway_event, lambda_context):
        event = make_event(api_gateway_event, {'filename': 'party.jpg'})

        response = upload_image_app.lambda_handler(event, lambda_context)

        assert response['statusCode'] == 400
        body = json.loads(response['body'])
        assert body['error'] == 'Missing required fields: contentType'
        assert body['missing_fields'] == ['contentType']
        assert body['error_code'] == 'VALIDATION_ERROR'

    def test_empty_body(self, upload_image_app, api_gateway_event, lambda_context):
        event = make_event(api_gateway_event, '')

        response = upload_image_app.lambda_handler(event, lambda_context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['missing_fields'] == ['filename', 'contentType']

    def test_invalid_json(self, upload_image_app, api_gateway_event, lambda_context):
        event = make_event(api_gateway_event, '{"filename": ')

        response = upload_image_app.lambda_handler(event, lambda_context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['error'] == 'Invalid JSON in request body'

    def test_issuer_failure(self, upload_image_app, api_gateway_event, lambda_context):
        issuer = MagicMock()
        issuer.issue_upload_grant.side_effect = IssuerError('Error generating signed URL', original_error='Access Denied')
        register_service('upload_service', issuer)
        event = make_event(api_gateway_event, {'filename': 'party.jpg', 'contentType': 'image/jpeg'})

        response = upload_image_app.lambda_handler(event, lambda_context)

        assert response['statusCode'] == 500
        body = json.loads(response['body'])
        assert body['success'] is False
        assert body['error'] == 'Failed to generate upload URL'
        issuer.issue_upload_grant.assert_called_once_with('party.jpg', 'image/jpeg')

    def test_unexpected_failure(self, upload_image_app, api_gateway_event, lambda_context):
        issuer = MagicMock()
        issuer.issue_upload_grant.side_effect = RuntimeError('boom')
        register_service('upload_service', issuer)
        event = make_event(api_gateway_event, {'filename': 'party.jpg', 'contentType': 'image/jpeg'})

        response = upload_image_app.lambda_handler(event, lambda_context)

        assert response['statusCode'] == 500
        assert json.loads(response['body'])['error'] == 'Failed to generate upload URL'

    def test_direct_invocation(self, upload_image_app, aws_mock, lambda_context):
        response = upload_image_app.lambda_handler({'filename': 'a.png', 'contentType': 'image/png'}, lambda_context)

        assert response['statusCode'] == 200
        assert json.loads(response['body'])['key'].endswith('-a.png')
