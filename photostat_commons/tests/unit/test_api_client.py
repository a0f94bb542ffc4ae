"""
Unit tests for the HTTP client
"""
import json
from unittest.mock import MagicMock

import pytest
import requests

from photostat_commons.client.api_client import PhotostatClient
from photostat_commons.contracts import SignedUploadGrant
from photostat_commons.exceptions import IssuerError, TransferError, StoreError
from photostat_commons.services.upload_service import S3UploadGrantIssuer


def make_response(status_code=200, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    if body is not None:
        response._content = json.dumps(body).encode()
        response.headers['Content-Type'] = 'application/json'
    else:
        response._content = (text or '').encode()
        response.headers['Content-Type'] = 'text/html'
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return PhotostatClient('https://api.example.com/', session=session, timeout=5)


class TestIssueUploadGrant:

    def test_posts_filename_and_content_type(self, client, session):
        session.post.return_value = make_response(body={'uploadUrl': 'https://signed', 'key': 'uploads/1-a.jpg'})

        grant = client.issue_upload_grant('a.jpg', 'image/jpeg')

        assert grant == SignedUploadGrant(upload_url='https://signed', key='uploads/1-a.jpg')
        session.post.assert_called_once_with(
            'https://api.example.com/api/uploadImage',
            json={'filename': 'a.jpg', 'contentType': 'image/jpeg'},
            timeout=5
        )

    def test_error_body_is_surfaced(self, client, session):
        session.post.return_value = make_response(500, {'success': False, 'error': 'Failed to generate upload URL'})

        with pytest.raises(IssuerError) as exc_info:
            client.issue_upload_grant('a.jpg', 'image/jpeg')
        assert exc_info.value.message == 'Failed to generate upload URL'

    def test_error_without_body_uses_default(self, client, session):
        session.post.return_value = make_response(502, text='Bad Gateway')

        with pytest.raises(IssuerError) as exc_info:
            client.issue_upload_grant('a.jpg', 'image/jpeg')
        assert exc_info.value.message == 'Failed to get signed URL'

    def test_connection_error(self, client, session):
        session.post.side_effect = requests.ConnectionError('connection refused')

        with pytest.raises(IssuerError) as exc_info:
            client.issue_upload_grant('a.jpg', 'image/jpeg')
        assert 'connection refused' in exc_info.value.message


class TestTransfer:

    GRANT = SignedUploadGrant(upload_url='https://bucket.s3.amazonaws.com/uploads/1-a.jpg?sig', key='uploads/1-a.jpg')

    def test_puts_raw_bytes_with_content_type(self, client, session):
        session.put.return_value = make_response(200, text='')

        client.transfer(self.GRANT, b'\xff\xd8data', 'image/jpeg')

        session.put.assert_called_once_with(
            self.GRANT.upload_url,
            data=b'\xff\xd8data',
            headers={'Content-Type': 'image/jpeg'},
            timeout=5
        )

    @pytest.mark.parametrize('status_code', [301, 403, 500])
    def test_non_2xx_fails(self, client, session, status_code):
        session.put.return_value = make_response(status_code, text='<Error>SignatureDoesNotMatch</Error>')

        with pytest.raises(TransferError) as exc_info:
            client.transfer(self.GRANT, b'data', 'image/jpeg')
        assert exc_info.value.message == 'Failed to upload file'
        assert exc_info.value.status_code == status_code


class TestAppendPhoneRecord:

    def test_returns_confirmation(self, client, session):
        session.post.return_value = make_response(body={'message': 'Phone number stored successfully'})

        assert client.append_phone_record('5551234567') == 'Phone number stored successfully'
        session.post.assert_called_once_with(
            'https://api.example.com/api/storePhoneNumber',
            json={'phoneNumber': '5551234567'},
            timeout=5
        )

    def test_non_json_response(self, client, session):
        session.post.return_value = make_response(200, text='<html>oops</html>')

        with pytest.raises(StoreError) as exc_info:
            client.append_phone_record('5551234567')
        assert exc_info.value.message == 'Received invalid response from server'

    def test_error_response(self, client, session):
        session.post.return_value = make_response(500, {'error': 'Requested resource not found'})

        with pytest.raises(StoreError) as exc_info:
            client.append_phone_record('5551234567')
        assert exc_info.value.message == 'Requested resource not found'

    def test_error_response_without_message(self, client, session):
        session.post.return_value = make_response(500, {})

        with pytest.raises(StoreError) as exc_info:
            client.append_phone_record('5551234567')
        assert exc_info.value.message == 'Failed to store phone number'


class TestSignedUploadEndToEnd:

    def test_grant_then_put_lands_object(self, aws_mock, make_image):
        path = make_image('party.jpg')
        with open(path, 'rb') as f:
            data = f.read()

        grant = S3UploadGrantIssuer().issue_upload_grant('party.jpg', 'image/jpeg')
        PhotostatClient('https://api.example.com').transfer(grant, data, 'image/jpeg')

        stored = aws_mock['s3'].get_object(Bucket='photostat-photos-test', Key=grant.key)
        assert stored['Body'].read() == data
        assert stored['ContentType'] == 'image/jpeg'
