"""
Unit tests for the phone number model and record store
"""
from unittest.mock import patch

import pytest
from botocore.exceptions import ClientError
from pynamodb.exceptions import PutError

from photostat_commons.exceptions import StoreError
from photostat_commons.models.phone_number import PhoneNumber
from photostat_commons.services.phone_service import DynamoPhoneRecordStore


class TestAppend:

    def test_stores_value_as_received(self, phone_table):
        record = PhoneNumber.append('(555) 123-4567')

        stored = PhoneNumber.get(record.record_id)
        assert stored.phone_number == '(555) 123-4567'
        assert stored.created_at is not None

    def test_duplicates_are_kept(self, phone_table):
        store = DynamoPhoneRecordStore()
        store.append_phone_record('5551234567')
        store.append_phone_record('5551234567')

        records = list(PhoneNumber.scan())
        assert len(records) == 2
        assert records[0].record_id != records[1].record_id

    def test_missing_value_is_a_store_error(self, phone_table):
        with pytest.raises(StoreError) as exc_info:
            PhoneNumber.append(None)
        assert exc_info.value.table == 'PhoneNumbers-test'

    def test_missing_table(self, aws_mock):
        with pytest.raises(StoreError):
            DynamoPhoneRecordStore().append_phone_record('5551234567')

    def test_surfaces_underlying_message(self):
        cause = ClientError(
            {'Error': {'Code': 'ProvisionedThroughputExceededException', 'Message': 'Rate of requests exceeds the allowed throughput'}},
            'PutItem'
        )
        with patch.object(PhoneNumber, 'save', side_effect=PutError(cause=cause)):
            with pytest.raises(StoreError) as exc_info:
                PhoneNumber.append('5551234567')

        assert exc_info.value.message == 'Rate of requests exceeds the allowed throughput'

    def test_to_dict(self):
        record = PhoneNumber(record_id='abc', phone_number='5551234567')
        data = record.to_dict()
        assert data['record_id'] == 'abc'
        assert data['phone_number'] == '5551234567'
        assert data['created_at'] is not None
