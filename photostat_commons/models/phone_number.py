"""
PynamoDB model for notification phone numbers
"""
import uuid
from datetime import datetime, timezone
from typing import Optional
from pynamodb.models import Model
from pynamodb.attributes import UnicodeAttribute, UTCDateTimeAttribute
from pynamodb.exceptions import PutError
from ..config import config
from ..logger import phone_logger as logger
from ..error_handler import error_handler
from ..exceptions import StoreError


class PhoneNumber(Model):
    """
    One row per submission

    The hash key is a fresh UUID, so submitting the same number twice stores
    two items. There is no uniqueness constraint on ``phone_number``.
    """

    class Meta:
        table_name = config.phone_table_name
        region = config.aws_region
        billing_mode = 'PAY_PER_REQUEST'

    record_id = UnicodeAttribute(hash_key=True, default=lambda: str(uuid.uuid4()))
    phone_number = UnicodeAttribute()
    created_at = UTCDateTimeAttribute(default=lambda: datetime.now(timezone.utc))

    @classmethod
    def append(cls, phone_number: Optional[str]) -> 'PhoneNumber':
        """
        Insert a new record for ``phone_number`` exactly as received

        Raises:
            StoreError: If the insert fails, carrying the store's own message
        """
        try:
            record = cls(phone_number=phone_number)
            record.save()
        except (PutError, ValueError, TypeError) as e:
            # ValueError/TypeError: pynamodb rejects a missing or non-string value before sending
            error_response = error_handler.handle_dynamodb_error(e, 'append_phone_record', cls.Meta.table_name)
            logger.log_database_operation(
                table_name=cls.Meta.table_name,
                operation='put',
                success=False,
                error=error_response['error_message']
            )
            raise StoreError(error_response['error_message'], table=cls.Meta.table_name, original_error=str(e))

        logger.log_database_operation(
            table_name=cls.Meta.table_name,
            operation='put',
            success=True,
            record_id=record.record_id
        )
        return record

    def to_dict(self) -> dict:
        return {
            'record_id': self.record_id,
            'phone_number': self.phone_number,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }
