"""
Phone service: records numbers guests want to be texted on
"""
from abc import ABC, abstractmethod
from typing import Optional
from ..models.phone_number import PhoneNumber
from ..logger import phone_logger as logger


class PhoneRecordStore(ABC):
    """Append-only store of notification phone numbers"""

    @abstractmethod
    def append_phone_record(self, phone_number: Optional[str]) -> None:
        """
        Raises:
            StoreError: If the record could not be written
        """


class DynamoPhoneRecordStore(PhoneRecordStore):
    """
    Writes one PhoneNumber item per call

    No format validation or deduplication happens here; the client validates
    before submitting.
    """

    def append_phone_record(self, phone_number: Optional[str]) -> None:
        logger.log_service_operation("append_phone_record", table_name=PhoneNumber.Meta.table_name)
        PhoneNumber.append(phone_number)
