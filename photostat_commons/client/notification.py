"""
Text-notification form

Formats the phone number as it is typed, validates it on submit and hands the
normalized digits to a PhoneRecordStore. The shake flag and the confirmation
message are time-boxed against an injectable clock.
"""
import time
from typing import Callable, Optional
from ..constants import TimingConstants, ErrorMessages, SuccessMessages
from ..exceptions import PhoneFormatError, StoreError
from ..logger import client_logger as logger
from ..services.phone_service import PhoneRecordStore
from ..validation_utils import format_phone_number, validate_phone_number


class NotificationForm:

    def __init__(self, store: PhoneRecordStore, clock: Callable[[], float] = time.monotonic):
        self.store = store
        self.clock = clock
        self.phone_number = ""
        self.phone_error = ""
        self._opened = False
        self._shake_until: Optional[float] = None
        self._confirmation: Optional[str] = None
        self._confirmation_until: Optional[float] = None

    def open(self) -> None:
        self._opened = True
        self._confirmation = None
        self._confirmation_until = None

    def close(self) -> None:
        self._opened = False

    @property
    def _confirmation_expired(self) -> bool:
        return self._confirmation_until is not None and self.clock() >= self._confirmation_until

    @property
    def is_open(self) -> bool:
        """The form closes itself once the confirmation has been shown long enough."""
        return self._opened and not self._confirmation_expired

    def update(self, raw_value: str) -> str:
        """Keystroke handler: reformat and clear any field error."""
        self.phone_number = format_phone_number(raw_value)
        self.phone_error = ""
        return self.phone_number

    @property
    def is_shaking(self) -> bool:
        return self._shake_until is not None and self.clock() < self._shake_until

    @property
    def confirmation_message(self) -> str:
        if self._confirmation is None or self._confirmation_expired:
            return ""
        return self._confirmation

    def submit(self) -> bool:
        try:
            normalized = validate_phone_number(self.phone_number)
        except PhoneFormatError as e:
            self.phone_error = e.message
            self._shake_until = self.clock() + TimingConstants.SHAKE_DURATION
            return False

        logger.info("Attempting to store phone number")
        try:
            self.store.append_phone_record(normalized)
        except StoreError as e:
            logger.error("Error storing phone number", error=e)
            self.phone_error = ErrorMessages.PHONE_SAVE_FAILED
            return False

        self.phone_error = ""
        self._confirmation = SuccessMessages.NOTIFICATION_CONFIRMED
        self._confirmation_until = self.clock() + TimingConstants.CONFIRMATION_DURATION
        return True
