"""
Phone Number Contracts
Request/response shapes for the store-phone-number function
"""
from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class StorePhoneNumberRequest:
    """Body of POST /api/storePhoneNumber (value stored as received)"""
    phone_number: Optional[str]

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> 'StorePhoneNumberRequest':
        return cls(phone_number=body.get('phoneNumber'))

    def to_dict(self) -> Dict[str, Any]:
        return {'phoneNumber': self.phone_number}


@dataclass
class StorePhoneNumberResponse:
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {'message': self.message}
