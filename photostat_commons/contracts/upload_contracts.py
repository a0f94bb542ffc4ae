"""
Upload Service Contracts
Request/response shapes shared by the upload-image function and its clients
"""
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class UploadImageRequest:
    """Body of POST /api/uploadImage"""
    filename: str
    content_type: str

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> 'UploadImageRequest':
        return cls(filename=body['filename'], content_type=body['contentType'])

    def to_dict(self) -> Dict[str, Any]:
        return {'filename': self.filename, 'contentType': self.content_type}


@dataclass
class SignedUploadGrant:
    """
    Time-limited URL plus object key authorizing one direct PUT to storage

    Serialized on the wire as ``{"uploadUrl": ..., "key": ...}``.
    """
    upload_url: str
    key: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SignedUploadGrant':
        return cls(upload_url=data['uploadUrl'], key=data['key'])

    def to_dict(self) -> Dict[str, Any]:
        return {'uploadUrl': self.upload_url, 'key': self.key}
