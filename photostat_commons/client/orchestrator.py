"""
Upload orchestrator

Client-side controller for the two-stage guest workflow. Selected files are
turned into an ordered task list and processed strictly one at a time; every
task yields an UploadResult, so one failing file never aborts the batch.
"""
import mimetypes
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence
from PIL import Image, UnidentifiedImageError
from ..constants import UploadConstants, ErrorMessages
from ..contracts import SignedUploadGrant
from ..exceptions import PhotostatError
from ..logger import client_logger as logger
from ..services.upload_service import UploadGrantIssuer
from ..utils import generate_public_url
from .session_state import SessionState


class WorkflowStage(str, Enum):
    UPLOAD = 'upload'
    COUNTDOWN = 'countdown'


class UploadTransport(ABC):
    """Performs the direct PUT of file bytes to a granted URL"""

    @abstractmethod
    def transfer(self, grant: SignedUploadGrant, data: bytes, content_type: str) -> None:
        """
        Raises:
            TransferError: If storage did not answer with a 2xx
        """


def detect_content_type(path: str) -> str:
    """
    MIME type of a selected file

    Image formats Pillow recognizes are identified from the file contents;
    anything else (HEIC, non-images) falls back to the extension. Returns an
    empty string when neither works, which the issuer will reject.
    """
    try:
        with Image.open(path) as img:
            mime = Image.MIME.get(img.format)
            if mime:
                return mime
    except (UnidentifiedImageError, OSError):
        pass

    guessed, _ = mimetypes.guess_type(path)
    if guessed:
        return guessed
    if Path(path).suffix.lower() == '.heic':
        return 'image/heic'
    return ''


def is_accepted_file(filename: str, content_type: str) -> bool:
    if content_type.startswith(UploadConstants.ACCEPTED_MIME_PREFIX):
        return True
    return Path(filename).suffix.lower() in UploadConstants.ACCEPTED_EXTRA_EXTENSIONS


@dataclass
class UploadTask:
    path: str
    filename: str
    content_type: str

    @classmethod
    def from_path(cls, path: str) -> 'UploadTask':
        return cls(path=path, filename=os.path.basename(path), content_type=detect_content_type(path))

    @property
    def local_ref(self) -> str:
        """Preview reference used until the file is uploaded"""
        return Path(self.path).resolve().as_uri()

    def read(self) -> bytes:
        with open(self.path, 'rb') as f:
            return f.read()


@dataclass
class UploadResult:
    task: UploadTask
    success: bool
    key: Optional[str] = None
    public_url: Optional[str] = None
    error: Optional[str] = None


class UploadOrchestrator:

    def __init__(
        self,
        issuer: UploadGrantIssuer,
        transport: UploadTransport,
        session_state: SessionState,
        bucket_name: str,
        region: str
    ):
        self.issuer = issuer
        self.transport = transport
        self.session_state = session_state
        self.bucket_name = bucket_name
        self.region = region

        self.stage = WorkflowStage.COUNTDOWN if session_state.has_uploaded else WorkflowStage.UPLOAD
        self.selected_files: List[UploadTask] = []
        self.image_previews: List[str] = []
        self.upload_error: Optional[str] = None

    @property
    def can_access(self) -> bool:
        return len(self.selected_files) > 0

    def select_files(self, tasks: Sequence[UploadTask]) -> List[UploadTask]:
        """Replace the pending queue; previews start out as local references."""
        accepted = []
        for task in tasks:
            if is_accepted_file(task.filename, task.content_type):
                accepted.append(task)
            else:
                logger.warning("Skipping unsupported file", filename=task.filename, content_type=task.content_type)

        self.selected_files = accepted
        self.image_previews = [task.local_ref for task in accepted]
        logger.info("Files selected", count=len(accepted))
        return accepted

    def remove_file(self, index: int) -> None:
        if 0 <= index < len(self.selected_files):
            del self.selected_files[index]
        if 0 <= index < len(self.image_previews):
            del self.image_previews[index]

    def add_preview(self, url: str) -> bool:
        """Append ``url`` unless it is already present."""
        if url in self.image_previews:
            logger.info("Duplicate image URL detected, not adding", url=url)
            return False
        self.image_previews.append(url)
        return True

    def access(self) -> List[UploadResult]:
        """
        Upload every selected file in order, then move to the countdown

        Per-file failures are recorded and the loop moves on. ``upload_error``
        holds the latest failure message. The stage changes only if at least
        one file made it to storage.
        """
        if not self.can_access:
            return []

        tasks = list(self.selected_files)
        self.upload_error = None
        logger.info("Uploading files", filenames=[task.filename for task in tasks])

        results = [self._process(task) for task in tasks]

        resolved = {result.public_url for result in results if result.success}
        self.selected_files = []
        self.image_previews = [ref for ref in self.image_previews if ref in resolved]

        succeeded = sum(1 for result in results if result.success)
        logger.info("Upload batch finished", succeeded=succeeded, failed=len(tasks) - succeeded)

        if succeeded:
            self.session_state.mark_uploaded()
            self.stage = WorkflowStage.COUNTDOWN
        return results

    def _process(self, task: UploadTask) -> UploadResult:
        try:
            grant = self.issuer.issue_upload_grant(task.filename, task.content_type)
            self.transport.transfer(grant, task.read(), task.content_type)
        except (PhotostatError, OSError) as e:
            message = getattr(e, 'message', None) or str(e) or ErrorMessages.UNKNOWN_UPLOAD_ERROR
            logger.error("Error uploading file", error=e, filename=task.filename)
            self.upload_error = message
            return UploadResult(task=task, success=False, error=message)

        public_url = generate_public_url(self.bucket_name, self.region, grant.key)
        self._resolve_preview(task, public_url)
        logger.info("Successfully uploaded file", filename=task.filename, s3_key=grant.key)
        return UploadResult(task=task, success=True, key=grant.key, public_url=public_url)

    def _resolve_preview(self, task: UploadTask, public_url: str) -> None:
        if task.local_ref in self.image_previews:
            self.image_previews.remove(task.local_ref)
        self.add_preview(public_url)

    def upload_more(self) -> None:
        """Back to the upload stage; the completion marker is kept."""
        self.selected_files = []
        self.image_previews = []
        self.upload_error = None
        self.stage = WorkflowStage.UPLOAD
