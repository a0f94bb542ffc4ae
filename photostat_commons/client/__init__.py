"""
Guest-side workflow: upload, countdown and text notification
"""
from .session_state import SessionState, InMemorySessionState, JsonFileSessionState
from .countdown import Countdown, seconds_until, format_countdown
from .orchestrator import UploadOrchestrator, UploadTask, UploadResult, UploadTransport, WorkflowStage
from .api_client import PhotostatClient
from .notification import NotificationForm

__all__ = [
    'SessionState',
    'InMemorySessionState',
    'JsonFileSessionState',
    'Countdown',
    'seconds_until',
    'format_countdown',
    'UploadOrchestrator',
    'UploadTask',
    'UploadResult',
    'UploadTransport',
    'WorkflowStage',
    'PhotostatClient',
    'NotificationForm',
]
