"""
Client-side session state

Holds the "upload already completed" marker that decides which stage the
client starts in. Injected into the orchestrator so stage derivation can be
tested without touching disk.
"""
import json
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional
from ..constants import SessionConstants
from ..logger import client_logger as logger


class SessionState(ABC):
    """Minimal string key/value store"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @property
    def has_uploaded(self) -> bool:
        return bool(self.get(SessionConstants.HAS_UPLOADED_KEY))

    def mark_uploaded(self) -> None:
        self.set(SessionConstants.HAS_UPLOADED_KEY, SessionConstants.HAS_UPLOADED_VALUE)


class InMemorySessionState(SessionState):

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def clear(self) -> None:
        self._values.clear()


class JsonFileSessionState(SessionState):
    """
    Persists the session as a small JSON object so it survives restarts

    Reads go to disk every time; the file is tiny and only touched at startup
    and once per completed batch.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> Dict[str, str]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable session file", path=self.path, error=str(e))
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f)

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def clear(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)
