"""
IP Map Navigator client: session, history and lookup orchestration.
"""

from ipmap.client.auth_client import AuthClient
from ipmap.client.errors import (
    ClientError,
    LoginFailedError,
    NetworkError,
    NotAuthenticatedError,
    SubjectValidationError,
)
from ipmap.client.geo_client import GeoLookupClient
from ipmap.client.history import HistoryStore
from ipmap.client.lookup import LookupOrchestrator, is_dotted_quad
from ipmap.client.notices import NoticeBoard
from ipmap.client.selection import SelectionState
from ipmap.client.session import ClientSession
from ipmap.client.storage import JsonFileStorage, KeyValueStorage, MemoryStorage

__all__ = [
    "AuthClient",
    "ClientError",
    "LoginFailedError",
    "NetworkError",
    "NotAuthenticatedError",
    "SubjectValidationError",
    "GeoLookupClient",
    "HistoryStore",
    "LookupOrchestrator",
    "is_dotted_quad",
    "NoticeBoard",
    "SelectionState",
    "ClientSession",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
]
