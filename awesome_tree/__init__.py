"""
awesome-tree

Read-only, lazily queried view of awesome's screens, tags and clients over
the awful.remote D-Bus interface.
"""

from .config import DEFAULT_ENDPOINT, RemoteEndpoint
from .errors import (
    AwesomeTreeError,
    DecodeError,
    DecodeStep,
    ErrorCode,
    RemoteEvaluationError,
    TransportError,
)
from .expressions import WindowProperty, WorkspaceProperty
from .models import Awesome, Output, Window, Workspace, connect

__version__ = "0.1.0"

__all__ = [
    "Awesome",
    "AwesomeTreeError",
    "DEFAULT_ENDPOINT",
    "DecodeError",
    "DecodeStep",
    "ErrorCode",
    "Output",
    "RemoteEndpoint",
    "RemoteEvaluationError",
    "TransportError",
    "Window",
    "WindowProperty",
    "Workspace",
    "WorkspaceProperty",
    "connect",
]
