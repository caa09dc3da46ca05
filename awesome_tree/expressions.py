"""
Lua expression synthesizer for the awesome object tree.

Every expression sent to awful.remote is built here from integer indices and
fixed property names. No caller-supplied text ever reaches the remote side.

Addressing:
- screens and tags are held 0-based locally and addressed ``index + 1``
- clients are held with the index they were created with and addressed as-is
"""

from enum import Enum


class WorkspaceProperty(Enum):
    """Readable tag properties."""

    NAME = "name"


class WindowProperty(Enum):
    """Readable client properties."""

    NAME = "name"
    CLASS = "class"
    WINDOW = "window"  # X11 window id


def _checked(index: int) -> int:
    """Reject anything but a non-negative integer."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Index must be an int, got {type(index).__name__}")
    if index < 0:
        raise ValueError(f"Index must be non-negative, got {index}")
    return index


def remote_index(index: int) -> int:
    """Convert a 0-based local index to awesome's 1-based addressing."""
    return _checked(index) + 1


def _tag_ref(output: int, workspace: int) -> str:
    return f"screen[{remote_index(output)}].tags[{remote_index(workspace)}]"


def output_count() -> str:
    return "screen:count()"


def workspace_count(output: int) -> str:
    return f"#screen[{remote_index(output)}].tags"


def window_count(output: int, workspace: int) -> str:
    return f"#{_tag_ref(output, workspace)}:clients()"


def workspace_property(output: int, workspace: int, prop: WorkspaceProperty) -> str:
    """Expression reading one property of a tag."""
    prop = WorkspaceProperty(prop)
    return f"{_tag_ref(output, workspace)}.{prop.value}"


def window_property(output: int, workspace: int, window: int, prop: WindowProperty) -> str:
    """Expression reading one property of a client.

    The client index is used unmodified: clients are created with their
    remote position already applied.
    """
    prop = WindowProperty(prop)
    return f"{_tag_ref(output, workspace)}:clients()[{_checked(window)}].{prop.value}"
