"""
Point-in-time snapshot of the whole awesome tree.

Walks screens, tags and clients one query at a time and collects the results
into plain pydantic models for display or JSON output.
"""

import logging
from typing import List

from pydantic import BaseModel, Field

from .models import Awesome, Output, Window, Workspace

logger = logging.getLogger(__name__)


class WindowSnapshot(BaseModel):
    """Client properties at snapshot time."""

    index: int = Field(..., description="Client index (1-based)", ge=1)
    name: str = Field(..., description="Client title")
    window_class: str = Field(..., description="WM_CLASS class")
    x_window_id: int = Field(..., description="X11 window id", ge=0)


class WorkspaceSnapshot(BaseModel):
    """Tag with its clients."""

    index: int = Field(..., description="Tag index (0-based)", ge=0)
    name: str
    windows: List[WindowSnapshot] = Field(default_factory=list)


class OutputSnapshot(BaseModel):
    """Screen with its tags."""

    index: int = Field(..., description="Screen index (0-based)", ge=0)
    workspaces: List[WorkspaceSnapshot] = Field(default_factory=list)

    @property
    def window_count(self) -> int:
        return sum(len(ws.windows) for ws in self.workspaces)


class TreeSnapshot(BaseModel):
    """All screens."""

    outputs: List[OutputSnapshot] = Field(default_factory=list)


async def snapshot_window(window: Window) -> WindowSnapshot:
    return WindowSnapshot(
        index=window.index,
        name=await window.name(),
        window_class=await window.window_class(),
        x_window_id=await window.x_window_id(),
    )


async def snapshot_workspace(workspace: Workspace) -> WorkspaceSnapshot:
    windows = [await snapshot_window(w) for w in await workspace.windows()]
    return WorkspaceSnapshot(
        index=workspace.index,
        name=await workspace.name(),
        windows=windows,
    )


async def snapshot_output(output: Output) -> OutputSnapshot:
    workspaces = [await snapshot_workspace(ws) for ws in await output.workspaces()]
    return OutputSnapshot(index=output.index, workspaces=workspaces)


async def snapshot(awesome: Awesome) -> TreeSnapshot:
    """Capture the full tree.

    Any transport or decode failure aborts the walk and propagates.
    """
    outputs = [await snapshot_output(o) for o in await awesome.outputs()]
    logger.debug(f"Snapshot captured {len(outputs)} screen(s)")
    return TreeSnapshot(outputs=outputs)
