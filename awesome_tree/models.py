"""
Proxy model of awesome's runtime object tree.

Four node kinds form a strict hierarchy: ``Awesome`` (root) -> ``Output``
(screen) -> ``Workspace`` (tag) -> ``Window`` (client). Nodes are frozen value
objects holding an index and their parent. Nothing is fetched at construction
time; every accessor re-queries the current remote state.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

from . import expressions
from .channel import EvaluationChannel, open_channel
from .config import DEFAULT_ENDPOINT, RemoteEndpoint
from .decoding import decode_text, decode_unsigned
from .errors import DecodeStep
from .expressions import WindowProperty, WorkspaceProperty


async def _count(channel: EvaluationChannel, expression: str) -> int:
    reply = await channel.evaluate(expression)
    return decode_unsigned(reply, DecodeStep.COUNT)


@dataclass(frozen=True)
class Awesome:
    """Root of the tree; owns the evaluation channel."""

    channel: EvaluationChannel = field(repr=False)

    async def output_count(self) -> int:
        return await _count(self.channel, expressions.output_count())

    async def outputs(self) -> List["Output"]:
        """Enumerate screens, 0-based."""
        count = await self.output_count()
        return [Output(index=i, parent=self) for i in range(count)]

    count = output_count
    children = outputs


@dataclass(frozen=True)
class Output:
    """A screen. ``index`` is 0-based."""

    index: int
    parent: Awesome = field(repr=False)

    @property
    def channel(self) -> EvaluationChannel:
        return self.parent.channel

    @property
    def path(self) -> Tuple[int]:
        return (self.index,)

    async def workspace_count(self) -> int:
        return await _count(self.channel, expressions.workspace_count(self.index))

    async def workspaces(self) -> List["Workspace"]:
        """Enumerate tags on this screen, 0-based."""
        count = await self.workspace_count()
        return [Workspace(index=i, parent=self) for i in range(count)]

    count = workspace_count
    children = workspaces


@dataclass(frozen=True)
class Workspace:
    """A tag on one screen. ``index`` is 0-based."""

    index: int
    parent: Output = field(repr=False)

    @property
    def channel(self) -> EvaluationChannel:
        return self.parent.channel

    @property
    def output(self) -> Output:
        return self.parent

    @property
    def path(self) -> Tuple[int, int]:
        return (self.parent.index, self.index)

    async def property(self, name: Union[WorkspaceProperty, str]) -> str:
        """Fetch a tag property.

        Raises:
            ValueError: If ``name`` is not a readable tag property
        """
        prop = WorkspaceProperty(name)
        expression = expressions.workspace_property(self.parent.index, self.index, prop)
        return decode_text(await self.channel.evaluate(expression))

    async def name(self) -> str:
        return await self.property(WorkspaceProperty.NAME)

    async def window_count(self) -> int:
        return await _count(
            self.channel, expressions.window_count(self.parent.index, self.index)
        )

    async def windows(self) -> List["Window"]:
        """Enumerate clients on this tag.

        Client indices start at 1, matching awesome's ``clients()`` table,
        unlike screens and tags which start at 0.
        """
        count = await self.window_count()
        return [Window(index=i + 1, parent=self) for i in range(count)]

    count = window_count
    children = windows


@dataclass(frozen=True)
class Window:
    """A client on one tag. ``index`` is stored already 1-based."""

    index: int
    parent: Workspace = field(repr=False)

    @property
    def channel(self) -> EvaluationChannel:
        return self.parent.channel

    @property
    def workspace(self) -> Workspace:
        return self.parent

    @property
    def path(self) -> Tuple[int, int, int]:
        return (self.parent.parent.index, self.parent.index, self.index)

    async def property(self, name: Union[WindowProperty, str]) -> Any:
        """Fetch a client property.

        ``window`` decodes to the X11 window id; other properties are text.

        Raises:
            ValueError: If ``name`` is not a readable client property
        """
        prop = WindowProperty(name)
        workspace = self.parent
        expression = expressions.window_property(
            workspace.parent.index, workspace.index, self.index, prop
        )
        reply = await self.channel.evaluate(expression)
        if prop is WindowProperty.WINDOW:
            return decode_unsigned(reply, DecodeStep.WINDOW_HANDLE)
        return decode_text(reply)

    async def name(self) -> str:
        return await self.property(WindowProperty.NAME)

    async def window_class(self) -> str:
        return await self.property(WindowProperty.CLASS)

    async def x_window_id(self) -> int:
        return await self.property(WindowProperty.WINDOW)


async def connect(
    endpoint: RemoteEndpoint = DEFAULT_ENDPOINT,
    bus: Optional[Any] = None,
) -> Awesome:
    """Open the evaluation channel and return the tree root.

    Raises:
        TransportError: If the endpoint cannot be reached
    """
    channel = await open_channel(endpoint, bus=bus)
    return Awesome(channel)
