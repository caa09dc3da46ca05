"""
Pytest configuration and fixtures for awesome-tree tests.

The D-Bus proxy is replaced by a scripted fake that maps Lua expressions to
reply text and records every call.
"""

from typing import Dict, List, Optional, Union

import pytest

from awesome_tree.channel import EvaluationChannel
from awesome_tree.config import DEFAULT_ENDPOINT
from awesome_tree.models import Awesome

TEMPLATE_PREFIX = 'return "=" .. tostring('
REPLY_MARKER = "="
TEMPLATE_SUFFIX = ")"


class RemoteFailure:
    """Unmarked reply, as awful.remote sends when the Lua chunk fails."""

    def __init__(self, text: str):
        self.text = text


class FakeRemote:
    """Stand-in for the awful.remote proxy object."""

    def __init__(self, replies: Dict[str, Union[str, RemoteFailure, Exception]]):
        self.replies = dict(replies)
        self.queries: List[str] = []
        self.timeouts: List[Optional[float]] = []

    @property
    def expressions(self) -> List[str]:
        """Queries with the tostring wrapper removed."""
        return [q[len(TEMPLATE_PREFIX):-len(TEMPLATE_SUFFIX)] for q in self.queries]

    def Eval(self, query: str, timeout: Optional[float] = None):
        self.queries.append(query)
        self.timeouts.append(timeout)
        assert query.startswith(TEMPLATE_PREFIX) and query.endswith(TEMPLATE_SUFFIX)
        expression = query[len(TEMPLATE_PREFIX):-len(TEMPLATE_SUFFIX)]
        reply = self.replies[expression]
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, RemoteFailure):
            return reply.text
        return REPLY_MARKER + reply


@pytest.fixture
def desktop_replies():
    """One screen, two tags, one client on the first tag."""
    return {
        "screen:count()": "1",
        "#screen[1].tags": "2",
        "screen[1].tags[1].name": "web",
        "screen[1].tags[2].name": "code",
        "#screen[1].tags[1]:clients()": "1",
        "#screen[1].tags[2]:clients()": "0",
        "screen[1].tags[1]:clients()[1].name": "Mozilla Firefox",
        "screen[1].tags[1]:clients()[1].class": "firefox",
        "screen[1].tags[1]:clients()[1].window": "48234497",
    }


@pytest.fixture
def make_remote():
    """Factory for scripted fake remotes."""
    def factory(replies):
        return FakeRemote(replies)
    return factory


@pytest.fixture
def make_awesome():
    """Factory returning (root, fake remote) for a reply script."""
    def factory(replies, endpoint=DEFAULT_ENDPOINT):
        remote = FakeRemote(replies)
        return Awesome(EvaluationChannel(remote, endpoint)), remote
    return factory
