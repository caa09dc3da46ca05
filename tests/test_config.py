"""Unit tests for endpoint configuration."""

import pytest
from pydantic import ValidationError

from awesome_tree.config import DEFAULT_ENDPOINT, RemoteEndpoint


class TestRemoteEndpoint:

    def test_defaults(self):
        assert DEFAULT_ENDPOINT.service == "org.awesomewm.awful"
        assert DEFAULT_ENDPOINT.object_path == "/"
        assert DEFAULT_ENDPOINT.interface == "org.awesomewm.awful.Remote"
        assert DEFAULT_ENDPOINT.timeout is None
        assert DEFAULT_ENDPOINT.reply_marker == "="

    def test_wrap(self):
        assert DEFAULT_ENDPOINT.wrap("#screen[1].tags") == 'return "=" .. tostring(#screen[1].tags)'

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_ENDPOINT.service = "org.example.Other"

    @pytest.mark.parametrize("kwargs", [
        {"service": "awesome"},
        {"interface": "org..Remote"},
        {"object_path": "relative/path"},
        {"object_path": "/trailing/"},
        {"timeout": 0},
        {"timeout": -1.5},
        {"template": "return tostring(x)"},
        {"template": "{expression}{expression}"},
        {"template": "return tostring({expression})"},
        {"reply_marker": ""},
        {"reply_marker": "#"},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            RemoteEndpoint(**kwargs)

    def test_custom_template(self):
        endpoint = RemoteEndpoint(template="return 'ok:' .. {expression}", reply_marker="ok:")
        assert endpoint.wrap("1") == "return 'ok:' .. 1"
