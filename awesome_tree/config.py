"""
Remote endpoint configuration.

Pydantic model describing the awful.remote D-Bus endpoint. The values are
fixed for awesome; they are modelled so the channel has one validated place
to read them from.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

BUS_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*(\.[A-Za-z_][A-Za-z0-9_-]*)+$")
EXPRESSION_PLACEHOLDER = "{expression}"


class RemoteEndpoint(BaseModel):
    """awful.remote endpoint identity and call template."""

    model_config = ConfigDict(frozen=True)

    service: str = Field(
        "org.awesomewm.awful",
        description="Well-known D-Bus name owned by awesome",
    )

    object_path: str = Field(
        "/",
        description="Object path exporting the remote interface",
    )

    interface: str = Field(
        "org.awesomewm.awful.Remote",
        description="Interface carrying the Eval method",
    )

    timeout: Optional[float] = Field(
        None,
        description="D-Bus call timeout in seconds (None uses the bus default)",
        gt=0,
    )

    template: str = Field(
        'return "=" .. tostring({expression})',
        description="Lua wrapper forcing every reply to render as a marked string",
    )

    reply_marker: str = Field(
        "=",
        description="Prefix the template puts on every successful reply",
        min_length=1,
    )

    @field_validator("service", "interface")
    @classmethod
    def validate_dotted_name(cls, v: str) -> str:
        """Validate D-Bus service and interface names."""
        if not BUS_NAME_PATTERN.match(v):
            raise ValueError(f"Not a valid D-Bus name: {v!r}")
        return v

    @field_validator("object_path")
    @classmethod
    def validate_object_path(cls, v: str) -> str:
        """Validate object path is absolute."""
        if not v.startswith("/"):
            raise ValueError("Object path must be absolute")
        if len(v) > 1 and v.endswith("/"):
            raise ValueError("Object path must not end with '/'")
        return v

    @field_validator("template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Validate template wraps exactly one expression."""
        if v.count(EXPRESSION_PLACEHOLDER) != 1:
            raise ValueError(f"Template must contain {EXPRESSION_PLACEHOLDER} exactly once")
        return v

    @model_validator(mode="after")
    def validate_marker_in_template(self) -> "RemoteEndpoint":
        """The reply marker has to be produced by the template itself."""
        if self.reply_marker not in self.template.replace(EXPRESSION_PLACEHOLDER, ""):
            raise ValueError(f"Template must emit the reply marker {self.reply_marker!r}")
        return self

    def wrap(self, expression: str) -> str:
        """Render an expression through the call template."""
        return self.template.replace(EXPRESSION_PLACEHOLDER, expression)


DEFAULT_ENDPOINT = RemoteEndpoint()
