"""
Error handling for the awesome runtime inspector.

Two failure kinds are kept apart everywhere: transport failures (the remote
call did not complete) and decode failures (the reply text could not be
converted to the expected type).
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for the awesome runtime inspector.

    Custom codes:
    - 1400-1499: Transport errors (D-Bus, remote evaluation)
    - 1500-1599: Decode errors (reply text conversion)
    """

    # Transport errors (1400-1499)
    BUS_UNAVAILABLE = 1400
    ENDPOINT_UNREACHABLE = 1401
    CALL_FAILED = 1402
    REMOTE_EVALUATION_FAILED = 1403
    UNEXPECTED_REPLY = 1404

    # Decode errors (1500-1599)
    DECODE_FAILED = 1500


class DecodeStep(Enum):
    """Parse step that produced a decode failure."""

    COUNT = "count"
    WINDOW_HANDLE = "window_handle"


class AwesomeTreeError(Exception):
    """Base exception for inspector errors.

    ``kind`` names the failure family (``transport`` or ``decode``) so JSON
    consumers of ``awesome-tree ... --json`` can branch without knowing codes.
    """

    kind = "error"

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the ``error`` object printed by the CLI's ``--json`` mode.

        Returns:
            ``kind``, numeric ``code`` and ``message``; ``suggestion`` and
            ``context`` (reason, expression, raw reply, parse step) when set
        """
        payload = {"kind": self.kind, "code": self.code.value, "message": self.message}
        for key in ("suggestion", "context"):
            value = getattr(self, key)
            if value:
                payload[key] = value
        return payload


class TransportError(AwesomeTreeError):
    """The remote call could not complete."""

    kind = "transport"

    def __init__(
        self,
        reason: str,
        code: ErrorCode = ErrorCode.CALL_FAILED,
        expression: Optional[str] = None,
        message: Optional[str] = None,
        suggestion: Optional[str] = None
    ):
        """
        Initialize transport error.

        Args:
            reason: Reason for failure
            code: Transport error code
            expression: Expression being evaluated, if any
            message: Message override
            suggestion: Suggestion override
        """
        context = {"reason": reason}
        if expression is not None:
            context["expression"] = expression

        super().__init__(
            code=code,
            message=message or f"D-Bus transport failure: {reason}",
            suggestion=suggestion or "Ensure awesome is running and awful.remote is loaded in rc.lua",
            context=context
        )
        self.reason = reason
        self.expression = expression


class RemoteEvaluationError(TransportError):
    """The remote runtime raised while executing an expression."""

    def __init__(self, expression: str, remote_message: str):
        super().__init__(
            reason=remote_message,
            code=ErrorCode.REMOTE_EVALUATION_FAILED,
            expression=expression,
            message=f"Remote evaluation failed: {remote_message}",
            suggestion="The addressed screen, tag or client may no longer exist"
        )
        self.remote_message = remote_message


class DecodeError(AwesomeTreeError):
    """The reply text could not be converted to the expected type."""

    kind = "decode"

    def __init__(self, step: DecodeStep, raw: str):
        """
        Initialize decode error.

        Args:
            step: Parse step that failed
            raw: Reply text that could not be converted
        """
        super().__init__(
            code=ErrorCode.DECODE_FAILED,
            message=f"Failed to parse {step.value.replace('_', ' ')} from reply {raw!r}",
            suggestion="The awesome version may not match the expected expression shape",
            context={"step": step.value, "raw": raw}
        )
        self.step = step
        self.raw = raw
