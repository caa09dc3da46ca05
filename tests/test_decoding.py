"""Unit tests for reply decoding."""

import pytest

from awesome_tree.decoding import UNSIGNED_MAX, decode_text, decode_unsigned
from awesome_tree.errors import DecodeError, DecodeStep, ErrorCode, TransportError


class TestDecodeUnsigned:
    """Base-10 unsigned integer parsing."""

    def test_simple_number(self):
        assert decode_unsigned("3", DecodeStep.COUNT) == 3

    def test_zero(self):
        assert decode_unsigned("0", DecodeStep.COUNT) == 0

    def test_leading_plus(self):
        assert decode_unsigned("+12", DecodeStep.COUNT) == 12

    def test_upper_bound(self):
        assert decode_unsigned(str(UNSIGNED_MAX), DecodeStep.WINDOW_HANDLE) == UNSIGNED_MAX

    @pytest.mark.parametrize("raw", [
        "abc", "", "-1", "3.0", " 3", "3\n", "1_000", "nil", "0x10", "٣",
    ])
    def test_invalid_text(self, raw):
        with pytest.raises(DecodeError) as exc_info:
            decode_unsigned(raw, DecodeStep.COUNT)
        assert exc_info.value.raw == raw

    def test_out_of_range(self):
        with pytest.raises(DecodeError):
            decode_unsigned(str(UNSIGNED_MAX + 1), DecodeStep.WINDOW_HANDLE)

    def test_failure_is_not_transport_error(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_unsigned("abc", DecodeStep.COUNT)
        assert not isinstance(exc_info.value, TransportError)
        assert exc_info.value.code is ErrorCode.DECODE_FAILED

    def test_failure_names_step(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_unsigned("oops", DecodeStep.WINDOW_HANDLE)
        error = exc_info.value
        assert error.step is DecodeStep.WINDOW_HANDLE
        assert error.to_dict()["context"] == {"step": "window_handle", "raw": "oops"}
        assert "window handle" in error.message


class TestDecodeText:
    def test_identity(self):
        assert decode_text("Mozilla Firefox") == "Mozilla Firefox"
        assert decode_text("") == ""
