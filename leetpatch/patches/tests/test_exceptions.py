"""Unit tests for patch file exceptions."""

import pytest

from leetpatch.patches.exceptions import (
    PatchConversionError,
    PatchFileError,
    PatchFileErrorType,
    PatchReadError,
    WrongFormatError,
)


class TestWrongFormatError:
    """Tests for WrongFormatError."""

    def test_error_type(self):
        assert WrongFormatError().error_type == PatchFileErrorType.WRONG_FORMAT

    def test_is_patch_file_error(self):
        assert isinstance(WrongFormatError(), PatchFileError)

    def test_equal_regardless_of_message_and_location(self):
        """All WrongFormatErrors are equal, so tests need not match wording."""
        a = WrongFormatError("bad separator", line_number=3, line="x")
        b = WrongFormatError()

        assert a == b
        assert hash(a) == hash(b)

    def test_message_includes_line_number(self):
        error = WrongFormatError("bad separator", line_number=7)

        assert "bad separator" in str(error)
        assert "line 7" in str(error)

    def test_can_be_raised_and_caught_as_base(self):
        with pytest.raises(PatchFileError):
            raise WrongFormatError()


class TestPatchReadError:
    """Tests for PatchReadError."""

    def test_wraps_cause(self):
        cause = OSError("permission denied")
        error = PatchReadError(cause, operation="parse_patch_file", line_number=1)

        assert error.error_type == PatchFileErrorType.READ_ERROR
        assert error.cause is cause
        assert error.operation == "parse_patch_file"
        assert "permission denied" in str(error)

    def test_equal_when_causes_match(self):
        a = PatchReadError(OSError("disk gone"), line_number=1)
        b = PatchReadError(OSError("disk gone"), line_number=9)

        assert a == b
        assert hash(a) == hash(b)

    def test_not_equal_when_causes_differ(self):
        a = PatchReadError(OSError("disk gone"))
        b = PatchReadError(OSError("permission denied"))

        assert a != b


class TestPatchConversionError:
    """Tests for PatchConversionError."""

    def test_wraps_cause(self):
        cause = ValueError("invalid literal for int() with base 16: 'zz'")
        error = PatchConversionError(cause, line="zz")

        assert error.error_type == PatchFileErrorType.CONVERSION_ERROR
        assert error.cause is cause
        assert error.line == "zz"


def test_kinds_are_never_equal():
    wrong_format = WrongFormatError()
    read_error = PatchReadError(ValueError("x"))
    conversion_error = PatchConversionError(ValueError("x"))

    assert wrong_format != read_error
    assert read_error != conversion_error
    assert wrong_format != conversion_error


def test_comparison_with_other_objects():
    assert WrongFormatError() != "wrong_format"
