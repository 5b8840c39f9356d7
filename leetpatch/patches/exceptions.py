from enum import StrEnum


class PatchFileErrorType(StrEnum):
    WRONG_FORMAT = "wrong_format"
    READ_ERROR = "read_error"
    CONVERSION_ERROR = "conversion_error"


class PatchFileError(Exception):
    """
    Base error raised while reading a 1337patch file.

    Errors of the same `error_type` compare equal when their underlying
    causes have the same type and message, so callers can assert on the
    kind of failure without depending on wording or location.
    """

    def __init__(
        self,
        error_type: PatchFileErrorType,
        message: str,
        cause: BaseException | None = None,
        operation: str | None = None,
        line_number: int | None = None,
        line: str | None = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.cause = cause
        self.operation = operation
        self.line_number = line_number
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            message = f"{message} (line {self.line_number})"
        if self.cause is not None:
            message = f"{message}: {self.cause}"
        return message

    def _cause_key(self) -> tuple[str, str] | None:
        if self.cause is None:
            return None
        return type(self.cause).__name__, str(self.cause)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatchFileError):
            return NotImplemented
        if self.error_type != other.error_type:
            return False
        if self.error_type == PatchFileErrorType.WRONG_FORMAT:
            return True
        return self._cause_key() == other._cause_key()

    def __hash__(self) -> int:
        if self.error_type == PatchFileErrorType.WRONG_FORMAT:
            return hash(self.error_type)
        return hash((self.error_type, self._cause_key()))


class WrongFormatError(PatchFileError):
    """The input does not follow the 1337patch grammar."""

    def __init__(
        self,
        message: str = "wrong format",
        line_number: int | None = None,
        line: str | None = None,
        operation: str | None = None,
    ):
        super().__init__(
            PatchFileErrorType.WRONG_FORMAT,
            message,
            operation=operation,
            line_number=line_number,
            line=line,
        )


class PatchReadError(PatchFileError):
    """The source failed to yield a line (I/O or decoding failure)."""

    def __init__(
        self,
        cause: BaseException,
        operation: str | None = None,
        line_number: int | None = None,
    ):
        super().__init__(
            PatchFileErrorType.READ_ERROR,
            "could not read patch source",
            cause=cause,
            operation=operation,
            line_number=line_number,
        )


class PatchConversionError(PatchFileError):
    """A structurally valid hex field could not be converted to a number."""

    def __init__(
        self,
        cause: BaseException,
        operation: str | None = None,
        line_number: int | None = None,
        line: str | None = None,
    ):
        super().__init__(
            PatchFileErrorType.CONVERSION_ERROR,
            "could not convert hex value",
            cause=cause,
            operation=operation,
            line_number=line_number,
            line=line,
        )
