import io
import logging
import string
from typing import Protocol, runtime_checkable

from leetpatch.config import ParserSettings
from leetpatch.patches.exceptions import (
    PatchConversionError,
    PatchReadError,
    WrongFormatError,
)
from leetpatch.patches.models import HEADER_MARKER, F1337Patch, HexPatch

logger = logging.getLogger(__name__)

PATCH_LINE_LENGTH = 23
ADDRESS_FIELD = slice(0, 16)
ADDRESS_SEPARATOR = slice(16, 17)
OLD_FIELD = slice(17, 19)
VALUE_SEPARATOR = slice(19, 21)
NEW_FIELD = slice(21, 23)

HEX_DIGITS = frozenset(string.hexdigits)


@runtime_checkable
class SeekableLineReader(Protocol):
    """Anything that can be rewound and read line by line (files, BytesIO)."""

    def readline(self, size: int = -1, /) -> bytes | str:
        ...

    def seek(self, offset: int, whence: int = 0, /) -> int:
        ...


def _strip_line_ending(line: str) -> str:
    # only "\n" and "\r\n" end a line; a bare "\r" stays part of it
    if not line.endswith("\n"):
        return line
    return line[:-1].removesuffix("\r")


def _is_hex(field: str) -> bool:
    return field != "" and all(c in HEX_DIGITS for c in field)


def _read_line(
    source: SeekableLineReader,
    encoding: str,
    line_number: int,
) -> str | None:
    """
    Read and decode the next line. Returns None once the source is exhausted.
    """

    try:
        raw = source.readline()
        if isinstance(raw, bytes):
            raw = raw.decode(encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Read failed at line %d: %s", line_number, e)
        raise PatchReadError(
            e, operation="parse_patch_file", line_number=line_number
        ) from e

    if raw == "":
        return None
    return raw


def parse_header(line: str, line_number: int = 1) -> str:
    """
    Extract the target filename from the header line.

    The header is `>` followed by the filename. Only the trailing line
    ending is stripped; an empty filename is accepted.
    """

    line = _strip_line_ending(line)
    if not line.startswith(HEADER_MARKER):
        raise WrongFormatError(
            f"header must start with {HEADER_MARKER!r}",
            line_number=line_number,
            line=line,
            operation="parse_header",
        )
    return line[len(HEADER_MARKER):]


def check_patch_line_format(line: str, line_number: int | None = None) -> None:
    """
    Check that a patch line is exactly `AAAAAAAAAAAAAAAA:OO->NN`.

    Raises:
        WrongFormatError: wrong length, misplaced separators or a
            non-hex character in one of the three fields
    """

    def fail(reason: str) -> WrongFormatError:
        return WrongFormatError(
            reason,
            line_number=line_number,
            line=line,
            operation="check_patch_line_format",
        )

    if len(line) != PATCH_LINE_LENGTH:
        raise fail(f"patch line must be {PATCH_LINE_LENGTH} characters long")
    if line[ADDRESS_SEPARATOR] != ":":
        raise fail("expected ':' after the address")
    if line[VALUE_SEPARATOR] != "->":
        raise fail("expected '->' between old and new values")
    if not _is_hex(line[ADDRESS_FIELD]):
        raise fail("address is not hexadecimal")
    if not _is_hex(line[OLD_FIELD]):
        raise fail("old value is not hexadecimal")
    if not _is_hex(line[NEW_FIELD]):
        raise fail("new value is not hexadecimal")


def parse_patch_line(line: str, line_number: int | None = None) -> HexPatch:
    line = _strip_line_ending(line)
    check_patch_line_format(line, line_number)

    try:
        address = int(line[ADDRESS_FIELD], 16)
    except ValueError as e:
        raise PatchConversionError(
            e, operation="parse_patch_line", line_number=line_number, line=line
        ) from e

    try:
        old = int(line[OLD_FIELD], 16)
        new = int(line[NEW_FIELD], 16)
    except ValueError as e:
        raise WrongFormatError(
            "invalid byte value",
            line_number=line_number,
            line=line,
            operation="parse_patch_line",
        ) from e

    return HexPatch(address, old, new)


def parse_patch_file(
    source: SeekableLineReader,
    settings: ParserSettings | None = None,
) -> F1337Patch:
    """
    Parse a 1337patch file from an open, seekable source.

    The source is always read from its first byte, whatever position the
    caller left it at. The caller keeps ownership of the handle.

    Args:
        source: binary file, `io.BytesIO` or any text buffer with
            `readline()` and `seek()`
        settings: decoding options, defaults to `ParserSettings()`

    Returns:
        F1337Patch with the target filename and the patches in file order

    Raises:
        WrongFormatError: the header or a patch line breaks the grammar
        PatchReadError: the source could not be read or decoded
        PatchConversionError: a validated hex field failed to convert
        OSError: the source could not be rewound; this is not wrapped
    """

    settings = settings or ParserSettings()

    source.seek(0, io.SEEK_SET)

    header = _read_line(source, settings.encoding, line_number=1)
    if header is None:
        raise WrongFormatError(
            "patch file is empty", line_number=1, operation="parse_patch_file"
        )

    try:
        target_filename = parse_header(header)
    except WrongFormatError:
        logger.debug("Rejected header line %r", header)
        raise

    patch_file = F1337Patch(target_filename)
    line_number = 1

    while True:
        line_number += 1
        line = _read_line(source, settings.encoding, line_number)
        if line is None:
            break
        try:
            patch_file.add_patch(parse_patch_line(line, line_number))
        except (WrongFormatError, PatchConversionError) as e:
            logger.debug("Rejected patch line %d: %s", line_number, e)
            raise

    logger.debug(
        "Parsed %d patches for %s", len(patch_file.patches), target_filename
    )
    return patch_file


def parse_patch_bytes(
    data: bytes | str,
    settings: ParserSettings | None = None,
) -> F1337Patch:
    """Parse an in-memory 1337patch document."""

    if isinstance(data, str):
        return parse_patch_file(io.StringIO(data), settings=settings)
    return parse_patch_file(io.BytesIO(data), settings=settings)
