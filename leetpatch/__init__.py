from leetpatch.config import ParserSettings, load_settings
from leetpatch.logging import get_logger, setup_logging
from leetpatch.patches import (
    F1337Patch,
    HexPatch,
    PatchConversionError,
    PatchFileError,
    PatchFileErrorType,
    PatchReadError,
    SeekableLineReader,
    WrongFormatError,
    parse_patch_bytes,
    parse_patch_file,
)

__all__ = [
    "HexPatch",
    "F1337Patch",
    "SeekableLineReader",
    "parse_patch_file",
    "parse_patch_bytes",
    "PatchFileError",
    "PatchFileErrorType",
    "WrongFormatError",
    "PatchReadError",
    "PatchConversionError",
    "ParserSettings",
    "load_settings",
    "setup_logging",
    "get_logger",
]
