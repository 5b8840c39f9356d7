from leetpatch.patches.exceptions import (
    PatchConversionError,
    PatchFileError,
    PatchFileErrorType,
    PatchReadError,
    WrongFormatError,
)
from leetpatch.patches.models import F1337Patch, HexPatch
from leetpatch.patches.parser import (
    SeekableLineReader,
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
]
