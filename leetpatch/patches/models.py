from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from leetpatch.patches.exceptions import WrongFormatError

if TYPE_CHECKING:
    from leetpatch.config import ParserSettings
    from leetpatch.patches.parser import SeekableLineReader

MAX_ADDRESS = 0xFFFF_FFFF_FFFF_FFFF
MAX_BYTE = 0xFF

HEADER_MARKER = ">"


class HexPatch(BaseModel):
    """
    One byte-level modification of the target file.

    Rendered as `AAAAAAAAAAAAAAAA:OO->NN`, all in uppercase hex:
    the 16 digit target address, the expected old byte and the new byte.
    `old == new` is a valid no-op patch.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    target_address: int = Field(ge=0, le=MAX_ADDRESS, strict=True)
    old: int = Field(ge=0, le=MAX_BYTE, strict=True)
    new: int = Field(ge=0, le=MAX_BYTE, strict=True)

    def __init__(self, target_address: int, old: int, new: int) -> None:
        super().__init__(target_address=target_address, old=old, new=new)

    @classmethod
    def from_line(cls, line: str) -> "HexPatch":
        from leetpatch.patches.parser import parse_patch_line

        return parse_patch_line(line)

    def to_line(self) -> str:
        return f"{self.target_address:016X}:{self.old:02X}->{self.new:02X}"

    def __str__(self) -> str:
        return self.to_line()

    def __repr__(self) -> str:
        return self.to_line()


class F1337Patch(BaseModel):
    """
    A parsed (or hand built) 1337patch file.

    The first line of the file starts with `>` followed by the target file
    name; every other line is a `HexPatch`:
    ```text
    >test.exe
    0000000000AF0200:13->37
    0000000000AF0206:37->37
    ```

    `patches` keeps the order the lines appeared in. Duplicate or
    overlapping addresses are not detected.
    """

    model_config = ConfigDict(
        extra="forbid",
    )

    target_filename: str
    patches: list[HexPatch] = Field(default_factory=list)

    def __init__(
        self,
        target_filename: str,
        patches: list[HexPatch] | None = None,
    ) -> None:
        super().__init__(
            target_filename=target_filename,
            patches=patches if patches is not None else [],
        )

    @classmethod
    def parse(
        cls,
        source: "SeekableLineReader",
        settings: "ParserSettings | None" = None,
    ) -> "F1337Patch":
        from leetpatch.patches.parser import parse_patch_file

        return parse_patch_file(source, settings=settings)

    def add_patch(self, patch: HexPatch) -> None:
        self.patches.append(patch)

    def to_text(self) -> str:
        if "\n" in self.target_filename or "\r" in self.target_filename:
            raise WrongFormatError(
                "target filename contains a line terminator",
                operation="F1337Patch.to_text",
            )

        lines = [f"{HEADER_MARKER}{self.target_filename}"]
        lines.extend(patch.to_line() for patch in self.patches)
        return "\n".join(lines) + "\n"
