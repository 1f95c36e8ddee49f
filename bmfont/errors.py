from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .blocks import BlockKind


class FormatError(ValueError):
    """Base class for every failure raised while decoding a BMFont descriptor."""


class InvalidMagic(FormatError):
    def __init__(self, found: bytes) -> None:
        self.found = bytes(found)
        super().__init__(f"Invalid identifier {self.found!r} (expected b'BMF')")


class UnsupportedVersion(FormatError):
    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Unsupported version {version} (only version 3 is understood)")


class TruncatedInput(FormatError):
    def __init__(
        self,
        what: str,
        *,
        needed: int,
        available: int,
        offset: int | None = None,
        index: int | None = None,
    ) -> None:
        self.what = what
        self.needed = needed
        self.available = available
        self.offset = offset
        self.index = index  # record number inside an array block
        where = f" at 0x{offset:X}" if offset is not None else ""
        super().__init__(f"Truncated {what}{where}: needed {needed} byte(s), {available} available")


class LengthMismatch(FormatError):
    def __init__(self, what: str, *, expected: int, actual: int) -> None:
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} is {actual} byte(s) long, expected {expected}")


class EncodingError(FormatError):
    def __init__(self, encoding: str, reason: str) -> None:
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"Unable to transcode text from {encoding}: {reason}")


class BlockDecodeError(FormatError):
    """A block payload failed to decode.

    ``cause`` is the lower-level :class:`FormatError` (also chained as
    ``__cause__``); ``index`` is the failing record for Chars/KerningPairs blocks.
    """

    def __init__(self, kind: "BlockKind", cause: FormatError, *, index: int | None = None) -> None:
        self.kind = kind
        self.cause = cause
        self.index = index
        label = kind.name.lower().replace("_", " ")
        if index is None:
            message = f"Error parsing {label} block: {cause}"
        else:
            message = f"Error parsing {label} record {index}: {cause}"
        super().__init__(message)
