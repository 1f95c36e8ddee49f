"""
Declarative little-endian record layouts.

Every fixed-size structure in a binary BMFont file is a run of 8/16/32-bit
integers.  Each record kind lists its fields once as :class:`FieldSpec`
entries; :class:`RecordLayout` compiles them into a single ``struct`` format
so all record kinds share one decoder.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from .errors import TruncatedInput

T = TypeVar("T")

# (width, signed) -> struct code
_STRUCT_CODES = {
    (1, False): "B",
    (1, True): "b",
    (2, False): "H",
    (2, True): "h",
    (4, False): "I",
    (4, True): "i",
}


@dataclass(frozen=True)
class FieldSpec:
    name: str
    offset: int
    width: int
    signed: bool = False

    @property
    def end(self) -> int:
        return self.offset + self.width

    @property
    def code(self) -> str:
        try:
            return _STRUCT_CODES[(self.width, self.signed)]
        except KeyError:
            raise ValueError(f"field {self.name!r} has unsupported width {self.width}") from None


@dataclass(frozen=True)
class RecordLayout(Generic[T]):
    """A named record description bound to the type it produces."""

    name: str
    fields: tuple[FieldSpec, ...]
    factory: Callable[..., T]
    _struct: struct.Struct = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        fmt = ["<"]
        cursor = 0
        for entry in sorted(self.fields, key=lambda item: item.offset):
            if entry.offset < cursor:
                raise ValueError(f"{self.name}: field {entry.name!r} overlaps the previous field")
            if entry.offset > cursor:
                fmt.append(f"{entry.offset - cursor}x")
            fmt.append(entry.code)
            cursor = entry.end
        object.__setattr__(self, "_struct", struct.Struct("".join(fmt)))

    @property
    def size(self) -> int:
        return self._struct.size

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in sorted(self.fields, key=lambda item: item.offset))

    def unpack_values(self, span: bytes | memoryview, offset: int = 0) -> dict[str, int]:
        available = len(span) - offset
        if available < self.size:
            raise TruncatedInput(f"{self.name} record", needed=self.size, available=max(available, 0))
        values = self._struct.unpack_from(span, offset)
        return dict(zip(self.field_names, values))

    def unpack(self, span: bytes | memoryview, offset: int = 0) -> T:
        """Decode one record starting at ``offset``."""

        return self.factory(**self.unpack_values(span, offset))

    def pack(self, record: Any) -> bytes:
        """Re-encode the integer fields of ``record``; used by tooling and tests."""

        return self._struct.pack(*(getattr(record, name) for name in self.field_names))


def layout_fields(*entries: tuple[str, int, int] | tuple[str, int, int, bool]) -> tuple[FieldSpec, ...]:
    return tuple(FieldSpec(*entry) for entry in entries)
