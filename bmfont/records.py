from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List, Tuple, TypeVar

from .errors import LengthMismatch, TruncatedInput
from .layout import RecordLayout, layout_fields
from .text import Transcoder

T = TypeVar("T")

INFO_BITFIELD_SMOOTH = 1 << 7
INFO_BITFIELD_UNICODE = 1 << 6
INFO_BITFIELD_ITALIC = 1 << 5
INFO_BITFIELD_BOLD = 1 << 4
INFO_BITFIELD_FIXED_HEIGHT = 1 << 3

COMMON_BITFIELD_PACKED = 1


@dataclass(frozen=True)
class Info:
    font_size: int
    bit_field: int
    charset: int
    stretch_h: int  # percent, 100 means no stretch
    aa: int  # supersampling level, 1 means none
    padding_up: int
    padding_right: int
    padding_down: int
    padding_left: int
    spacing_horiz: int
    spacing_vert: int
    outline: int
    font_name: str = ""

    @property
    def smooth(self) -> bool:
        return bool(self.bit_field & INFO_BITFIELD_SMOOTH)

    @property
    def unicode(self) -> bool:
        return bool(self.bit_field & INFO_BITFIELD_UNICODE)

    @property
    def italic(self) -> bool:
        return bool(self.bit_field & INFO_BITFIELD_ITALIC)

    @property
    def bold(self) -> bool:
        return bool(self.bit_field & INFO_BITFIELD_BOLD)

    @property
    def fixed_height(self) -> bool:
        return bool(self.bit_field & INFO_BITFIELD_FIXED_HEIGHT)

    @property
    def padding(self) -> Tuple[int, int, int, int]:
        return self.padding_up, self.padding_right, self.padding_down, self.padding_left

    @property
    def spacing(self) -> Tuple[int, int]:
        return self.spacing_horiz, self.spacing_vert

    def to_dict(self) -> dict:
        data = asdict(self)
        data.update(
            smooth=self.smooth,
            unicode=self.unicode,
            italic=self.italic,
            bold=self.bold,
            fixed_height=self.fixed_height,
        )
        return data


@dataclass(frozen=True)
class Common:
    line_height: int
    base: int
    scale_w: int
    scale_h: int
    pages: int
    bit_field: int
    alpha_chnl: int
    red_chnl: int
    green_chnl: int
    blue_chnl: int

    @property
    def packed(self) -> bool:
        return bool(self.bit_field & COMMON_BITFIELD_PACKED)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["packed"] = self.packed
        return data


@dataclass(frozen=True)
class Char:
    id: int
    x: int
    y: int
    width: int
    height: int
    xoffset: int
    yoffset: int
    xadvance: int
    page: int
    chnl: int

    @property
    def atlas_box(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom) of the glyph inside its page image."""

        return self.x, self.y, self.x + self.width, self.y + self.height

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class KerningPair:
    first: int
    second: int
    amount: int

    def to_dict(self) -> dict:
        return asdict(self)


INFO_LAYOUT: RecordLayout[Info] = RecordLayout(
    "info",
    layout_fields(
        ("font_size", 0, 2, True),
        ("bit_field", 2, 1),
        ("charset", 3, 1),
        ("stretch_h", 4, 2),
        ("aa", 6, 1),
        ("padding_up", 7, 1),
        ("padding_right", 8, 1),
        ("padding_down", 9, 1),
        ("padding_left", 10, 1),
        ("spacing_horiz", 11, 1),
        ("spacing_vert", 12, 1),
        ("outline", 13, 1),
    ),
    Info,
)

COMMON_LAYOUT: RecordLayout[Common] = RecordLayout(
    "common",
    layout_fields(
        ("line_height", 0, 2),
        ("base", 2, 2),
        ("scale_w", 4, 2),
        ("scale_h", 6, 2),
        ("pages", 8, 2),
        ("bit_field", 10, 1),
        ("alpha_chnl", 11, 1),
        ("red_chnl", 12, 1),
        ("green_chnl", 13, 1),
        ("blue_chnl", 14, 1),
    ),
    Common,
)

CHAR_LAYOUT: RecordLayout[Char] = RecordLayout(
    "char",
    layout_fields(
        ("id", 0, 4),
        ("x", 4, 2),
        ("y", 6, 2),
        ("width", 8, 2),
        ("height", 10, 2),
        ("xoffset", 12, 2, True),
        ("yoffset", 14, 2, True),
        ("xadvance", 16, 2, True),
        ("page", 18, 1),
        ("chnl", 19, 1),
    ),
    Char,
)

KERNING_PAIR_LAYOUT: RecordLayout[KerningPair] = RecordLayout(
    "kerning pair",
    layout_fields(
        ("first", 0, 4),
        ("second", 4, 4),
        ("amount", 8, 2, True),
    ),
    KerningPair,
)

INFO_HEADER_SIZE = INFO_LAYOUT.size  # 14
COMMON_SIZE = COMMON_LAYOUT.size  # 15
CHAR_SIZE = CHAR_LAYOUT.size  # 20
KERNING_PAIR_SIZE = KERNING_PAIR_LAYOUT.size  # 10


def decode_info(payload: bytes | memoryview, transcoder: Transcoder) -> Info:
    values = INFO_LAYOUT.unpack_values(payload)
    # The face name runs to the end of the block; no terminator handling.
    return Info(**values, font_name=transcoder.decode(payload[INFO_HEADER_SIZE:]))


def decode_common(payload: bytes | memoryview) -> Common:
    common = COMMON_LAYOUT.unpack(payload)
    if len(payload) != COMMON_SIZE:
        raise LengthMismatch("common block", expected=COMMON_SIZE, actual=len(payload))
    return common


def _decode_array(payload: bytes | memoryview, layout: RecordLayout[T]) -> List[T]:
    """Decode back-to-back records; a partial tail record is a truncation."""

    count, remainder = divmod(len(payload), layout.size)
    if remainder:
        raise TruncatedInput(
            f"{layout.name} record",
            needed=layout.size,
            available=remainder,
            offset=count * layout.size,
            index=count,
        )
    return [layout.unpack(payload, index * layout.size) for index in range(count)]


def decode_chars(payload: bytes | memoryview) -> List[Char]:
    return _decode_array(payload, CHAR_LAYOUT)


def decode_kerning_pairs(payload: bytes | memoryview) -> List[KerningPair]:
    return _decode_array(payload, KERNING_PAIR_LAYOUT)
