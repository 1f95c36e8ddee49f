"""
Decoder for binary AngelCode BMFont descriptors (``.fnt``, container version 3).
"""

from .blocks import (
    BMF_MAGIC,
    BMF_VERSION,
    Block,
    BlockKind,
    CharsBlock,
    CommonBlock,
    InfoBlock,
    KerningPairsBlock,
    PagesBlock,
    RawBlock,
    UnknownBlock,
    decode_block,
    iter_blocks,
    iter_decoded_blocks,
)
from .errors import (
    BlockDecodeError,
    EncodingError,
    FormatError,
    InvalidMagic,
    LengthMismatch,
    TruncatedInput,
    UnsupportedVersion,
)
from .font import Font, FontAssembler, decode, decode_font
from .layout import FieldSpec, RecordLayout
from .records import (
    CHAR_LAYOUT,
    CHAR_SIZE,
    COMMON_BITFIELD_PACKED,
    COMMON_LAYOUT,
    COMMON_SIZE,
    INFO_BITFIELD_BOLD,
    INFO_BITFIELD_FIXED_HEIGHT,
    INFO_BITFIELD_ITALIC,
    INFO_BITFIELD_SMOOTH,
    INFO_BITFIELD_UNICODE,
    INFO_HEADER_SIZE,
    INFO_LAYOUT,
    KERNING_PAIR_LAYOUT,
    KERNING_PAIR_SIZE,
    Char,
    Common,
    Info,
    KerningPair,
)
from .text import DEFAULT_ENCODING, Transcoded, Transcoder, split_page_names

__all__ = [
    "BMF_MAGIC",
    "BMF_VERSION",
    "Block",
    "BlockKind",
    "CharsBlock",
    "CommonBlock",
    "InfoBlock",
    "KerningPairsBlock",
    "PagesBlock",
    "RawBlock",
    "UnknownBlock",
    "decode_block",
    "iter_blocks",
    "iter_decoded_blocks",
    "BlockDecodeError",
    "EncodingError",
    "FormatError",
    "InvalidMagic",
    "LengthMismatch",
    "TruncatedInput",
    "UnsupportedVersion",
    "Font",
    "FontAssembler",
    "decode",
    "decode_font",
    "FieldSpec",
    "RecordLayout",
    "CHAR_LAYOUT",
    "CHAR_SIZE",
    "COMMON_BITFIELD_PACKED",
    "COMMON_LAYOUT",
    "COMMON_SIZE",
    "INFO_BITFIELD_BOLD",
    "INFO_BITFIELD_FIXED_HEIGHT",
    "INFO_BITFIELD_ITALIC",
    "INFO_BITFIELD_SMOOTH",
    "INFO_BITFIELD_UNICODE",
    "INFO_HEADER_SIZE",
    "INFO_LAYOUT",
    "KERNING_PAIR_LAYOUT",
    "KERNING_PAIR_SIZE",
    "Char",
    "Common",
    "Info",
    "KerningPair",
    "DEFAULT_ENCODING",
    "Transcoded",
    "Transcoder",
    "split_page_names",
]
