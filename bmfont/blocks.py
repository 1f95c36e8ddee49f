"""
Block framing for binary BMFont descriptors (container version 3).

Layout (little endian):

    char[3] magic       # "BMF"
    uint8   version     # 3
    repeated:
        uint8  block_type
        uint32 block_size
        <block_size bytes of payload>

Block types 1-5 are Info, Common, Pages, Chars and KerningPairs.  Any other
type is carried through as :class:`UnknownBlock` so newer writers do not
break older readers.
"""

from __future__ import annotations

import enum
import logging
import struct
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from .errors import BlockDecodeError, FormatError, InvalidMagic, TruncatedInput, UnsupportedVersion
from .records import (
    Char,
    Common,
    Info,
    KerningPair,
    decode_chars,
    decode_common,
    decode_info,
    decode_kerning_pairs,
)
from .text import Transcoder, split_page_names

logger = logging.getLogger(__name__)

BMF_MAGIC = b"BMF"
BMF_VERSION = 3
HEADER_SIZE = 4

_BLOCK_HEADER = struct.Struct("<BI")
BLOCK_HEADER_SIZE = _BLOCK_HEADER.size  # 5


class BlockKind(enum.IntEnum):
    INFO = 1
    COMMON = 2
    PAGES = 3
    CHARS = 4
    KERNING_PAIRS = 5


@dataclass(frozen=True)
class RawBlock:
    offset: int  # of the block header, from the start of the file
    tag: int
    payload: bytes

    @property
    def size(self) -> int:
        return len(self.payload)

    @property
    def kind(self) -> BlockKind | None:
        try:
            return BlockKind(self.tag)
        except ValueError:
            return None


@dataclass(frozen=True)
class InfoBlock:
    info: Info


@dataclass(frozen=True)
class CommonBlock:
    common: Common


@dataclass(frozen=True)
class PagesBlock:
    pages: Tuple[str, ...]


@dataclass(frozen=True)
class CharsBlock:
    chars: Tuple[Char, ...]


@dataclass(frozen=True)
class KerningPairsBlock:
    kerning_pairs: Tuple[KerningPair, ...]


@dataclass(frozen=True)
class UnknownBlock:
    tag: int
    payload: bytes


Block = Union[InfoBlock, CommonBlock, PagesBlock, CharsBlock, KerningPairsBlock, UnknownBlock]


def check_header(buffer: bytes | memoryview) -> None:
    if len(buffer) < HEADER_SIZE:
        raise TruncatedInput("file header", needed=HEADER_SIZE, available=len(buffer), offset=0)
    magic = bytes(buffer[:3])
    if magic != BMF_MAGIC:
        raise InvalidMagic(magic)
    if buffer[3] != BMF_VERSION:
        raise UnsupportedVersion(buffer[3])


def iter_blocks(buffer: bytes | memoryview) -> Iterator[RawBlock]:
    """Validate the file header, then yield every block in stream order.

    Iteration stops once fewer than five bytes remain; those trailing bytes
    cannot hold another block header and are ignored.
    """

    check_header(buffer)
    mv = memoryview(buffer)
    limit = len(mv)
    offset = HEADER_SIZE
    while limit - offset >= BLOCK_HEADER_SIZE:
        tag, size = _BLOCK_HEADER.unpack_from(mv, offset)
        payload_offset = offset + BLOCK_HEADER_SIZE
        payload_end = payload_offset + size
        if payload_end > limit:
            raise TruncatedInput(
                f"block type {tag}",
                needed=size,
                available=limit - payload_offset,
                offset=offset,
            )
        yield RawBlock(offset=offset, tag=tag, payload=bytes(mv[payload_offset:payload_end]))
        offset = payload_end
    if offset < limit:
        logger.debug("ignoring %d trailing byte(s) at 0x%X", limit - offset, offset)


def _decode_payload(kind: BlockKind, payload: bytes, transcoder: Transcoder) -> Block:
    if kind is BlockKind.INFO:
        return InfoBlock(decode_info(payload, transcoder))
    if kind is BlockKind.COMMON:
        return CommonBlock(decode_common(payload))
    if kind is BlockKind.PAGES:
        return PagesBlock(tuple(split_page_names(transcoder.decode(payload))))
    if kind is BlockKind.CHARS:
        return CharsBlock(tuple(decode_chars(payload)))
    return KerningPairsBlock(tuple(decode_kerning_pairs(payload)))


def decode_block(raw: RawBlock, transcoder: Transcoder) -> Block:
    """Turn one framed block into its typed variant.

    Decoder failures are re-raised as :class:`BlockDecodeError` naming the
    block kind, with the original error chained.
    """

    kind = raw.kind
    if kind is None:
        logger.debug("skipping unknown block type %d (%d bytes) at 0x%X", raw.tag, raw.size, raw.offset)
        return UnknownBlock(tag=raw.tag, payload=raw.payload)
    try:
        return _decode_payload(kind, raw.payload, transcoder)
    except FormatError as exc:
        raise BlockDecodeError(kind, exc, index=getattr(exc, "index", None)) from exc


def iter_decoded_blocks(buffer: bytes | memoryview, transcoder: Transcoder | None = None) -> Iterator[Block]:
    transcoder = transcoder or Transcoder()
    for raw in iter_blocks(buffer):
        yield decode_block(raw, transcoder)
