from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .blocks import (
    Block,
    CharsBlock,
    CommonBlock,
    InfoBlock,
    KerningPairsBlock,
    PagesBlock,
    UnknownBlock,
    iter_decoded_blocks,
)
from .records import Char, Common, Info, KerningPair
from .text import DEFAULT_ENCODING, Transcoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Font:
    """A fully decoded BMFont descriptor."""

    info: Info | None = None
    common: Common | None = None
    pages: Tuple[str, ...] = ()
    chars: Tuple[Char, ...] = ()
    kerning_pairs: Tuple[KerningPair, ...] = ()

    def get_char(self, char_id: int) -> Char | None:
        for char in self.chars:
            if char.id == char_id:
                return char
        return None

    def kerning_amount(self, first: int, second: int) -> int:
        for pair in self.kerning_pairs:
            if pair.first == first and pair.second == second:
                return pair.amount
        return 0

    def page_for(self, char: Char) -> str | None:
        if 0 <= char.page < len(self.pages):
            return self.pages[char.page]
        return None

    def to_dict(self) -> dict:
        """Serialize the font so it can be dumped to JSON."""

        return {
            "info": self.info.to_dict() if self.info else None,
            "common": self.common.to_dict() if self.common else None,
            "pages": list(self.pages),
            "chars": [char.to_dict() for char in self.chars],
            "kerning_pairs": [pair.to_dict() for pair in self.kerning_pairs],
        }


@dataclass
class FontAssembler:
    """Collects decoded blocks during a single pass and freezes them into a :class:`Font`."""

    info: Info | None = None
    common: Common | None = None
    pages: List[str] = field(default_factory=list)
    chars: List[Char] = field(default_factory=list)
    kerning_pairs: List[KerningPair] = field(default_factory=list)

    def add(self, block: Block) -> None:
        if isinstance(block, InfoBlock):
            if self.info is not None:
                logger.debug("info block repeated; keeping the later one")
            self.info = block.info
        elif isinstance(block, CommonBlock):
            if self.common is not None:
                logger.debug("common block repeated; keeping the later one")
            self.common = block.common
        elif isinstance(block, PagesBlock):
            self.pages.extend(block.pages)
        elif isinstance(block, CharsBlock):
            self.chars.extend(block.chars)
        elif isinstance(block, KerningPairsBlock):
            self.kerning_pairs.extend(block.kerning_pairs)
        elif not isinstance(block, UnknownBlock):
            raise TypeError(f"unexpected block {block!r}")

    def build(self) -> Font:
        return Font(
            info=self.info,
            common=self.common,
            pages=tuple(self.pages),
            chars=tuple(self.chars),
            kerning_pairs=tuple(self.kerning_pairs),
        )


def decode_font(buffer: bytes | bytearray | memoryview, transcoder: Transcoder) -> Font:
    assembler = FontAssembler()
    for block in iter_decoded_blocks(buffer, transcoder):
        assembler.add(block)
    font = assembler.build()
    logger.debug(
        "decoded font: %d page(s), %d char(s), %d kerning pair(s)",
        len(font.pages),
        len(font.chars),
        len(font.kerning_pairs),
    )
    return font


def decode(buffer: bytes | bytearray | memoryview, *, encoding: str = DEFAULT_ENCODING) -> Font:
    """Decode a binary BMFont descriptor held entirely in memory.

    ``encoding`` names the code page of the text fields (face name and page
    filenames).  Raises a :class:`~bmfont.errors.FormatError` subclass on any
    structural problem; nothing is returned for a partially valid file.
    """

    return decode_font(buffer, Transcoder(encoding))
