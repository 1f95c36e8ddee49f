from __future__ import annotations

import struct

import pytest


class FntBuilder:
    """Hand-packs binary BMFont fixtures, independently of the decoder's layouts."""

    @staticmethod
    def block(tag: int, payload: bytes) -> bytes:
        return struct.pack("<BI", tag, len(payload)) + payload

    @staticmethod
    def file(*blocks: bytes, magic: bytes = b"BMF", version: int = 3) -> bytes:
        return magic + bytes([version]) + b"".join(blocks)

    @staticmethod
    def info(
        *,
        font_size: int = 32,
        bit_field: int = 0,
        charset: int = 0,
        stretch_h: int = 100,
        aa: int = 1,
        padding: tuple[int, int, int, int] = (0, 0, 0, 0),
        spacing: tuple[int, int] = (1, 1),
        outline: int = 0,
        name: bytes = b"Arial",
    ) -> bytes:
        return (
            struct.pack("<hBBHB", font_size, bit_field, charset, stretch_h, aa)
            + bytes(padding)
            + bytes(spacing)
            + bytes([outline])
            + name
        )

    @staticmethod
    def common(
        *,
        line_height: int = 32,
        base: int = 26,
        scale_w: int = 256,
        scale_h: int = 256,
        pages: int = 1,
        bit_field: int = 0,
        channels: tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> bytes:
        return struct.pack("<HHHHHB", line_height, base, scale_w, scale_h, pages, bit_field) + bytes(channels)

    @staticmethod
    def char(
        char_id: int,
        *,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        xoffset: int = 0,
        yoffset: int = 0,
        xadvance: int = 0,
        page: int = 0,
        chnl: int = 15,
    ) -> bytes:
        return struct.pack(
            "<IHHHHhhhBB", char_id, x, y, width, height, xoffset, yoffset, xadvance, page, chnl
        )

    @staticmethod
    def kerning(first: int, second: int, amount: int) -> bytes:
        return struct.pack("<IIh", first, second, amount)

    @staticmethod
    def pages(*names: bytes) -> bytes:
        return b"".join(name + b"\x00" for name in names)


@pytest.fixture
def fnt() -> type[FntBuilder]:
    return FntBuilder


@pytest.fixture
def sample_fnt(fnt) -> bytes:
    """A small but complete descriptor: every block kind, two pages, three glyphs."""

    return fnt.file(
        fnt.block(1, fnt.info(font_size=-24, bit_field=0b1100_0000, name=b"Caf\xe9 Sans")),
        fnt.block(2, fnt.common(pages=2, bit_field=1, channels=(1, 0, 0, 0))),
        fnt.block(3, fnt.pages(b"cafe_0.png", b"cafe_1.png")),
        fnt.block(
            4,
            fnt.char(65, x=10, y=20, width=14, height=18, xoffset=-1, yoffset=4, xadvance=13)
            + fnt.char(66, x=30, y=20, width=12, height=18, xoffset=1, yoffset=4, xadvance=12)
            + fnt.char(0x20AC, x=5, y=40, width=16, height=18, yoffset=-3, xadvance=15, page=1),
        ),
        fnt.block(5, fnt.kerning(65, 66, -2) + fnt.kerning(66, 65, 1)),
    )
