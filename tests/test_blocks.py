from __future__ import annotations

import logging

import pytest

from bmfont import (
    BlockDecodeError,
    BlockKind,
    CharsBlock,
    CommonBlock,
    InfoBlock,
    InvalidMagic,
    KerningPairsBlock,
    PagesBlock,
    RawBlock,
    Transcoder,
    TruncatedInput,
    UnknownBlock,
    UnsupportedVersion,
    decode_block,
    iter_blocks,
    iter_decoded_blocks,
)


def test_iter_blocks_reports_offsets_and_payloads(fnt):
    blob = fnt.file(fnt.block(2, fnt.common()), fnt.block(99, b"xyz"))
    blocks = list(iter_blocks(blob))
    assert blocks == [
        RawBlock(offset=4, tag=2, payload=fnt.common()),
        RawBlock(offset=24, tag=99, payload=b"xyz"),
    ]
    assert blocks[0].kind is BlockKind.COMMON
    assert blocks[1].kind is None


def test_header_only_file_has_no_blocks(fnt):
    assert list(iter_blocks(fnt.file())) == []


@pytest.mark.parametrize("tail", [b"\x01", b"\x01\x02\x03\x04"])
def test_trailing_bytes_shorter_than_a_block_header_are_ignored(fnt, tail):
    blob = fnt.file(fnt.block(5, fnt.kerning(1, 2, 3))) + tail
    assert [block.tag for block in iter_blocks(blob)] == [5]


def test_bad_magic(fnt):
    with pytest.raises(InvalidMagic) as info:
        list(iter_blocks(fnt.file(magic=b"XYZ")))
    assert info.value.found == b"XYZ"


def test_unsupported_version(fnt):
    with pytest.raises(UnsupportedVersion) as info:
        list(iter_blocks(fnt.file(version=2)))
    assert info.value.version == 2


def test_short_header_is_truncated():
    with pytest.raises(TruncatedInput):
        list(iter_blocks(b"BM"))


def test_block_running_past_the_end_is_truncated(fnt):
    blob = fnt.file(fnt.block(4, fnt.char(1)))[:-3]
    with pytest.raises(TruncatedInput) as info:
        list(iter_blocks(blob))
    assert info.value.offset == 4
    assert info.value.needed == 20
    assert info.value.available == 17


def test_each_known_tag_maps_to_its_variant(sample_fnt):
    kinds = [type(block) for block in iter_decoded_blocks(sample_fnt)]
    assert kinds == [InfoBlock, CommonBlock, PagesBlock, CharsBlock, KerningPairsBlock]


def test_unknown_block_keeps_its_payload(caplog):
    with caplog.at_level(logging.DEBUG, logger="bmfont.blocks"):
        block = decode_block(RawBlock(offset=9, tag=42, payload=b"\x01\x02"), Transcoder())
    assert block == UnknownBlock(tag=42, payload=b"\x01\x02")
    assert "unknown block type 42" in caplog.text


def test_decoder_errors_are_wrapped_with_the_block_kind(fnt):
    with pytest.raises(BlockDecodeError) as info:
        decode_block(RawBlock(offset=4, tag=2, payload=fnt.common()[:10]), Transcoder())
    err = info.value
    assert err.kind is BlockKind.COMMON
    assert err.index is None
    assert isinstance(err.cause, TruncatedInput)
    assert err.__cause__ is err.cause
    assert "common block" in str(err)


def test_record_errors_carry_the_record_index(fnt):
    payload = fnt.kerning(1, 2, 3) + b"\x00\x00"
    with pytest.raises(BlockDecodeError) as info:
        decode_block(RawBlock(offset=4, tag=5, payload=payload), Transcoder())
    assert info.value.kind is BlockKind.KERNING_PAIRS
    assert info.value.index == 1
    assert "kerning pairs record 1" in str(info.value)
