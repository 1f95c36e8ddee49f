#!/usr/bin/env python3
"""
Dump the contents of a binary BMFont descriptor (.fnt, version 3).

Prints the face/common metadata and glyph metric ranges, optionally lists the
raw block framing and previews the first few glyph records, and can write the
whole decoded font as JSON so descriptors can be diffed without a font tool.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from bmfont import CHAR_SIZE, DEFAULT_ENCODING, BlockKind, Font, FormatError, RawBlock, decode, iter_blocks
from bmfont.tables import (
    char_table,
    char_table_from_payload,
    glyphs_outside_atlas,
    kerning_table,
    summarize_metrics,
)


def describe_block(block: RawBlock) -> str:
    kind = block.kind.name.lower() if block.kind is not None else "unknown"
    parts = [
        f"off=0x{block.offset:04X}",
        f"tag={block.tag}",
        f"kind={kind}",
        f"size={block.size}",
    ]
    if block.kind is BlockKind.CHARS and block.size % CHAR_SIZE == 0:
        table = char_table_from_payload(block.payload)
        ids = f" ids={int(table['id'].min())}..{int(table['id'].max())}" if table.size else ""
        parts.append(f"records={table.size}{ids}")
    return " | ".join(parts)


def summarize_font(font: Font) -> list[str]:
    lines: list[str] = []
    if font.info:
        info = font.info
        flags = [name for name in ("smooth", "unicode", "italic", "bold", "fixed_height") if getattr(info, name)]
        lines.append(f"face={info.font_name!r} size={info.font_size} charset={info.charset}")
        lines.append(
            f"  flags={','.join(flags) or '-'} stretch={info.stretch_h}% aa={info.aa} "
            f"padding={info.padding} spacing={info.spacing} outline={info.outline}"
        )
    else:
        lines.append("face=(no info block)")
    if font.common:
        common = font.common
        lines.append(
            f"line_height={common.line_height} base={common.base} "
            f"scale={common.scale_w}x{common.scale_h} pages={common.pages} packed={common.packed}"
        )
    lines.append(f"pages: {', '.join(font.pages) if font.pages else '-'}")

    table = char_table(font.chars)
    lines.append(f"chars: {len(font.chars)}")
    for name, (low, high) in summarize_metrics(table).items():
        lines.append(f"  {name:<9} {low:+d} .. {high:+d}")
    if font.common:
        spill = glyphs_outside_atlas(table, font.common.scale_w, font.common.scale_h)
        if len(spill):
            lines.append(f"  {len(spill)} glyph(s) extend past the page size: {spill[:8].tolist()}")

    kerning = kerning_table(font.kerning_pairs)
    if kerning.size:
        lines.append(
            f"kerning pairs: {kerning.size} "
            f"(amount {int(kerning['amount'].min()):+d} .. {int(kerning['amount'].max()):+d})"
        )
    else:
        lines.append("kerning pairs: 0")
    return lines


def _print_preview(font: Font, limit: int) -> None:
    preview = font.chars[: max(0, limit)]
    if not preview:
        return
    print("[preview]")
    for char in preview:
        label = chr(char.id) if 32 <= char.id < 0x110000 and chr(char.id).isprintable() else "?"
        print(
            f"  id={char.id:<6} {label!r:<5} pos=({char.x},{char.y}) size={char.width}x{char.height} "
            f"offset=({char.xoffset:+d},{char.yoffset:+d}) advance={char.xadvance:+d} "
            f"page={char.page} chnl={char.chnl}"
        )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dump a binary BMFont (.fnt) descriptor.")
    parser.add_argument("input", type=Path, help="Path to the binary .fnt file")
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Code page of the face name and page filenames (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument("--blocks", action="store_true", help="List the raw block framing")
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of glyph records to preview (default: 10)",
    )
    parser.add_argument("--json", type=Path, help="Optional destination for the decoded font JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging from the decoder")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    blob = args.input.read_bytes()
    try:
        font = decode(blob, encoding=args.encoding)
    except FormatError as exc:
        print(f"{args.input}: {exc}", file=sys.stderr)
        return 1

    print(f"[+] {args.input} ({len(blob)} bytes)")
    if args.blocks:
        for block in iter_blocks(blob):
            print(describe_block(block))
    for line in summarize_font(font):
        print(line)
    _print_preview(font, args.limit)
    if args.json:
        payload = {"source": str(args.input), "font": font.to_dict()}
        args.json.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"[+] JSON written to {args.json}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
