#!/usr/bin/env python3
"""
Overlay the decoded glyph rectangles on a BMFont page image.

Useful for eyeballing whether the x/y/width/height values of a descriptor line
up with the texture it references.  Example:

    python render_atlas_preview.py arial.fnt --output arial_page0.png --page 0
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw

from bmfont import DEFAULT_ENCODING, Font, FormatError, decode

BOX_COLOUR = (255, 0, 64, 255)
ORIGIN_COLOUR = (0, 160, 255, 255)


def load_page_image(font: Font, page: int, base_dir: Path) -> Image.Image:
    """Open the page texture, or a blank canvas of the declared size when it is missing."""

    if page < 0:
        raise SystemExit(f"Page index must be non-negative, got {page}.")
    if page < len(font.pages):
        path = base_dir / font.pages[page]
        if path.exists():
            with Image.open(path) as source:
                return source.convert("RGBA")
    if font.common is None:
        raise SystemExit(f"Page {page} image is missing and the descriptor has no common block.")
    size = (max(1, font.common.scale_w), max(1, font.common.scale_h))
    return Image.new("RGBA", size, (255, 255, 255, 0))


def render_overlay(font: Font, page: int, base_dir: Path, destination: Path, *, scale: int = 1) -> int:
    image = load_page_image(font, page, base_dir)
    if scale > 1:
        image = image.resize((image.width * scale, image.height * scale), Image.Resampling.NEAREST)
    draw = ImageDraw.Draw(image)
    drawn = 0
    for char in font.chars:
        if char.page != page or char.width == 0 or char.height == 0:
            continue
        left, top, right, bottom = (value * scale for value in char.atlas_box)
        draw.rectangle([left, top, right - 1, bottom - 1], outline=BOX_COLOUR)
        draw.point((left, top), fill=ORIGIN_COLOUR)
        drawn += 1
    destination.parent.mkdir(parents=True, exist_ok=True)
    image.save(destination)
    return drawn


def _page_index(value: str) -> int:
    page = int(value)
    if page < 0:
        raise argparse.ArgumentTypeError(f"page index must be non-negative, got {page}")
    return page


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draw BMFont glyph boxes over a page image.")
    parser.add_argument("input", type=Path, help="Path to the binary .fnt file")
    parser.add_argument("--output", type=Path, required=True, help="Destination PNG")
    parser.add_argument("--page", type=_page_index, default=0, help="Page index to render (default: 0)")
    parser.add_argument("--scale", type=int, default=1, help="Integer zoom factor (default: 1)")
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Code page of the page filenames (default: {DEFAULT_ENCODING})",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        font = decode(args.input.read_bytes(), encoding=args.encoding)
    except FormatError as exc:
        raise SystemExit(f"{args.input}: {exc}") from exc
    drawn = render_overlay(font, args.page, args.input.parent, args.output, scale=max(1, args.scale))
    print(f"[+] {drawn} glyph box(es) drawn; preview written to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
