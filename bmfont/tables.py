"""
numpy views over the glyph and kerning tables.

Large Unicode fonts carry thousands of glyph records; a structured array makes
range checks and metric summaries one-liners instead of Python loops.
"""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np

from .layout import RecordLayout
from .records import CHAR_LAYOUT, KERNING_PAIR_LAYOUT, Char, KerningPair

_NUMPY_CODES = {
    (1, False): "u1",
    (1, True): "i1",
    (2, False): "<u2",
    (2, True): "<i2",
    (4, False): "<u4",
    (4, True): "<i4",
}


def layout_dtype(layout: RecordLayout) -> np.dtype:
    """Structured dtype matching a record layout byte for byte."""

    return np.dtype(
        {
            "names": [entry.name for entry in layout.fields],
            "formats": [_NUMPY_CODES[(entry.width, entry.signed)] for entry in layout.fields],
            "offsets": [entry.offset for entry in layout.fields],
            "itemsize": layout.size,
        }
    )


CHAR_DTYPE = layout_dtype(CHAR_LAYOUT)
KERNING_PAIR_DTYPE = layout_dtype(KERNING_PAIR_LAYOUT)


def _records_to_array(records: Sequence, layout: RecordLayout, dtype: np.dtype) -> np.ndarray:
    names = [entry.name for entry in layout.fields]
    rows = [tuple(getattr(record, name) for name in names) for record in records]
    return np.array(rows, dtype=dtype)


def char_table(chars: Sequence[Char]) -> np.ndarray:
    return _records_to_array(chars, CHAR_LAYOUT, CHAR_DTYPE)


def kerning_table(pairs: Sequence[KerningPair]) -> np.ndarray:
    return _records_to_array(pairs, KERNING_PAIR_LAYOUT, KERNING_PAIR_DTYPE)


def char_table_from_payload(payload: bytes) -> np.ndarray:
    """View a raw Chars block payload directly; the length must be a multiple of 20."""

    return np.frombuffer(payload, dtype=CHAR_DTYPE)


def summarize_metrics(table: np.ndarray) -> Dict[str, tuple[int, int]]:
    """(min, max) of the glyph metrics, keyed by field name."""

    if table.size == 0:
        return {}
    summary: Dict[str, tuple[int, int]] = {}
    for name in ("width", "height", "xoffset", "yoffset", "xadvance"):
        column = table[name]
        summary[name] = (int(column.min()), int(column.max()))
    return summary


def glyphs_outside_atlas(table: np.ndarray, scale_w: int, scale_h: int) -> np.ndarray:
    """Ids of glyphs whose atlas rectangle spills past the page size."""

    if table.size == 0:
        return np.array([], dtype=np.uint32)
    right = table["x"].astype(np.int64) + table["width"]
    bottom = table["y"].astype(np.int64) + table["height"]
    mask = (right > scale_w) | (bottom > scale_h)
    return table["id"][mask]
