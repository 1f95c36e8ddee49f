from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import List

from .errors import EncodingError

DEFAULT_ENCODING = "cp1252"
PAGE_TERMINATOR = "\x00"

# Python's cp1252 leaves 0x81, 0x8D, 0x8F, 0x90 and 0x9D undefined; the
# Windows/WHATWG table maps them straight to the C1 controls U+0081 etc.
C1_PASSTHROUGH_ERRORS = "bmfont-c1-passthrough"
_C1_PASSTHROUGH_CODECS = {"cp1252"}


def _c1_passthrough(exc: UnicodeError) -> tuple[str, int]:
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    undefined = exc.object[exc.start : exc.end]
    if any(not 0x80 <= byte <= 0x9F for byte in undefined):
        raise exc
    return undefined.decode("latin-1"), exc.end


codecs.register_error(C1_PASSTHROUGH_ERRORS, _c1_passthrough)


@dataclass(frozen=True)
class Transcoded:
    text: str
    consumed: int  # source bytes
    produced: int  # UTF-8 bytes of ``text``


@dataclass(frozen=True)
class Transcoder:
    """Decode legacy single-byte text spans into ``str``.

    BMFont writers store the font face name and the page filenames in the
    ANSI code page of the machine that generated the file, which in practice
    is Windows-1252.  The encoding is carried per instance so callers can
    decode files from other code pages side by side.
    """

    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise EncodingError(self.encoding, "unknown codec") from exc

    @property
    def errors(self) -> str:
        if codecs.lookup(self.encoding).name in _C1_PASSTHROUGH_CODECS:
            return C1_PASSTHROUGH_ERRORS
        return "strict"

    def transcode(self, span: bytes | memoryview) -> Transcoded:
        raw = bytes(span)
        try:
            text = raw.decode(self.encoding, self.errors)
        except UnicodeDecodeError as exc:
            raise EncodingError(
                self.encoding, f"byte 0x{raw[exc.start]:02X} at position {exc.start} is undefined"
            ) from exc
        return Transcoded(text=text, consumed=len(raw), produced=len(text.encode("utf-8")))

    def decode(self, span: bytes | memoryview) -> str:
        return self.transcode(span).text


def split_page_names(text: str) -> List[str]:
    """Split the Pages block text on NUL terminators.

    Only the empty tail left behind by the final terminator is dropped, so a
    writer that emits an empty page name still gets a slot for it.
    """

    names = text.split(PAGE_TERMINATOR)
    if names and names[-1] == "":
        names.pop()
    return names
