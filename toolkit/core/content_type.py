"""Content-type sniffing from leading file bytes.

Follows the WHATWG MIME sniffing table as applied by HTTP servers: at most the
first 512 bytes are inspected, signatures are tried in a fixed order and the
first match wins. Unknown binary data is ``application/octet-stream``.
"""

from dataclasses import dataclass

SNIFF_LEN = 512
DEFAULT_CONTENT_TYPE = "application/octet-stream"
TEXT_PLAIN = "text/plain; charset=utf-8"
TEXT_HTML = "text/html; charset=utf-8"

WHITESPACE = b"\t\n\x0c\r "


@dataclass(frozen=True)
class ExactSignature:
    """Data starts with ``pattern``."""

    pattern: bytes
    content_type: str

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        if data.startswith(self.pattern):
            return self.content_type
        return None


@dataclass(frozen=True)
class MaskedSignature:
    """Data masked byte-wise with ``mask`` equals ``pattern``."""

    mask: bytes
    pattern: bytes
    content_type: str
    skip_whitespace: bool = False

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        if self.skip_whitespace:
            data = data[first_non_ws:]
        if len(self.pattern) != len(self.mask) or len(data) < len(self.pattern):
            return None
        for byte, mask, expected in zip(data, self.mask, self.pattern):
            if byte & mask != expected:
                return None
        return self.content_type


@dataclass(frozen=True)
class HtmlSignature:
    """Case-insensitive HTML tag followed by a space or ``>``."""

    tag: bytes

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        data = data[first_non_ws:]
        if len(data) < len(self.tag) + 1:
            return None
        for expected, byte in zip(self.tag, data):
            if ord("A") <= expected <= ord("Z"):
                byte &= 0xDF
            if byte != expected:
                return None
        if data[len(self.tag)] not in b" >":
            return None
        return TEXT_HTML


class Mp4Signature:
    """ISO base media file with an ``ftyp`` box naming an mp4 brand."""

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        if len(data) < 12:
            return None
        box_size = int.from_bytes(data[:4], "big")
        if len(data) < box_size or box_size % 4 != 0:
            return None
        if data[4:8] != b"ftyp":
            return None
        for start in range(8, box_size, 4):
            if start == 12:
                # minor version number
                continue
            if data[start : start + 3] == b"mp4":
                return "video/mp4"
        return None


class TextSignature:
    """Anything without binary control bytes is plain text."""

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        for byte in data[first_non_ws:]:
            if is_binary_byte(byte):
                return None
        return TEXT_PLAIN


def is_binary_byte(byte: int) -> bool:
    """Check whether a byte marks data as binary rather than text."""
    return (
        byte <= 0x08
        or byte == 0x0B
        or 0x0E <= byte <= 0x1A
        or 0x1C <= byte <= 0x1F
    )


_HTML_TAGS = (
    b"<!DOCTYPE HTML",
    b"<HTML",
    b"<HEAD",
    b"<SCRIPT",
    b"<IFRAME",
    b"<H1",
    b"<DIV",
    b"<FONT",
    b"<TABLE",
    b"<A",
    b"<STYLE",
    b"<TITLE",
    b"<B",
    b"<BODY",
    b"<BR",
    b"<P",
    b"<!--",
)

SIGNATURES = (
    *(HtmlSignature(tag) for tag in _HTML_TAGS),
    MaskedSignature(
        mask=b"\xff\xff\xff\xff\xff",
        pattern=b"<?xml",
        content_type="text/xml; charset=utf-8",
        skip_whitespace=True,
    ),
    ExactSignature(b"%PDF-", "application/pdf"),
    ExactSignature(b"%!PS-Adobe-", "application/postscript"),
    # UTF BOMs
    MaskedSignature(
        mask=b"\xff\xff\x00\x00",
        pattern=b"\xfe\xff\x00\x00",
        content_type="text/plain; charset=utf-16be",
    ),
    MaskedSignature(
        mask=b"\xff\xff\x00\x00",
        pattern=b"\xff\xfe\x00\x00",
        content_type="text/plain; charset=utf-16le",
    ),
    MaskedSignature(
        mask=b"\xff\xff\xff\x00",
        pattern=b"\xef\xbb\xbf\x00",
        content_type=TEXT_PLAIN,
    ),
    # Images
    ExactSignature(b"\x00\x00\x01\x00", "image/x-icon"),
    ExactSignature(b"\x00\x00\x02\x00", "image/x-icon"),
    ExactSignature(b"BM", "image/bmp"),
    ExactSignature(b"GIF87a", "image/gif"),
    ExactSignature(b"GIF89a", "image/gif"),
    MaskedSignature(
        mask=b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff\xff\xff",
        pattern=b"RIFF\x00\x00\x00\x00WEBPVP",
        content_type="image/webp",
    ),
    ExactSignature(b"\x89PNG\r\n\x1a\n", "image/png"),
    ExactSignature(b"\xff\xd8\xff", "image/jpeg"),
    # Audio and video
    MaskedSignature(
        mask=b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        pattern=b"FORM\x00\x00\x00\x00AIFF",
        content_type="audio/aiff",
    ),
    MaskedSignature(
        mask=b"\xff\xff\xff",
        pattern=b"ID3",
        content_type="audio/mpeg",
    ),
    ExactSignature(b"OggS\x00", "application/ogg"),
    ExactSignature(b"MThd\x00\x00\x00\x06", "audio/midi"),
    MaskedSignature(
        mask=b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        pattern=b"RIFF\x00\x00\x00\x00AVI ",
        content_type="video/avi",
    ),
    MaskedSignature(
        mask=b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        pattern=b"RIFF\x00\x00\x00\x00WAVE",
        content_type="audio/wave",
    ),
    Mp4Signature(),
    ExactSignature(b"\x1a\x45\xdf\xa3", "video/webm"),
    # Fonts
    MaskedSignature(
        mask=b"\x00" * 34 + b"\xff\xff",
        pattern=b"\x00" * 34 + b"LP",
        content_type="application/vnd.ms-fontobject",
    ),
    ExactSignature(b"\x00\x01\x00\x00", "font/ttf"),
    ExactSignature(b"OTTO", "font/otf"),
    ExactSignature(b"ttcf", "font/collection"),
    ExactSignature(b"wOFF", "font/woff"),
    ExactSignature(b"wOF2", "font/woff2"),
    # Archives
    ExactSignature(b"\x1f\x8b\x08", "application/x-gzip"),
    ExactSignature(b"PK\x03\x04", "application/zip"),
    ExactSignature(b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    ExactSignature(b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    ExactSignature(b"\x00asm", "application/wasm"),
    TextSignature(),
)


def detect_content_type(data: bytes) -> str:
    """Sniff the MIME type of ``data``.

    Always returns a valid MIME type, falling back to
    ``application/octet-stream``.
    """
    data = data[:SNIFF_LEN]

    first_non_ws = 0
    while first_non_ws < len(data) and data[first_non_ws] in WHITESPACE:
        first_non_ws += 1

    for signature in SIGNATURES:
        content_type = signature.match(data, first_non_ws)
        if content_type:
            return content_type

    return DEFAULT_CONTENT_TYPE
