"""\
Guess a Content-Type from the leading bytes of a response body, following
the WHATWG MIME sniffing table (https://mimesniff.spec.whatwg.org/) the
way common HTTP servers apply it to unlabelled responses.
"""

SNIFF_LEN = 512

_WHITESPACE = b'\t\n\x0c\r '

_HTML = 'text/html; charset=utf-8'
_TEXT = 'text/plain; charset=utf-8'
_BINARY = 'application/octet-stream'

_HTML_TAGS = [
    b'<!DOCTYPE HTML', b'<HTML', b'<HEAD', b'<SCRIPT', b'<IFRAME', b'<H1',
    b'<DIV', b'<FONT', b'<TABLE', b'<A', b'<STYLE', b'<TITLE', b'<B',
    b'<BODY', b'<BR', b'<P', b'<!--',
]

# (prefix, content type), matched against the unskipped data in order
_PREFIXES = [
    (b'%PDF-', 'application/pdf'),
    (b'%!PS-Adobe-', 'application/postscript'),
    (b'\xfe\xff', 'text/plain; charset=utf-16be'),
    (b'\xff\xfe', 'text/plain; charset=utf-16le'),
    (b'\xef\xbb\xbf', _TEXT),
    (b'\x00\x00\x01\x00', 'image/x-icon'),
    (b'\x00\x00\x02\x00', 'image/x-icon'),
    (b'BM', 'image/bmp'),
    (b'GIF87a', 'image/gif'),
    (b'GIF89a', 'image/gif'),
    (b'\x89PNG\r\n\x1a\n', 'image/png'),
    (b'\xff\xd8\xff', 'image/jpeg'),
    (b'ID3', 'audio/mpeg'),
    (b'OggS\x00', 'application/ogg'),
    (b'MThd\x00\x00\x00\x06', 'audio/midi'),
    (b'\x1a\x45\xdf\xa3', 'video/webm'),
    (b'\x00\x01\x00\x00', 'font/ttf'),
    (b'OTTO', 'font/otf'),
    (b'ttcf', 'font/collection'),
    (b'wOFF', 'font/woff'),
    (b'wOF2', 'font/woff2'),
    (b'\x1f\x8b\x08', 'application/x-gzip'),
    (b'PK\x03\x04', 'application/zip'),
    (b'Rar!\x1a\x07\x00', 'application/x-rar-compressed'),
    (b'Rar!\x1a\x07\x01\x00', 'application/x-rar-compressed'),
    (b'\x00asm', 'application/wasm'),
]

# RIFF/FORM containers: (outer, form type at offset 8, content type)
_CONTAINERS = [
    (b'RIFF', b'WEBPVP', 'image/webp'),
    (b'FORM', b'AIFF', 'audio/aiff'),
    (b'RIFF', b'AVI ', 'video/avi'),
    (b'RIFF', b'WAVE', 'audio/wave'),
]

_BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0b] + list(range(0x0e, 0x1b)) + list(range(0x1c, 0x20)))


def _skip_whitespace(data):
    i = 0
    while i < len(data) and data[i] in _WHITESPACE:
        i += 1
    return data[i:]


def _html(data):
    for tag in _HTML_TAGS:
        if len(data) < len(tag) + 1:
            continue
        if data[:len(tag)].upper() == tag and data[len(tag)] in b' >':
            return _HTML
    return None


def _mp4(data):
    if len(data) < 12:
        return None
    box_size = int.from_bytes(data[:4], 'big')
    if len(data) < box_size or box_size % 4 != 0 or data[4:8] != b'ftyp':
        return None
    for st in range(8, box_size, 4):
        if st == 12:
            continue  # minor version number
        if data[st:st + 3] == b'mp4':
            return 'video/mp4'
    return None


def detect_content_type(data):
    """Always returns a valid MIME type; application/octet-stream when
    nothing more specific matches."""
    data = bytes(data[:SNIFF_LEN])
    stripped = _skip_whitespace(data)

    found = _html(stripped)
    if found:
        return found
    if stripped.startswith(b'<?xml'):
        return 'text/xml; charset=utf-8'
    for prefix, content_type in _PREFIXES:
        if data.startswith(prefix):
            return content_type
    for outer, form, content_type in _CONTAINERS:
        if data[:4] == outer and data[8:8 + len(form)] == form:
            return content_type
    found = _mp4(data)
    if found:
        return found
    if not any(b in _BINARY_BYTES for b in stripped):
        return _TEXT
    return _BINARY
