"""Base64 encoding and decoding with a lenient decoder.

The encoder emits either the standard alphabet with ``=`` padding or the
URL-safe alphabet with ``.`` padding. The decoder accepts both alphabets,
both padding characters, and input with no padding at all.
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_STANDARD_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "+/"
)
_URL_ALPHABET = _STANDARD_ALPHABET[:62] + "-_"

_CHAR_VALUES = {char: value for value, char in enumerate(_STANDARD_ALPHABET)}
_CHAR_VALUES.update({"-": 62, "_": 63})

_PADDING = frozenset("=.")

PEM_LINE_LENGTH = 64
MIME_LINE_LENGTH = 76


class Base64Error(ValueError):
    """Raised when input is not valid base64-encoded data."""


def _as_bytes(data: str | BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _as_text(encoded: str | BytesLike) -> str:
    if isinstance(encoded, str):
        return encoded
    return bytes(encoded).decode("latin-1")


def _char_value(char: str) -> int:
    try:
        return _CHAR_VALUES[char]
    except KeyError:
        raise Base64Error("Input is not valid base64-encoded data.") from None


def _insert_linebreaks(text: str, width: int) -> str:
    return "\n".join(text[start:start + width] for start in range(0, len(text), width))


def encode(data: str | BytesLike, url: bool = False) -> str:
    """Encode *data* as base64; text is encoded as UTF-8 first.

    With *url* set, the URL-safe alphabet (``-`` and ``_``) is used and
    the output is padded with ``.`` instead of ``=``.
    """
    raw = _as_bytes(data)
    alphabet = _URL_ALPHABET if url else _STANDARD_ALPHABET
    padding = "." if url else "="

    pieces: list[str] = []
    for start in range(0, len(raw), 3):
        chunk = raw[start:start + 3]
        bits = int.from_bytes(chunk.ljust(3, b"\0"), "big")
        kept = len(chunk) + 1
        pieces.extend(alphabet[(bits >> shift) & 0x3F] for shift in (18, 12, 6, 0)[:kept])
        pieces.append(padding * (4 - kept))
    return "".join(pieces)


def encode_pem(data: str | BytesLike) -> str:
    """Encode *data* as standard base64 broken into 64-character lines."""
    return _insert_linebreaks(encode(data), PEM_LINE_LENGTH)


def encode_mime(data: str | BytesLike) -> str:
    """Encode *data* as standard base64 broken into 76-character lines."""
    return _insert_linebreaks(encode(data), MIME_LINE_LENGTH)


def decode(encoded: str | BytesLike, remove_linebreaks: bool = False) -> bytes:
    """Decode base64 text into bytes.

    Both alphabets are accepted, padding with ``=`` or ``.`` is optional,
    and with *remove_linebreaks* every ``\\n`` is dropped before decoding.
    Raises :class:`Base64Error` on characters outside the alphabets or a
    final group of a single character.
    """
    text = _as_text(encoded)
    if remove_linebreaks:
        text = text.replace("\n", "")

    out = bytearray()
    for start in range(0, len(text), 4):
        group = text[start:start + 4]
        if len(group) < 2:
            raise Base64Error("Input is truncated: a group needs at least two characters.")

        second = _char_value(group[1])
        first = _char_value(group[0])
        out.append((first << 2) | (second >> 4))

        if len(group) < 3 or group[2] in _PADDING:
            continue
        third = _char_value(group[2])
        out.append(((second & 0x0F) << 4) | (third >> 2))

        if len(group) < 4 or group[3] in _PADDING:
            continue
        out.append(((third & 0x03) << 6) | _char_value(group[3]))

    return bytes(out)