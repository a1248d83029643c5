"""
Pronunciation clip decoding.

Corpus records carry audio as basE91 text (`speech`) with an optional MIME
type (`speechMime`). Decoding is lazy and cached per corpus index; any
failure is logged and yields no clip, so audio never affects scheduling or
grading.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from core.schemas import CorpusItem


BASE91_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "!#$%&()*+,./:;<=>?@[]^_`{|}~\""
)
_DECODE_TABLE = {char: value for value, char in enumerate(BASE91_ALPHABET)}

DEFAULT_MIME = "audio/mpeg"


@dataclass(frozen=True)
class Clip:
    """Decoded pronunciation clip ready for playback."""
    data: bytes
    mime: str


def decode_base91(text: str) -> bytes:
    """
    Decode basE91 text. Characters outside the alphabet (whitespace,
    line breaks) are skipped.
    """
    out = bytearray()
    value = -1
    buffer = 0
    bits = 0
    for char in text:
        digit = _DECODE_TABLE.get(char)
        if digit is None:
            continue
        if value < 0:
            value = digit
            continue
        value += digit * 91
        buffer |= value << bits
        bits += 13 if (value & 8191) > 88 else 14
        while True:
            out.append(buffer & 0xFF)
            buffer >>= 8
            bits -= 8
            if bits <= 7:
                break
        value = -1
    if value >= 0:
        out.append((buffer | (value << bits)) & 0xFF)
    return bytes(out)


def sniff_mime(data: bytes) -> str:
    """
    Guess an audio MIME type from magic bytes (defaults to audio/mpeg).
    """
    if data[:3] == b"ID3":
        return "audio/mpeg"
    if len(data) >= 2 and data[0] == 0xFF and (data[1] & 0xE0) == 0xE0:
        return "audio/mpeg"
    if data[:4] == b"OggS":
        return "audio/ogg"
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WAVE":
        return "audio/wav"
    if data[:4] == b"fLaC":
        return "audio/flac"
    if len(data) >= 8 and data[4:8] == b"ftyp":
        return "audio/mp4"
    return DEFAULT_MIME


class ClipCache:
    """
    Per-session cache of decoded clips keyed by corpus index.
    """

    def __init__(self):
        self._clips: dict[int, Optional[Clip]] = {}

    def get(self, index: int, item: CorpusItem) -> Optional[Clip]:
        if index not in self._clips:
            self._clips[index] = load_clip(item)
        return self._clips[index]

    def clear(self) -> None:
        self._clips.clear()


def load_clip(item: CorpusItem) -> Optional[Clip]:
    """
    Decode an item's pronunciation clip.

    Returns:
        Clip, or None when the item has no audio or decoding failed
    """
    if not item.has_pronunciation:
        return None
    try:
        data = decode_base91(item.speech)
    except Exception:
        logger.exception("Failed to decode pronunciation for {!r}", item.word)
        return None
    if not data:
        logger.warning("Empty pronunciation clip for {!r}", item.word)
        return None
    return Clip(data=data, mime=item.speech_mime or sniff_mime(data))
