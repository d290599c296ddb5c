"""
Pack Format Specification.

Layout:
    #/#/#                 <- Pack signature, offset 0 (only when names are stored)
    #<name>#              <- Name framed by NAME_DELIMITER, directly before...
    \\x89PNG\\r\\n\\x1a\\n      <- ...the PNG signature of that image
    <png bytes>           <- Rest of the image, up to the next name frame

Framing:
    - Names are stored as raw bytes (os.fsencode), no escaping and no length
    - A name must therefore never contain NAME_DELIMITER
    - The reader recovers a name by walking backwards from the byte before
      the PNG signature until it meets the opening delimiter

Identification:
    - A buffer is a pack file iff it starts with PACK_SIGNATURE
    - This is a plain prefix check; any file that happens to start with
      "#/#/#" is treated as a pack file
"""

from __future__ import annotations

import os

from pngpacker import PACK_SIGNATURE, NAME_DELIMITER, PNG_SIGNATURE
from pngpacker.errors import InvalidFilename

# Single-byte form of the delimiter, for concatenation
NAME_DELIMITER_BYTE = bytes([NAME_DELIMITER])

# Names that would escape or alias the output directory
_RESERVED_NAMES = frozenset({"", ".", ".."})

__all__ = [
    "PACK_SIGNATURE", "NAME_DELIMITER", "NAME_DELIMITER_BYTE", "PNG_SIGNATURE",
    "detect_format", "encode_name", "decode_name", "is_safe_name",
]


def detect_format(data: bytes) -> bool:
    """True iff ``data`` starts with the pack signature."""
    return data[:len(PACK_SIGNATURE)] == PACK_SIGNATURE


def encode_name(name: str) -> bytes:
    """Encode a filename for framing. Rejects names the reader could not recover."""
    raw = os.fsencode(name)
    if not raw:
        raise InvalidFilename("Empty file name cannot be packed")
    if NAME_DELIMITER in raw:
        raise InvalidFilename(
            f"File name {name!r} contains the name delimiter "
            f"(0x{NAME_DELIMITER:02X}) and cannot be packed"
        )
    return raw


def decode_name(raw: bytes) -> str:
    return os.fsdecode(raw)


def is_safe_name(name: str) -> bool:
    """Check a stored name is a bare filename. Prevents path traversal via pack contents."""
    if name in _RESERVED_NAMES:
        return False
    if "/" in name or "\\" in name or "\x00" in name:
        return False
    return True
