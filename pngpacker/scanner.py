"""
Scanner — locate PNG signatures in an opaque byte buffer and cut the buffer
into one slice per image.

No PNG validation is performed: a signature occurrence is an image boundary,
whatever follows it.
"""

from __future__ import annotations

import logging

from pngpacker import PNG_SIGNATURE
from pngpacker.errors import NoImagesFound

log = logging.getLogger(__name__)


def find_signature_offsets(data: bytes) -> list[int]:
    """Return the offsets of every non-overlapping PNG signature, ascending."""
    offsets: list[int] = []
    start = 0
    while True:
        idx = data.find(PNG_SIGNATURE, start)
        if idx == -1:
            break
        offsets.append(idx)
        start = idx + len(PNG_SIGNATURE)

    log.info("%d PNG images found", len(offsets))
    return offsets


def slice_images(data: bytes, offsets: list[int]) -> list[bytes]:
    """Cut ``data`` into per-image buffers at ``offsets``.

    Every image but the last stops one byte short of the next boundary, so
    in a plain concatenation each non-final image loses its last byte.
    Files extracted by earlier releases have exactly this layout, so it is
    kept as is. The last image always runs to the end of ``data``.
    """
    if not offsets:
        raise NoImagesFound("This file does not contain any png data")

    if len(offsets) == 1:
        return [data[offsets[0]:]]

    buffers = [
        data[begin:end - 1]
        for begin, end in zip(offsets, offsets[1:])
    ]
    buffers.append(data[offsets[-1]:])
    return buffers
