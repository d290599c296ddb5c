"""
Reader — splits a pack file (or any file with embedded PNGs) into entries.

Format detection:
  - A leading pack signature means names are stored before every image
  - Anything else is treated as a plain carrier file; images come back
    unnamed and are numbered by the output writer

Name recovery walks backwards from each PNG signature, so a damaged frame
is reported with the offset of the image it belongs to.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pngpacker._format.document import PackEntry
from pngpacker._format.spec import NAME_DELIMITER, decode_name, detect_format
from pngpacker.errors import CorruptPackFormat, NotAFile, PackIOError, PathNotFound
from pngpacker.scanner import find_signature_offsets, slice_images

log = logging.getLogger(__name__)


def _read_name_before(data: bytes, offset: int) -> bytes:
    """Recover the name framed directly in front of the image at ``offset``."""
    if offset < 1 or data[offset - 1] != NAME_DELIMITER:
        got = data[offset - 1] if offset >= 1 else None
        got_text = f"0x{got:02X}" if got is not None else "start of file"
        raise CorruptPackFormat(
            f"Corrupt pack file [0x{offset:02X}]: expected name delimiter "
            f"(0x{NAME_DELIMITER:02X}) before png signature, got: {got_text}"
        )

    # name ends just before the closing delimiter
    pos = offset - 2
    name = bytearray()
    while True:
        if pos < 0:
            raise CorruptPackFormat(
                f"Corrupt pack file [0x{offset:02X}]: name has no opening "
                f"delimiter (0x{NAME_DELIMITER:02X})"
            )
        byte = data[pos]
        if byte == NAME_DELIMITER:
            break
        name.append(byte)
        pos -= 1

    name.reverse()
    return bytes(name)


def extract_filenames(data: bytes, offsets: list[int]) -> list[str]:
    """Names stored in front of each image, in the order of ``offsets``."""
    return [decode_name(_read_name_before(data, offset)) for offset in offsets]


class PackReader:
    """
    Pack file reader.

    Usage:
        entries = PackReader.read("sprites_packed")
        entries = PackReader.parse(data)
    """

    @classmethod
    def read(cls, path: str | Path) -> list[PackEntry]:
        """Read and fully parse a file into entries."""
        return cls.parse(read_bytes(path))

    @classmethod
    def parse(cls, data: bytes) -> list[PackEntry]:
        """Parse bytes into entries, named if the pack signature is present."""
        offsets = find_signature_offsets(data)
        if not detect_format(data):
            return [PackEntry(None, buf) for buf in slice_images(data, offsets)]

        log.debug("Pack signature found, reading stored names")
        raw_names = [_read_name_before(data, offset) for offset in offsets]

        # In a pack file an entry starts at its "#name#" frame, not at the
        # PNG signature. Cut at the frames, then drop each entry's own frame.
        frames = [offset - len(raw) - 2 for offset, raw in zip(offsets, raw_names)]
        buffers = slice_images(data, frames)
        return [
            PackEntry(decode_name(raw), buf[len(raw) + 2:])
            for raw, buf in zip(raw_names, buffers)
        ]


def read_bytes(path: str | Path) -> bytes:
    """Read a whole file, mapping filesystem failures onto PngPacker errors."""
    path = Path(path)
    if not path.exists():
        raise PathNotFound(f"{path} not found")
    if not path.is_file():
        raise NotAFile(f"{path} is not a file")
    try:
        return path.read_bytes()
    except OSError as e:
        raise PackIOError(f"Failed to read {path}: {e}") from e


def decode(data: bytes) -> list[PackEntry]:
    """Decode a buffer into entries. See ``PackReader.parse``."""
    return PackReader.parse(data)
