"""
Writer — serializes pack entries to the pack container format.

Zero-length entries are dropped before serializing. With names enabled the
output is the pack signature followed by ``#name#`` + image bytes for each
entry; without names it is the images back to back.
"""

from __future__ import annotations

import io
import logging
import os
import tempfile
from typing import Iterable

from pngpacker._format.document import PackEntry
from pngpacker._format.spec import PACK_SIGNATURE, NAME_DELIMITER_BYTE, encode_name
from pngpacker.errors import EmptyInput, InvalidFilename

log = logging.getLogger(__name__)


class PackWriter:

    @staticmethod
    def serialize(
        entries: Iterable[PackEntry], include_header: bool = True,
    ) -> tuple[bytes, int]:
        """Serialize entries to bytes. Returns (pack bytes, entries written)."""
        kept = []
        for entry in entries:
            if not entry.data:
                log.debug("Skipping empty entry %s", entry.name)
                continue
            kept.append(entry)

        if not kept:
            raise EmptyInput("All png files are empty, nothing to pack")

        out = io.BytesIO()
        if include_header:
            # Validate every name before emitting anything
            names = []
            for entry in kept:
                if entry.name is None:
                    raise InvalidFilename("Entry names are required when include_header is set")
                names.append(encode_name(entry.name))

            out.write(PACK_SIGNATURE)
            for raw_name, entry in zip(names, kept):
                out.write(NAME_DELIMITER_BYTE)
                out.write(raw_name)
                out.write(NAME_DELIMITER_BYTE)
                out.write(entry.data)
        else:
            for entry in kept:
                out.write(entry.data)

        return out.getvalue(), len(kept)

    @staticmethod
    def write(
        entries: Iterable[PackEntry], path: str | os.PathLike,
        include_header: bool = True, mode: int = 0o644,
    ) -> int:
        """Write a pack file atomically. Returns the number of entries written."""
        data, count = PackWriter.serialize(entries, include_header)
        path = os.fspath(path)
        dir_name = os.path.dirname(os.path.abspath(path)) or "."
        fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix=".packed.tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, path)
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
        log.info("Wrote %d bytes to %s", len(data), path)
        return count


def encode(
    entries: Iterable[PackEntry], include_header: bool = True,
) -> tuple[bytes, int]:
    """Encode entries into a pack buffer. See ``PackWriter.serialize``."""
    return PackWriter.serialize(entries, include_header)
