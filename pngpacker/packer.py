"""
Packer — filesystem side of packing and unpacking.

Layout next to the input:
    <dir>/                 -> <parent>/<dir>_packed        (pack_directory)
    <file>                 -> <file>_output/<name>.png     (unpack_file)

Packing reads every ``.png`` file of a directory in name order; unpacking
writes each recovered image under its stored name, or as ``image_<n>.png``
when the input carries no names.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from pngpacker import IMAGE_PREFIX, OUTPUT_SUFFIX, PACKED_SUFFIX, PNG_EXTENSION
from pngpacker._format.document import PackEntry
from pngpacker._format.reader import PackReader, read_bytes
from pngpacker._format.spec import is_safe_name
from pngpacker._format.writer import PackWriter
from pngpacker.errors import (
    CorruptPackFormat,
    NoPngFilesInDirectory,
    NotADirectory,
    PackIOError,
    PathNotFound,
)

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Packing
# ---------------------------------------------------------------------------

def _extension(name: str) -> str:
    """Text from the last dot on; a leading dot counts, so '.png' has extension '.png'."""
    idx = name.rfind(".")
    return name[idx:] if idx != -1 else ""


def collect_png_files(path: str | Path, extension: str = PNG_EXTENSION) -> list[Path]:
    """List files of ``path`` whose extension is exactly ``extension``, sorted by name."""
    path = Path(path)
    if not path.exists():
        raise PathNotFound(f"{path} not found")
    if not path.is_dir():
        raise NotADirectory(f"{path} is not a directory")
    try:
        children = sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise PackIOError(f"Failed to list {path}: {e}") from e
    return [p for p in children if _extension(p.name) == extension and not p.is_dir()]


def load_entries(paths: Iterable[Path]) -> list[PackEntry]:
    """Read each file into a named entry. Empty files are kept; the encoder drops them."""
    return [PackEntry(p.name, read_bytes(p)) for p in paths]


def packed_path_for(path: str | Path, suffix: str = PACKED_SUFFIX) -> Path:
    """Pack file location: beside the input directory, ``<name><suffix>``."""
    # absolute but not resolved: a symlinked directory packs beside the link
    path = Path(os.path.abspath(path))
    return path.parent / f"{path.name}{suffix}"


def pack_directory(
    path: str | Path,
    include_header: bool = True,
    suffix: str = PACKED_SUFFIX,
    extension: str = PNG_EXTENSION,
) -> tuple[Path, int]:
    """Pack the PNG files of a directory into one pack file.

    Returns (pack file path, number of images packed). Nothing is written
    unless at least one non-empty PNG file is found.
    """
    files = collect_png_files(path, extension)
    if not files:
        raise NoPngFilesInDirectory("No png files found in directory")
    log.info("Packing %d file(s) from %s", len(files), path)

    dest = packed_path_for(path, suffix)
    if not dest.parent.is_dir():
        raise NotADirectory(f"{dest.parent} is not a valid output path")

    entries = load_entries(files)
    try:
        count = PackWriter.write(entries, dest, include_header=include_header)
    except OSError as e:
        raise PackIOError(f"Failed to write {dest}: {e}") from e
    return dest, count


# ---------------------------------------------------------------------------
# Unpacking
# ---------------------------------------------------------------------------

def output_dir_for(path: str | Path, suffix: str = OUTPUT_SUFFIX) -> Path:
    """Extraction directory: beside the input file, ``<name><suffix>``."""
    path = Path(path)
    return path.parent / f"{path.name}{suffix}"


def numbered_name(index: int, total: int) -> str:
    """``image_<index>.png``, zero-padded to the digit count of ``total``."""
    width = len(str(total))
    return f"{IMAGE_PREFIX}{index:0{width}d}{PNG_EXTENSION}"


def write_entries(entries: list[PackEntry], dest: str | Path) -> list[Path]:
    """Write entries into ``dest`` (created if missing). Stops at the first failure.

    Named entries keep their stored name, unnamed ones are numbered.
    Returns the written paths in entry order.
    """
    dest = Path(dest)
    total = len(entries)

    # Resolve every target name before touching the filesystem
    targets: list[Path] = []
    for i, entry in enumerate(entries):
        if entry.name is None:
            name = numbered_name(i, total)
        else:
            name = entry.name
            if not is_safe_name(name):
                raise CorruptPackFormat(
                    f"Stored file name {name!r} is not a plain file name"
                )
        targets.append(dest / name)

    try:
        dest.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PackIOError(f"Failed to create {dest}: {e}") from e

    for target, entry in zip(targets, entries):
        try:
            target.write_bytes(entry.data)
        except OSError as e:
            raise PackIOError(f"Failed to write {target}: {e}") from e
        log.debug("Wrote %s (%d bytes)", target, len(entry.data))

    return targets


def unpack_file(path: str | Path, suffix: str = OUTPUT_SUFFIX) -> tuple[Path, list[Path]]:
    """Extract every PNG of a file into ``<file><suffix>/``.

    Returns (output directory, written paths). The output directory is not
    created when the file holds no PNG data or its pack framing is broken.
    """
    entries = PackReader.read(path)
    dest = output_dir_for(path, suffix)
    written = write_entries(entries, dest)
    return dest, written
