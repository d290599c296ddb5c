"""Pack entry — one (name, image bytes) pair of a pack file."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PackEntry:
    """A single image inside a pack.

    ``name`` is ``None`` for images recovered from a file without stored
    names; the writer numbers those instead.
    """

    name: str | None
    data: bytes
