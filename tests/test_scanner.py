"""
Tests for the PNG signature scanner — find_signature_offsets + slice_images.
"""

from __future__ import annotations

import pytest

from pngpacker import PNG_SIGNATURE
from pngpacker.errors import NoImagesFound, PngPackerError
from pngpacker.scanner import find_signature_offsets, slice_images


# ---------------------------------------------------------------------------
# TestFindSignatureOffsets
# ---------------------------------------------------------------------------

class TestFindSignatureOffsets:
    """Tests for find_signature_offsets."""

    def test_empty_input(self):
        assert find_signature_offsets(b"") == []

    def test_no_signature(self):
        assert find_signature_offsets(b"\x00" * 64 + b"PNG" + b"\x89PN") == []

    def test_signature_at_start(self):
        assert find_signature_offsets(PNG_SIGNATURE + b"rest") == [0]

    def test_signature_mid_stream(self):
        data = b"junk-" + PNG_SIGNATURE + b"tail"
        assert find_signature_offsets(data) == [5]

    def test_concatenated_signatures(self):
        """k back-to-back signatures give k strictly increasing offsets."""
        k = 7
        offsets = find_signature_offsets(PNG_SIGNATURE * k)
        assert len(offsets) == k
        assert offsets == [i * len(PNG_SIGNATURE) for i in range(k)]
        assert all(a < b for a, b in zip(offsets, offsets[1:]))

    def test_truncated_signature_ignored(self):
        data = PNG_SIGNATURE[:-1] + b"\x00" + PNG_SIGNATURE
        assert find_signature_offsets(data) == [8]

    def test_logs_count(self, caplog):
        with caplog.at_level("INFO", logger="pngpacker.scanner"):
            find_signature_offsets(PNG_SIGNATURE * 3)
        assert "3 PNG images found" in caplog.text


# ---------------------------------------------------------------------------
# TestSliceImages
# ---------------------------------------------------------------------------

class TestSliceImages:
    """Tests for slice_images."""

    def test_no_offsets(self):
        with pytest.raises(NoImagesFound, match="does not contain any png data"):
            slice_images(b"whatever", [])

    def test_no_images_is_packer_error(self):
        with pytest.raises(PngPackerError):
            slice_images(b"", [])

    def test_single_offset_runs_to_end(self):
        data = b"prefix" + PNG_SIGNATURE + b"\x01\x02\x03"
        assert slice_images(data, [6]) == [PNG_SIGNATURE + b"\x01\x02\x03"]

    def test_leading_bytes_dropped(self):
        data = b"garbage" + PNG_SIGNATURE + b"A"
        buffers = slice_images(data, find_signature_offsets(data))
        assert buffers == [PNG_SIGNATURE + b"A"]

    def test_non_final_images_lose_last_byte(self):
        first = PNG_SIGNATURE + b"\x01\x02"
        second = PNG_SIGNATURE + b"\x03\x04"
        third = PNG_SIGNATURE + b"\x05\x06"
        data = first + second + third
        buffers = slice_images(data, find_signature_offsets(data))
        assert buffers == [first[:-1], second[:-1], third]

    def test_final_image_runs_to_end(self):
        data = PNG_SIGNATURE + b"a" + PNG_SIGNATURE + b"trailing bytes"
        buffers = slice_images(data, [0, 9])
        assert buffers[-1] == PNG_SIGNATURE + b"trailing bytes"

    def test_slice_count_matches_offsets(self):
        data = (PNG_SIGNATURE + b"xyz") * 5
        offsets = find_signature_offsets(data)
        assert len(slice_images(data, offsets)) == len(offsets) == 5
