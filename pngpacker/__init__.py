"""
PngPacker — carve PNG images out of arbitrary files and pack PNG folders.

Architecture:
    Scanner:     PNG signature offsets -> per-image byte slices
    Pack format: #/#/# + (#name# + png bytes)*   (header optional)
    Bridge:      pngpacker pack / pngpacker unpack CLI commands
"""

__version__ = "0.1.0"

# PNG file signature (RFC 2083, section 3.1)
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# Pack file identification and filename framing
PACK_SIGNATURE = b"\x23\x2f\x23\x2f\x23"  # "#/#/#"
NAME_DELIMITER = 0x23  # "#"

# Default naming of generated paths
PACKED_SUFFIX = "_packed"
OUTPUT_SUFFIX = "_output"
IMAGE_PREFIX = "image_"
PNG_EXTENSION = ".png"
