"""
Pack container format engine.

Layout of a pack file written with names:
    #/#/#              <- pack signature (5 bytes, offset 0 only)
    #myImage1.png#     <- name of the first image, framed by 0x23
    \\x89PNG\\r\\n\\x1a\\n   <- PNG signature of the first image
    ...                <- rest of the first image
    #myImage2.png#     <- name of the second image
    ...

Written without names, a pack file is the PNG files back to back.
"""

from pngpacker._format.spec import PACK_SIGNATURE, NAME_DELIMITER, detect_format
from pngpacker._format.document import PackEntry
from pngpacker._format.writer import PackWriter, encode
from pngpacker._format.reader import PackReader, decode, extract_filenames
