"""
PngPacker CLI — carve PNG images out of files and pack PNG folders.

Commands:
  pngpacker <path>         - Directory: pack it. File: unpack it.
  pngpacker pack <dir>     - Pack the .png files of a directory into <dir>_packed
  pngpacker unpack <file>  - Extract every PNG of a file into <file>_output/
  pngpacker scan <file>    - Show PNG offsets (and stored names) without writing
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pngpacker.errors import PathNotFound, PngPackerError

log = logging.getLogger(__name__)

_COMMANDS = ("open", "pack", "unpack", "scan")


def _setup_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def _include_header(args: argparse.Namespace, config: dict) -> bool:
    if getattr(args, "no_header", False):
        return False
    return bool(config["include_header"])


def cmd_pack(args: argparse.Namespace, config: dict) -> None:
    """Pack the PNG files of a directory into one pack file."""
    from pngpacker.packer import pack_directory

    dest, count = pack_directory(
        args.path,
        include_header=_include_header(args, config),
        suffix=config["packed_suffix"],
        extension=config["extension"],
    )
    print(f"{count} png files packed into {dest}")


def cmd_unpack(args: argparse.Namespace, config: dict) -> None:
    """Extract every PNG image of a file."""
    from pngpacker.packer import unpack_file

    dest, written = unpack_file(args.path, suffix=config["output_suffix"])
    print(f"{len(written)} PNG images found")
    print(f"{len(written)} png files written to: {dest}")


def cmd_scan(args: argparse.Namespace, config: dict) -> None:
    """Report the PNG offsets of a file, with stored names for pack files."""
    from pngpacker._format.reader import extract_filenames, read_bytes
    from pngpacker._format.spec import detect_format
    from pngpacker.scanner import find_signature_offsets

    data = read_bytes(args.path)
    offsets = find_signature_offsets(data)
    is_pack = detect_format(data)
    names = extract_filenames(data, offsets) if is_pack else [""] * len(offsets)

    kind = "pack file" if is_pack else "plain file"
    print(f"{args.path}: {kind}, {len(data)} bytes, {len(offsets)} PNG images found")
    for offset, name in zip(offsets, names):
        line = f"  0x{offset:08X}"
        if name:
            line += f"  {name}"
        print(line)


def cmd_open(args: argparse.Namespace, config: dict) -> None:
    """Drag-and-drop mode: pack a directory, unpack a file."""
    path = Path(args.path)
    if not path.exists():
        raise PathNotFound(f"{args.path} not found")
    if path.is_dir():
        cmd_pack(args, config)
    else:
        cmd_unpack(args, config)


def _build_parser() -> argparse.ArgumentParser:
    from pngpacker import __version__

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="More log output (-v info, -vv debug)",
    )
    common.add_argument(
        "--config", type=Path,
        help="TOML config file (default: ~/.pngpacker/config.toml)",
    )

    parser = argparse.ArgumentParser(
        prog="pngpacker",
        description="Extract embedded PNG images from files and pack PNG folders.",
    )
    parser.add_argument("--version", action="version", version=f"pngpacker {__version__}")
    sub = parser.add_subparsers(dest="command")

    # open (implicit when the first argument is a path)
    p_open = sub.add_parser("open", parents=[common], help="Pack a directory or unpack a file")
    p_open.add_argument("path", help="Directory of .png files, or a file containing PNGs")
    p_open.add_argument("--no-header", action="store_true", help="Pack without signature and names")

    # pack
    p_pack = sub.add_parser("pack", parents=[common], help="Pack a directory of .png files")
    p_pack.add_argument("path", help="Directory of .png files")
    p_pack.add_argument("--no-header", action="store_true", help="Pack without signature and names")

    # unpack
    p_unpack = sub.add_parser("unpack", parents=[common], help="Extract PNG images from a file")
    p_unpack.add_argument("path", help="File containing PNG images")

    # scan
    p_scan = sub.add_parser("scan", parents=[common], help="List PNG offsets without writing")
    p_scan.add_argument("path", help="File containing PNG images")

    return parser


def main(argv: list[str] | None = None) -> None:
    from pngpacker.config import load_config

    argv = list(sys.argv[1:] if argv is None else argv)
    if argv and argv[0] not in _COMMANDS and argv[0] not in ("-h", "--help", "--version"):
        argv.insert(0, "open")

    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print("PngPacker — extract and pack PNG images")
        print()
        print("Usage:")
        print("  pngpacker <dir-or-file>")
        print("  pngpacker pack <dir> [--no-header]")
        print("  pngpacker unpack <file>")
        print("  pngpacker scan <file>")
        print()
        print("A path literally named open, pack, unpack or scan is read as a command;")
        print("write it as ./pack (or any other path form) to pack or unpack it.")
        print()
        print("Run 'pngpacker <command> --help' for details on any command.")
        sys.exit(0)

    _setup_logging(args.verbose)
    config = load_config(args.config)

    commands = {
        "open": cmd_open,
        "pack": cmd_pack,
        "unpack": cmd_unpack,
        "scan": cmd_scan,
    }

    print(f"Processing: {args.path} ...")
    try:
        commands[args.command](args, config)
    except PngPackerError as e:
        log.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
