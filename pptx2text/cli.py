from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import pptx2text
from pptx2text.exceptions import Pptx2TextError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pptx2text",
        description="Extract slide text from a .pptx file and write it to a text file.",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Path to the .pptx file to extract.",
    )
    location = parser.add_mutually_exclusive_group()
    location.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the text to this file.",
    )
    location.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for <name>_output.txt (default: the desktop).",
    )
    location.add_argument(
        "--cwd",
        action="store_true",
        help="Write <name>_output.txt to the current working directory.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr.",
    )
    return parser


def _resolve_output_path(args: argparse.Namespace) -> Path:
    if args.output is not None:
        return args.output
    if args.output_dir is not None:
        output_dir = args.output_dir
    elif args.cwd:
        output_dir = Path.cwd()
    else:
        output_dir = pptx2text.desktop_directory()
    return pptx2text.derive_output_path(args.path, output_dir)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        output_path = _resolve_output_path(args)
        written = pptx2text.convert(args.path, output_path)
        print(f"Text extracted and written to {written}")
        return 0
    except Pptx2TextError as exc:
        print(f"pptx2text: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
