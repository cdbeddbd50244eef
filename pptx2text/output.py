"""
Output location and writing of the extracted text.

The core never looks up where results go; callers pass an explicit path.
``desktop_directory`` only supplies the command line's default.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path

from pptx2text.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = "_output.txt"
OUTPUT_FILE_MODE = 0o644

_DESKTOP_PLATFORMS = ("win32", "cygwin", "darwin", "linux")


def desktop_directory() -> Path:
    """
    Return the current user's desktop folder.

    :raises OutputWriteError: the platform has no known desktop location
    """
    if not sys.platform.startswith(_DESKTOP_PLATFORMS):
        raise OutputWriteError(
            "Desktop", f"Unsupported platform for desktop output: {sys.platform}"
        )
    return Path.home() / "Desktop"


def derive_output_path(input_path: str | Path, output_dir: str | Path) -> Path:
    """
    Build the output file path for ``input_path`` inside ``output_dir``.

    ``deck.pptx`` becomes ``<output_dir>/deck_output.txt``.
    """
    name = Path(input_path).name
    if name.lower().endswith(".pptx"):
        name = name[: -len(".pptx")]
    return Path(output_dir) / f"{name}{OUTPUT_SUFFIX}"


def write_text(path: str | Path, text: str) -> Path:
    """
    Write ``text`` to ``path`` as UTF-8, replacing any existing file.

    The text goes to a temporary file in the same directory that then
    replaces ``path``, so a failed write leaves any existing file untouched.
    The file ends up with mode 0644 regardless of the process umask.

    :raises OutputWriteError: the destination cannot be written
    """
    path = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(text)
        os.chmod(tmp_name, OUTPUT_FILE_MODE)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise OutputWriteError(str(path), cause=exc) from exc

    logger.debug(f"Wrote {len(text)} characters to [{path}]")
    return path
