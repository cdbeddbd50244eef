"""
Archive access for .pptx packages.

A .pptx file is a ZIP archive; each slide lives in its own XML part:

    ppt/slides/slide1.xml, slide2.xml, ...

This module opens the archive and reads single members by exact name. A
missing member and an unreadable member are reported with different
exception types so callers can treat the first as an ordinary end-of-data
signal and the second as a fatal error.
"""

import io
import logging
import lzma
import zipfile
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from pptx2text.exceptions import (
    ArchiveOpenError,
    ArchiveReadError,
    MemberNotFoundError,
)

logger = logging.getLogger(__name__)

SLIDE_MEMBER_TEMPLATE = "ppt/slides/slide{index}.xml"

# Errors zipfile surfaces for damaged, truncated or unsupported members
_MEMBER_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    lzma.LZMAError,
    EOFError,
    NotImplementedError,
    RuntimeError,
    OSError,
)


def slide_member_name(index: int) -> str:
    """Return the archive member name for the 1-based slide index."""
    if index < 1:
        raise ValueError(f"Slide index must be >= 1, got {index}")
    return SLIDE_MEMBER_TEMPLATE.format(index=index)


@contextmanager
def open_archive(source: str | Path | io.IOBase) -> Iterator[zipfile.ZipFile]:
    """
    Open a presentation package for reading.

    The archive is closed when the context exits, whether the body finished
    normally or raised.

    :raises ArchiveOpenError: source is missing, unreadable or not a ZIP file
    """
    label = source if isinstance(source, (str, Path)) else "<stream>"
    try:
        archive = zipfile.ZipFile(source, "r")
    except (zipfile.BadZipFile, OSError, ValueError) as exc:
        raise ArchiveOpenError(str(label), cause=exc) from exc

    logger.debug(f"Opened archive [{label}] with {len(archive.infolist())} members")
    try:
        yield archive
    finally:
        archive.close()
        logger.debug(f"Closed archive [{label}]")


def read_member(archive: zipfile.ZipFile, name: str) -> bytes:
    """
    Return the decompressed content of the member called ``name``.

    The name must match exactly (case-sensitive, full path in the archive).
    If the directory lists the name more than once the first entry wins.

    :raises MemberNotFoundError: no member has that name
    :raises ArchiveReadError: the member exists but cannot be read
    """
    info = next((i for i in archive.infolist() if i.filename == name), None)
    if info is None:
        raise MemberNotFoundError(name)

    try:
        with archive.open(info) as f:
            data = f.read()
    except _MEMBER_READ_ERRORS as exc:
        raise ArchiveReadError(name, cause=exc) from exc

    logger.debug(f"Read member [{name}] ({len(data)} bytes)")
    return data
