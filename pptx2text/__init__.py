"""
pptx2text: Plain text extraction for PowerPoint .pptx presentations.

Reads the slide parts of a .pptx package in order, keeps only the text of
each slide's text runs, and joins the slides with a blank line.
"""

from pathlib import Path

from pptx2text.archive import open_archive, read_member, slide_member_name
from pptx2text.exceptions import (
    ArchiveOpenError,
    ArchiveReadError,
    MemberNotFoundError,
    OutputWriteError,
    Pptx2TextError,
    SlideParseError,
)
from pptx2text.output import derive_output_path, desktop_directory, write_text
from pptx2text.slide_text import extract_slide_text, normalize_whitespace
from pptx2text.walker import SLIDE_SEPARATOR, SlideText, iter_slide_texts, walk

__version__ = "0.1.0"


def extract_text(path: str | Path) -> str:
    """
    Extract the text of every slide in a .pptx file.

    Args:
        path: Path to the presentation.

    Returns:
        The slide texts in slide order, separated by ``SLIDE_SEPARATOR``.
        An empty string if the package has no ``ppt/slides/slide1.xml``.

    Raises:
        ArchiveOpenError: The file is missing or not a ZIP archive.
        ArchiveReadError: A slide part is present but corrupt.
        SlideParseError: A slide part is not well-formed XML.

    Example:
        >>> import pptx2text
        >>> print(pptx2text.extract_text("slides.pptx"))
    """
    with open_archive(Path(path)) as archive:
        return walk(archive)


def convert(path: str | Path, output_path: str | Path) -> Path:
    """
    Extract the text of ``path`` and write it to ``output_path``.

    Nothing is written unless every slide was extracted.

    :raises Pptx2TextError: extraction or writing failed
    """
    text = extract_text(path)
    return write_text(output_path, text)


__all__ = [
    # Version
    "__version__",
    # Main functions
    "extract_text",
    "convert",
    # Pipeline
    "open_archive",
    "read_member",
    "slide_member_name",
    "extract_slide_text",
    "normalize_whitespace",
    "iter_slide_texts",
    "walk",
    "SlideText",
    "SLIDE_SEPARATOR",
    # Output
    "derive_output_path",
    "desktop_directory",
    "write_text",
    # Errors
    "Pptx2TextError",
    "ArchiveOpenError",
    "ArchiveReadError",
    "MemberNotFoundError",
    "OutputWriteError",
    "SlideParseError",
]
