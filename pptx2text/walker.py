"""
Walks the slides of an opened presentation archive in order.

Slides are addressed by the naming convention ``ppt/slides/slide{N}.xml``
starting at N = 1. The walk ends at the first index without a member, so a
deck holding slide1.xml and slide3.xml but no slide2.xml yields only the
first slide.
"""

import itertools
import logging
import zipfile
from dataclasses import dataclass
from typing import Iterator

from pptx2text.archive import read_member, slide_member_name
from pptx2text.exceptions import MemberNotFoundError
from pptx2text.slide_text import extract_slide_text

logger = logging.getLogger(__name__)

# Placed between slides only, never after the last one
SLIDE_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class SlideText:
    """Normalized text of one slide."""

    index: int
    member_name: str
    text: str


def iter_slide_texts(archive: zipfile.ZipFile) -> Iterator[SlideText]:
    """
    Yield the text of slide 1, 2, ... until a slide index is absent.

    :raises ArchiveReadError: a slide member exists but cannot be read
    :raises SlideParseError: a slide member is not well-formed XML
    """
    for index in itertools.count(1):
        name = slide_member_name(index)
        try:
            data = read_member(archive, name)
        except MemberNotFoundError:
            logger.debug(f"No member [{name}], walked {index - 1} slides")
            return

        logger.debug(f"Processing slide [{index}]")
        yield SlideText(index=index, member_name=name, text=extract_slide_text(data))


def walk(archive: zipfile.ZipFile) -> str:
    """Return the text of all contiguous slides joined by ``SLIDE_SEPARATOR``."""
    slides = list(iter_slide_texts(archive))
    logger.info("Extracted text from %d slides", len(slides))
    return SLIDE_SEPARATOR.join(slide.text for slide in slides)
