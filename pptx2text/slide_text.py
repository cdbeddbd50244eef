"""
Slide Text Extractor
====================

Recovers the visible text of a single slide part (``ppt/slides/slideN.xml``).

Slide text lives in DrawingML text runs:

    <p:sp>
      <p:txBody>
        <a:p>
          <a:r><a:rPr lang="en-US"/><a:t>Hello</a:t></a:r>
          <a:r><a:t>World</a:t></a:r>
        </a:p>
      </p:txBody>
    </p:sp>

Only character data inside ``t`` elements is kept; everything else (shape
geometry, run properties, placeholders) is markup and is dropped.

Parsing is event driven: the slide is fed to an lxml parser with a target
object receiving start/end/data callbacks, so no element tree is built for
the slide.

Encoding Handling
-----------------
The raw bytes are not assumed to be UTF-8. The encoding is taken from a
byte-order mark or, without one, from the XML declaration. A missing or
unparseable declaration falls back to UTF-8; a declared encoding Python has
no codec for is an error. The bytes are transcoded to UTF-8 and the
declaration removed before they reach the parser.

Whitespace
----------
After the whole slide is consumed every run of whitespace collapses to a
single space and the result is trimmed, so each slide becomes one line.
"""

import codecs
import logging
import re

from lxml import etree

from pptx2text.exceptions import SlideParseError

logger = logging.getLogger(__name__)

TEXT_RUN_LOCAL_NAME = "t"

DEFAULT_ENCODING = "utf-8"

# Checked in order; UTF-32 LE must come before UTF-16 LE (shared prefix)
_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

# "<?" in UTF-16 without a byte-order mark
_UTF16_LE_PROLOG = b"<\x00?\x00"
_UTF16_BE_PROLOG = b"\x00<\x00?"

_DECLARED_ENCODING_RE = re.compile(
    rb"""^<\?xml[^>]*?\sencoding\s*=\s*["']([A-Za-z][A-Za-z0-9._:-]*)["']"""
)
_XML_DECLARATION_RE = re.compile(r"^<\?xml[^>]*\?>")


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def normalize_whitespace(value: str) -> str:
    """Collapse all whitespace runs to single spaces and trim the ends."""
    return " ".join(value.split()).strip()


def detect_encoding(data: bytes) -> str:
    """
    Return the codec name to decode ``data`` with.

    A byte-order mark wins over the declaration. Without a usable
    declaration the data is taken as UTF-8.

    :raises SlideParseError: the declared encoding is not supported
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding

    if data.startswith(_UTF16_LE_PROLOG):
        return "utf-16-le"
    if data.startswith(_UTF16_BE_PROLOG):
        return "utf-16-be"

    match = _DECLARED_ENCODING_RE.match(data)
    if not match:
        return DEFAULT_ENCODING

    label = match.group(1).decode("ascii")
    try:
        return codecs.lookup(label).name
    except LookupError as exc:
        raise SlideParseError(
            f"Unsupported encoding declared in slide XML: {label}", cause=exc
        ) from exc


def _to_canonical_bytes(data: bytes) -> bytes:
    encoding = detect_encoding(data)
    logger.debug(f"Decoding slide XML as [{encoding}]")
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise SlideParseError(f"Slide XML is not valid {encoding}", cause=exc) from exc

    text = text.lstrip("\ufeff")
    text = _XML_DECLARATION_RE.sub("", text, count=1)
    return text.encode("utf-8")


class _TextRunCollector:
    """Parser target accumulating character data found inside text runs."""

    def __init__(self):
        self.in_text_run = False
        self.parts: list[str] = []

    def start(self, tag, attrib):
        if _local_name(tag) == TEXT_RUN_LOCAL_NAME:
            self.in_text_run = True

    def end(self, tag):
        if _local_name(tag) == TEXT_RUN_LOCAL_NAME:
            self.in_text_run = False
            # Keeps adjacent runs apart; collapsed by normalization
            self.parts.append(" ")

    def data(self, data):
        if self.in_text_run:
            self.parts.append(data)

    def close(self) -> str:
        return "".join(self.parts)


def extract_slide_text(xml_bytes: bytes) -> str:
    """
    Extract the normalized text of one slide.

    Args:
        xml_bytes: Raw content of a slide XML part, in any encoding the
            document declares.

    Returns:
        The slide text on a single line, words separated by single spaces.
        An empty string if the slide has no text runs.

    Raises:
        SlideParseError: The XML is malformed or cannot be decoded.

    Example:
        >>> extract_slide_text(b"<p><r><t>Hello</t><t>World</t></r></p>")
        'Hello World'
    """
    canonical = _to_canonical_bytes(xml_bytes)
    if not canonical.strip():
        raise SlideParseError("Slide XML is empty")

    parser = etree.XMLParser(
        target=_TextRunCollector(),
        resolve_entities=False,
        no_network=True,
    )
    try:
        parser.feed(canonical)
        raw_text = parser.close()
    except (etree.XMLSyntaxError, etree.ParserError) as exc:
        raise SlideParseError(f"Malformed slide XML: {exc}", cause=exc) from exc

    return normalize_whitespace(raw_text)
