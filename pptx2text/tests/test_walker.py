import zipfile
from unittest import TestCase

from pptx2text.archive import open_archive
from pptx2text.exceptions import ArchiveReadError, SlideParseError
from pptx2text.tests.deck_builder import (
    build_archive,
    build_deck,
    corrupt_member,
    slide_xml,
)
from pptx2text.walker import SLIDE_SEPARATOR, SlideText, iter_slide_texts, walk

tc = TestCase()


def test_walk_joins_slides_with_separator() -> None:
    deck = build_deck(slide_xml("A"), slide_xml("B"), slide_xml("C"))
    with open_archive(deck) as archive:
        tc.assertEqual("A\n\nB\n\nC", walk(archive))


def test_walk_has_no_trailing_separator() -> None:
    with open_archive(build_deck(slide_xml("Only slide"))) as archive:
        text = walk(archive)

    tc.assertEqual("Only slide", text)
    tc.assertFalse(text.endswith(SLIDE_SEPARATOR))


def test_walk_without_first_slide_is_empty() -> None:
    source = build_archive({"ppt/presentation.xml": b"<presentation/>"})
    with open_archive(source) as archive:
        tc.assertEqual("", walk(archive))


def test_walk_stops_at_first_gap() -> None:
    source = build_archive(
        {
            "ppt/slides/slide1.xml": slide_xml("first"),
            "ppt/slides/slide3.xml": slide_xml("third"),
        }
    )
    with open_archive(source) as archive:
        tc.assertEqual("first", walk(archive))


def test_walk_orders_slides_numerically() -> None:
    slides = [slide_xml(f"S{i}") for i in range(1, 12)]
    with open_archive(build_deck(*slides)) as archive:
        text = walk(archive)

    tc.assertEqual(SLIDE_SEPARATOR.join(f"S{i}" for i in range(1, 12)), text)


def test_walk_keeps_empty_slides_in_place() -> None:
    deck = build_deck(slide_xml("A"), slide_xml(), slide_xml("C"))
    with open_archive(deck) as archive:
        tc.assertEqual("A\n\n\n\nC", walk(archive))


def test_walk_ignores_non_slide_members() -> None:
    source = build_archive(
        {
            "ppt/slides/slide1.xml": slide_xml("Body"),
            "ppt/slides/_rels/slide1.xml.rels": b"<Relationships/>",
            "ppt/slideLayouts/slideLayout1.xml": slide_xml("Layout placeholder"),
            "ppt/notesSlides/notesSlide1.xml": slide_xml("Speaker notes"),
        }
    )
    with open_archive(source) as archive:
        tc.assertEqual("Body", walk(archive))


def test_iter_slide_texts_reports_index_and_member() -> None:
    deck = build_deck(slide_xml("Hello", "World"), slide_xml("Bye"))
    with open_archive(deck) as archive:
        slides = list(iter_slide_texts(archive))

    tc.assertEqual(
        [
            SlideText(1, "ppt/slides/slide1.xml", "Hello World"),
            SlideText(2, "ppt/slides/slide2.xml", "Bye"),
        ],
        slides,
    )


def test_walk_propagates_parse_error() -> None:
    deck = build_deck(slide_xml("fine"), b"<p:sld><a:t>broken</p:sld>")
    with open_archive(deck) as archive:
        with tc.assertRaises(SlideParseError):
            walk(archive)


def test_walk_propagates_read_error() -> None:
    second = slide_xml("second slide")
    source = build_archive(
        {
            "ppt/slides/slide1.xml": slide_xml("first slide"),
            "ppt/slides/slide2.xml": second,
        },
        compression=zipfile.ZIP_STORED,
    )
    with open_archive(corrupt_member(source, second)) as archive:
        with tc.assertRaises(ArchiveReadError) as ctx:
            walk(archive)

    tc.assertEqual("ppt/slides/slide2.xml", ctx.exception.name)
