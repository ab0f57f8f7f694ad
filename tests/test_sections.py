# tests/test_sections.py
import pytest

from clipfiles.sections import (
    CHAT_PREAMBLE,
    SECTION_SIZE,
    SectionFeed,
    split_into_sections,
)


# -----------------------------------------------------------------------------
# 1. split_into_sections
# -----------------------------------------------------------------------------

def test_short_text_is_a_single_section():
    text = "line1\nline2\n"
    assert split_into_sections(text, len(text)) == [text]


def test_empty_text_gives_one_empty_section():
    assert split_into_sections("", 10) == [""]


def test_accumulate_then_flush_boundary():
    # "line1\nline2" is exactly 11 chars and still fits; adding line3 would not.
    text = "line1\nline2\nline3\n"
    sections = split_into_sections(text, 11)

    assert sections == ["line1\nline2", "line3\n"]
    assert "\n".join(sections) == text


def test_one_character_below_boundary_flushes_earlier():
    sections = split_into_sections("line1\nline2\nline3\n", 10)
    assert sections == ["line1", "line2", "line3\n"]


def test_long_line_forms_its_own_section():
    long_line = "x" * 30
    text = f"ab\n{long_line}\ncd"
    sections = split_into_sections(text, 10)

    assert sections == ["ab", long_line, "cd"]


def test_blank_lines_survive_cuts():
    text = "aaaa\n\n\nbbbb\n\ncccc\n"
    sections = split_into_sections(text, 5)
    assert "\n".join(sections) == text


@pytest.mark.parametrize("max_length", [1, 3, 7, 12, 25, 64])
def test_round_trip_and_bound(max_length):
    text = "\n".join(
        ["====./pkg/mod.py====", "import os", "", "def f():", "    return 1", ""]
        * 5
    )
    sections = split_into_sections(text, max_length)

    assert "\n".join(sections) == text
    for section in sections:
        assert len(section) <= max_length or "\n" not in section


def test_non_positive_length_rejected():
    with pytest.raises(ValueError):
        split_into_sections("abc", 0)


# -----------------------------------------------------------------------------
# 2. SectionFeed
# -----------------------------------------------------------------------------

def test_feed_prefixes_only_first_section():
    feed = SectionFeed("line1\nline2\nline3\n", 11)

    assert len(feed) == 2
    assert feed[0] == CHAT_PREAMBLE + "line1\nline2"
    assert feed[1] == "line3\n"
    assert list(feed) == [feed[0], feed[1]]


def test_feed_defaults():
    feed = SectionFeed("small")
    assert feed.max_length == SECTION_SIZE == 20000
    assert len(feed) == 1
    assert feed[0].startswith("I have a lot of files to show you")
    assert feed[0].endswith("completed all copying.\n\nsmall")


def test_feed_out_of_range():
    feed = SectionFeed("abc", 10, preamble="")
    with pytest.raises(IndexError):
        feed[1]
    with pytest.raises(IndexError):
        feed[-1]
