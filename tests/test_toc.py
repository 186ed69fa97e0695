from data_model.layout import FontStyle, Metadata, TocEntry
from md_layout.cover import cover_instructions
from md_layout.toc import format_entry, render_toc


def test_entry_format():
    entry = TocEntry("Intro", 3, True)
    assert format_entry(entry) == "Intro .......................... 3"


def test_header_only_for_empty_toc():
    (header,) = render_toc([])
    assert header.text == "Table of Contents"
    assert (header.page_index, header.x_mm, header.y_mm, header.font_size) == (1, 15.0, 270.0, 28.0)
    assert header.font_style is FontStyle.BOLD


def test_entries_positions_and_indent():
    entries = [TocEntry("A", 3, True), TocEntry("A.1", 3, False), TocEntry("B", 5, True)]
    _, *lines = render_toc(entries)

    assert [i.y_mm for i in lines] == [250.0, 236.0, 222.0]
    assert [i.x_mm for i in lines] == [20.0, 30.0, 20.0]
    assert all(i.font_size == 14.0 and i.page_index == 1 for i in lines)
    assert lines[2].text.endswith(" 5")


def test_cover_page():
    title, signature = cover_instructions(Metadata("My Doc", "J.Doe", "f"))
    assert (title.text, title.x_mm, title.y_mm, title.font_size) == ("My Doc", 20.0, 250.0, 32.0)
    assert title.font_style is FontStyle.BOLD
    assert (signature.text, signature.x_mm, signature.y_mm, signature.font_size) == ("J.Doe", 20.0, 100.0, 16.0)
    assert {title.page_index, signature.page_index} == {0}
