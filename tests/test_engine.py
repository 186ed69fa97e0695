from data_model.layout import FontStyle, Layer, LayoutOptions, Metadata
from md_layout.engine import layout_body
from md_layout.metadata import extract_metadata
from md_layout.pipeline import split_lines


def _run(text: str, options: LayoutOptions | None = None):
    lines = split_lines(text)
    return layout_body(lines, extract_metadata(lines, options), options)


def _body(result):
    return [i for i in result.instructions if i.layer is Layer.BODY]


def _footers(result):
    return [i for i in result.instructions if i.layer is Layer.FOOTER]


def test_sample_document(sample_text):
    result = _run(sample_text)
    body = _body(result)

    assert [(i.text, i.font_style) for i in body] == [
        ("Title", FontStyle.BOLD),
        ("Hello world", FontStyle.REGULAR),
        ("code", FontStyle.MONOSPACE),
    ]
    assert [(e.label, e.page_number, e.is_chapter) for e in result.toc_entries] == [("Title", 3, True)]
    assert result.page_number == 3

    footers = _footers(result)
    assert len(footers) == 1
    assert footers[0].text == "Page 3  |  Footer line"
    assert (footers[0].x_mm, footers[0].y_mm, footers[0].font_size) == (10.0, 10.0, 10.0)


def test_vertical_positions_and_sizes(sample_text):
    title, hello, code = _body(_run(sample_text))
    assert (title.x_mm, title.y_mm, title.font_size) == (15.0, 270.0, 24.0)
    assert (hello.x_mm, hello.y_mm, hello.font_size) == (15.0, 246.0, 12.0)
    assert (code.x_mm, code.y_mm, code.font_size) == (15.0, 234.0, 10.0)


def test_subchapter_heading():
    result = _run("## Details\nend")
    (sub,) = _body(result)
    assert (sub.text, sub.x_mm, sub.font_size, sub.font_style) == ("Details", 25.0, 18.0, FontStyle.BOLD)
    assert result.toc_entries[0].is_chapter is False


def test_signature_never_rendered():
    result = _run("Signature: J.Doe\n```\nSignature: inside code\n```\ntext\nend")
    texts = [i.text for i in result.instructions]
    assert not any("Signature" in t or "J.Doe" in t for t in texts)


def test_fence_lines_produce_no_output():
    result = _run("```\n  indented code\n```\nend")
    body = _body(result)
    assert [i.text for i in body] == ["  indented code"]
    assert not any("```" in i.text for i in result.instructions)


def test_headings_inside_code_block_are_code():
    result = _run("```\n# not a heading\n```\nend")
    assert result.toc_entries == []
    assert _body(result)[0].font_style is FontStyle.MONOSPACE


def test_unterminated_fence_is_tolerated():
    result = _run("text\n```\nstill code\nend")
    assert result.ends_in_code_block is True
    assert _body(result)[-1].font_style is FontStyle.MONOSPACE


def test_last_line_is_removed_as_footer():
    result = _run("# Doc\nThe closing sentence.")
    assert "The closing sentence." not in [i.text for i in _body(result)]


def test_disabled_footer_detection_keeps_last_line():
    result = _run("# Doc\nThe closing sentence.", LayoutOptions(detect_footer=False))
    assert "The closing sentence." in [i.text for i in _body(result)]
    assert _footers(result)[0].text == "Page 3  |  Generated with mdpdf"


def test_single_page_split(long_prose):
    result = _run(long_prose)
    body = _body(result)

    assert [i.page_index for i in body] == [2] * 21 + [3]
    assert body[20].y_mm == 30.0
    assert body[21].y_mm == 270.0
    assert result.page_number == 4
    assert [f.text.split("  |")[0] for f in _footers(result)] == ["Page 3", "Page 4"]


def test_overflow_checked_between_wrapped_segments():
    # 25 słów po 79 znaków → 25 segmentów z jednej linii źródłowej
    line = " ".join(["x" * 79] * 25)
    result = _run(f"{line}\nend")
    body = _body(result)

    assert len(body) == 25
    assert [i.page_index for i in body] == [2] * 21 + [3] * 4
    assert all(i.y_mm >= 18.0 for i in body)
    footers = _footers(result)
    assert [f.page_index for f in footers] == [2, 3]


def test_fence_line_can_open_new_page(long_prose):
    lines = long_prose.splitlines()[:21] + ["```", "code", "```", "end"]
    result = _run("\n".join(lines))
    code = _body(result)[-1]
    assert (code.text, code.page_index, code.y_mm) == ("code", 3, 270.0)


def test_footer_count_matches_page_number():
    text = "\n".join(["# Chapter"] + ["para " * 30] * 60 + ["## Sub"] + ["p"] * 40 + ["end"])
    result = _run(text)
    assert result.footer_count == result.page_number - 2
    assert [f.page_index for f in _footers(result)] == list(range(2, result.page_number))


def test_y_non_increasing_within_page():
    text = "\n".join(["# A", "## B", "text " * 50, "```", "c", "```"] * 10 + ["end"])
    body = _body(_run(text))
    for prev, cur in zip(body, body[1:]):
        if prev.page_index == cur.page_index:
            assert cur.y_mm < prev.y_mm
        else:
            assert cur.page_index == prev.page_index + 1
            assert cur.y_mm == 270.0


def test_toc_entries_follow_source_order():
    text = "\n".join(["# One", "## One.a", "x", "# Two", "## Two.a", "## Two.b", "end"])
    entries = _run(text).toc_entries
    assert [e.label for e in entries] == ["One", "One.a", "Two", "Two.a", "Two.b"]
    assert [e.is_chapter for e in entries] == [True, False, True, False, False]


def test_heading_page_number_after_overflow(long_prose):
    lines = long_prose.splitlines()[:21] + ["# Later", "end"]
    entry = _run("\n".join(lines)).toc_entries[0]
    assert (entry.label, entry.page_number) == ("Later", 4)


def test_explicit_metadata_footer_is_used():
    meta = Metadata(title="T", signature="S", footer_text="skip me")
    result = layout_body(["keep", "skip me", "also"], meta)
    assert [i.text for i in _body(result)] == ["keep", "also"]
    assert _footers(result)[0].text == "Page 3  |  skip me"


def test_custom_wrap_width():
    result = _run("aaa bbb ccc\nend", LayoutOptions(wrap_width=7))
    assert [i.text for i in _body(result)] == ["aaa bbb", "ccc"]


def test_form_feed_and_line_separator_stay_in_line():
    for sep in ("\x0c", "\u2028"):
        result = _run(f"# T\nalpha{sep}beta\nend")
        assert [i.text for i in _body(result)] == ["T", "alpha beta"]


def test_engine_starts_from_layout_constants():
    from md_layout.constants import FIRST_CONTENT_PAGE_NUMBER, TOP_MARGIN_MM
    from md_layout.engine import LayoutEngine

    engine = LayoutEngine(Metadata(title="T", signature="S", footer_text="f"))
    assert engine.cursor.page_number == FIRST_CONTENT_PAGE_NUMBER
    assert engine.cursor.current_page_index == FIRST_CONTENT_PAGE_NUMBER - 1
    assert engine.cursor.y_position == TOP_MARGIN_MM
    assert engine.result.page_number == FIRST_CONTENT_PAGE_NUMBER
