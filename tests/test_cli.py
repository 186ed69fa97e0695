import pytest

from mdpdf.cli import build_parser, main
from mdpdf.settings import build_options


def test_convert_command(sample_text, tmp_path, capsys):
    src = tmp_path / "doc.md"
    src.write_text(sample_text, encoding="utf-8")
    out = tmp_path / "nested" / "doc.pdf"

    main(["convert", str(src), str(out)])

    assert out.is_file()
    assert "PDF zapisany" in capsys.readouterr().out


def test_convert_missing_input(tmp_path, capsys):
    out = tmp_path / "doc.pdf"
    with pytest.raises(SystemExit) as exc:
        main(["convert", str(tmp_path / "missing.md"), str(out)])
    assert exc.value.code == 1
    assert not out.exists()
    assert "Błąd odczytu" in capsys.readouterr().err


def test_convert_requires_two_paths():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["convert", "only-input.md"])


def test_layout_flags_are_parsed():
    args = build_parser().parse_args(
        ["convert", "a.md", "b.pdf", "--footer", "F", "--no-footer-detect", "-w", "60"]
    )
    assert (args.footer, args.no_footer_detect, args.wrap_width) == ("F", True, 60)


def test_wrap_width_must_be_positive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["convert", "a.md", "b.pdf", "--wrap-width", "0"])


def test_toc_command(tmp_path, capsys):
    src = tmp_path / "doc.md"
    src.write_text("# Intro\n## Details\ntext\nend", encoding="utf-8")

    main(["toc", str(src)])

    out = capsys.readouterr().out
    assert "Intro" in out
    assert "Details" in out
    assert "3 stron" in out


def test_inspect_command(sample_text, tmp_path, capsys):
    src = tmp_path / "doc.md"
    src.write_text(sample_text, encoding="utf-8")
    pdf_path = tmp_path / "doc.pdf"
    main(["convert", str(src), str(pdf_path)])
    capsys.readouterr()

    main(["inspect", str(pdf_path), "--page", "3"])

    out = capsys.readouterr().out
    assert "Hello world" in out
    assert "runów" in out


def test_inspect_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["inspect", str(tmp_path / "nope.pdf")])
    assert exc.value.code == 1


def test_env_wrap_width(monkeypatch):
    monkeypatch.setenv("MDPDF_WRAP_WIDTH", "40")
    assert build_options().wrap_width == 40
    assert build_options(wrap_width=10).wrap_width == 10


def test_env_wrap_width_invalid(monkeypatch):
    monkeypatch.setenv("MDPDF_WRAP_WIDTH", "abc")
    with pytest.raises(ValueError):
        build_options()


def test_env_footer_text(monkeypatch):
    monkeypatch.setenv("MDPDF_FOOTER_TEXT", "Firma X")
    assert build_options(detect_footer=False).default_footer == "Firma X"


def test_env_footer_default_matches_layout_default(monkeypatch):
    from data_model.layout import DEFAULT_FOOTER_TEXT, LayoutOptions

    monkeypatch.delenv("MDPDF_FOOTER_TEXT", raising=False)
    assert build_options().default_footer == DEFAULT_FOOTER_TEXT == LayoutOptions().default_footer
