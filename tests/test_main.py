import json
import logging
import subprocess

import fitz
import pytest

from pdfwords.main import build_parser, configure_logging, main


def _make_pdf(path, text: str) -> None:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    doc.save(str(path))
    doc.close()


def test_parser_defaults_and_flags() -> None:
    parser = build_parser()
    args = parser.parse_args(["in.pdf", "out.txt"])
    assert args.bigrams is False
    assert args.no_ocr is False
    assert args.input == "in.pdf"
    assert args.output == "out.txt"

    args = parser.parse_args(["--bigrams", "--lang", "eng", "--image-dpi", "150", "dir", "o.txt"])
    assert args.bigrams is True
    assert args.lang == "eng"
    assert args.image_dpi == 150


def test_parser_rejects_wrong_argument_count(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["only-one-arg"])
    assert excinfo.value.code == 2
    assert "usage: pdfwords" in capsys.readouterr().err


def test_main_writes_word_list_without_ocr(tmp_path, capsys) -> None:
    pdf = tmp_path / "doc.pdf"
    _make_pdf(pdf, "Cat dog CAT, dog-house.")
    out = tmp_path / "out.txt"

    assert main(["--no-ocr", str(pdf), str(out)]) == 0
    assert out.read_text(encoding="utf-8").splitlines() == ["CAT", "Cat", "dog", "house"]
    assert capsys.readouterr().out == ""


def test_main_report_is_json_on_stdout(tmp_path, capsys) -> None:
    pdf = tmp_path / "doc.pdf"
    _make_pdf(pdf, "Cat dog CAT, dog-house.")
    out = tmp_path / "out.txt"

    assert main(["--no-ocr", "--bigrams", "--report", str(pdf), str(out)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["mode"] == "bigrams"
    assert report["unique_tokens"] == 3
    assert report["processed"] == 1
    assert report["skipped"] == 0


def test_main_missing_dependency_exits_nonzero(monkeypatch, tmp_path, caplog) -> None:
    pdf = tmp_path / "doc.pdf"
    pdf.write_bytes(b"%PDF")
    out = tmp_path / "out.txt"
    monkeypatch.setattr("pdfwords.collaborators.shutil.which", lambda cmd: None)

    with caplog.at_level(logging.ERROR):
        assert main([str(pdf), str(out)]) == 1
    assert "Required command 'ocrmypdf' not found" in caplog.text
    assert not out.exists()


def test_main_empty_directory_exits_nonzero(tmp_path) -> None:
    src = tmp_path / "empty"
    src.mkdir()
    out = tmp_path / "out.txt"
    assert main(["--no-ocr", str(src), str(out)]) == 1
    assert not out.exists()


def test_main_invalid_input_path_exits_nonzero(tmp_path) -> None:
    assert main(["--no-ocr", str(tmp_path / "missing.pdf"), str(tmp_path / "out.txt")]) == 1


def test_configure_logging_levels() -> None:
    configure_logging(verbose=True)
    assert logging.getLogger().level == logging.DEBUG
    configure_logging(quiet=True)
    assert logging.getLogger().level == logging.WARNING


def test_main_failed_ocr_on_only_input_exits_nonzero(monkeypatch, tmp_path) -> None:
    pdf = tmp_path / "scan.pdf"
    pdf.write_bytes(b"%PDF")
    out = tmp_path / "out.txt"

    def failing_run(cmd, **kwargs):
        del kwargs
        return subprocess.CompletedProcess(cmd, 2, stdout="", stderr="tesseract crashed")

    monkeypatch.setattr("pdfwords.collaborators.shutil.which", lambda cmd: f"/usr/bin/{cmd}")
    monkeypatch.setattr("pdfwords.collaborators.subprocess.run", failing_run)

    assert main([str(pdf), str(out)]) == 1
    assert not out.exists()
