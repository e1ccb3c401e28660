from __future__ import annotations

import json
from pathlib import Path
from zipfile import ZipFile

import pytest

from docuterm.cli.extract_text import main as extract_text_main

_SLIDE = (
    '<p:sld xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main">'
    "<p:cSld><p:spTree><p:sp><p:txBody><a:p><a:r><a:t>{text}</a:t></a:r></a:p></p:txBody></p:sp></p:spTree></p:cSld>"
    "</p:sld>"
)


def test_cli_reports_single_file_text(tmp_path: Path, capsys: object) -> None:
    source = tmp_path / "notes.md"
    source.write_text("# Agenda\nBudget review\n", encoding="utf-8")

    exit_code = extract_text_main(["--path", str(source)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["processed"] == 1
    assert payload["errors"] == []
    result = payload["results"][0]
    assert result["format"] == "plain_text"
    assert result["text"] == "# Agenda\nBudget review\n"
    assert result["char_count"] == len("# Agenda\nBudget review\n")
    assert result["truncated"] is False


def test_cli_scans_directory_and_collects_errors(tmp_path: Path, capsys: object) -> None:
    (tmp_path / "a.txt").write_text("alpha", encoding="utf-8")
    with ZipFile(tmp_path / "b.pptx", "w") as archive:
        archive.writestr("ppt/slides/slide1.xml", _SLIDE.format(text=""))
    (tmp_path / "c.ppt").write_bytes(b"legacy")
    (tmp_path / "d.png").write_bytes(b"\x89PNG")

    exit_code = extract_text_main(["--path", str(tmp_path)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert [Path(result["source_path"]).name for result in payload["results"]] == ["a.txt"]
    assert len(payload["errors"]) == 1
    error = payload["errors"][0]
    assert Path(error["source_path"]).name == "b.pptx"
    assert error["reason"] == "no_text_found"
    assert error["error"] == "No text found in presentation slides."


def test_cli_reports_legacy_ppt_when_given_explicitly(tmp_path: Path, capsys: object) -> None:
    source = tmp_path / "deck.ppt"
    source.write_bytes(b"legacy")

    exit_code = extract_text_main(["--path", str(source)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert payload["errors"][0]["reason"] == "unsupported_format"
    assert ".pptx or .pdf" in payload["errors"][0]["error"]


def test_cli_truncates_text_with_max_chars(tmp_path: Path, capsys: object) -> None:
    source = tmp_path / "long.txt"
    source.write_text("abcdefghij", encoding="utf-8")

    exit_code = extract_text_main(["--path", str(source), "--max-chars", "4"])
    result = json.loads(capsys.readouterr().out)["results"][0]

    assert exit_code == 0
    assert result["text"] == "abcd"
    assert result["truncated"] is True


@pytest.mark.parametrize("max_chars", ["0", "-5"])
def test_cli_rejects_non_positive_max_chars(tmp_path: Path, capsys: object, max_chars: str) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("alpha", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        extract_text_main(["--path", str(source), "--max-chars", max_chars])

    assert excinfo.value.code == 2
    assert "--max-chars must be >= 1" in capsys.readouterr().err
