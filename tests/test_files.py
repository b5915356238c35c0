"""Testy warstwy plików (htmlsync._files)."""

from __future__ import annotations

import pytest

from htmlsync._files import create_document, list_candidates, read_document, write_document


def test_list_candidates_excludes_source_and_other_files(tmp_path):
    for name in ("index.html", "b.html", "a.html", "notes.txt", "page.htm"):
        (tmp_path / name).write_text("x", encoding="utf-8")
    (tmp_path / "dir.html").mkdir()

    found = list_candidates(tmp_path, ".html", tmp_path / "index.html")
    assert [p.name for p in found] == ["a.html", "b.html"]


def test_read_write_keeps_crlf(tmp_path):
    path = tmp_path / "a.html"
    path.write_bytes(b"one\r\ntwo\r\n")
    doc = read_document(path, "utf-8")
    assert doc.text == "one\r\ntwo\r\n"

    write_document(path, doc.text + "three\r\n", "utf-8")
    assert path.read_bytes() == b"one\r\ntwo\r\nthree\r\n"


def test_create_document_refuses_existing(tmp_path):
    path = tmp_path / "new.html"
    create_document(path, "first", "utf-8")
    with pytest.raises(FileExistsError):
        create_document(path, "second", "utf-8")
    assert path.read_text(encoding="utf-8") == "first"
