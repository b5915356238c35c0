"""Operacje na plikach — jedyne miejsce, w którym htmlsync dotyka dysku.

Odczyt i zapis z newline="" — końce linii (także \r\n) zostają bajt w bajt.
"""

from __future__ import annotations

from pathlib import Path

from data_model.documents import Document


def list_candidates(directory: Path, extension: str, source: Path) -> list[Path]:
    """Pliki z danym rozszerzeniem w katalogu, bez pliku źródłowego."""
    source_resolved = source.resolve()
    return sorted(
        p for p in directory.iterdir()
        if p.is_file()
        and p.name.endswith(extension)
        and p.resolve() != source_resolved
    )


def read_document(path: Path, encoding: str) -> Document:
    with open(path, encoding=encoding, newline="") as f:
        return Document(path=path, text=f.read())


def write_document(path: Path, text: str, encoding: str) -> None:
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)


def create_document(path: Path, text: str, encoding: str) -> None:
    """Tworzy nowy plik; FileExistsError gdy ścieżka już istnieje."""
    with open(path, "x", encoding=encoding, newline="") as f:
        f.write(text)
