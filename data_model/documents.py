"""
data_model/documents.py — model dokumentu HTML i punktów cięcia.

Document to pełny tekst jednego pliku wraz ze ścieżką. Rdzeń synchronizacji
nigdy nie czyta dysku — dostaje gotowe obiekty Document od warstwy CLI.
CutPoints to para offsetów wyznaczona przez lokator tokenów; None oznacza
„tokenu brak” (to normalny wynik, nie błąd).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_HEAD_TOKEN = "@SyncTokenHead"
DEFAULT_FOOT_TOKEN = "@SyncTokenFoot"


@dataclass(frozen=True, slots=True)
class SyncTokens:
    """Literały znaczników — stałe dla całego przebiegu."""
    head: str = DEFAULT_HEAD_TOKEN
    foot: str = DEFAULT_FOOT_TOKEN


@dataclass(frozen=True, slots=True)
class Document:
    path: Path
    text: str            # pełna treść pliku, bez translacji końców linii


@dataclass(frozen=True, slots=True)
class CutPoints:
    head_cut: int | None     # początek linii PO linii z tokenem head
    foot_cut: int | None     # indeks '\n' poprzedzającego linię z tokenem foot

    @property
    def has_foot(self) -> bool:
        return self.foot_cut is not None


@dataclass(frozen=True, slots=True)
class SourceParts:
    """Nagłówek i stopka wycięte z dokumentu źródłowego."""
    header: str
    footer: str          # "" gdy źródło nie ma tokenu foot
