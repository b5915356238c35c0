"""
splicer/locator.py — lokalizacja tokenów synchronizacji w tekście.

Token head: PIERWSZE wystąpienie; cięcie na początku następnej linii.
Token foot: OSTATNIE wystąpienie; cięcie na znaku '\\n' poprzedzającym
linię z tokenem (stopka zawiera więc ten znak nowej linii).

Wystąpienie na offsecie 0 traktujemy jak brak tokenu. To najpewniej
przypadkowa granica starej implementacji, ale zachowujemy ją dla zgodności.
"""

from __future__ import annotations

from data_model.documents import CutPoints, SyncTokens

_NEWLINE = "\n"


def _head_cut(text: str, token: str) -> int | None:
    idx = text.find(token)
    if idx <= 0:
        return None
    nl = text.find(_NEWLINE, idx)
    # linia z tokenem musi kończyć się znakiem nowej linii
    return nl + 1 if nl >= 0 else None


def _foot_cut(text: str, token: str) -> int | None:
    idx = text.rfind(token)
    if idx <= 0:
        return None
    # skan wsteczny obejmuje indeksy idx..1 (indeks 0 nie jest sprawdzany)
    nl = text.rfind(_NEWLINE, 1, idx + 1)
    return nl if nl >= 0 else None


def locate(text: str, tokens: SyncTokens) -> CutPoints:
    """Wyznacza punkty cięcia dokumentu. Nie rzuca wyjątków przy braku tokenów."""
    return CutPoints(
        head_cut=_head_cut(text, tokens.head),
        foot_cut=_foot_cut(text, tokens.foot),
    )
