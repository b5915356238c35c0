"""
splicer/engine.py — sklejanie nagłówka/stopki źródła z treścią celów.

Polityka aktualizacji dokumentu docelowego:
  - brak tokenu head          → pominięcie (plik bez zmian)
  - head + foot               → header + cel[head_cut:foot_cut] + footer
  - head bez foot             → header + cel[head_cut:]   (stopka NIE jest dopisywana)

Asymetria jest celowa: cel bez tokenu foot rezygnuje z synchronizacji stopki.
Wszystkie funkcje są czyste — zapis na dysk należy do wywołującego.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from data_model.documents import CutPoints, Document, SourceParts, SyncTokens

from .locator import locate
from .types import MissingHeadTokenError, RunContext, SyncResult, SyncStatus


def split_source(source: str, tokens: SyncTokens) -> SourceParts:
    """
    Dzieli dokument źródłowy na nagłówek i stopkę.

    Rzuca MissingHeadTokenError gdy źródło nie ma tokenu head —
    bez nagłówka nie ma czego synchronizować.
    """
    cuts = locate(source, tokens)
    if cuts.head_cut is None:
        raise MissingHeadTokenError(tokens.head)
    footer = source[cuts.foot_cut:] if cuts.foot_cut is not None else ""
    return SourceParts(header=source[:cuts.head_cut], footer=footer)


def splice(parts: SourceParts, text: str, cuts: CutPoints) -> str | None:
    """Zwraca nową treść celu albo None, gdy cel nie ma tokenu head."""
    if cuts.head_cut is None:
        return None
    if cuts.foot_cut is not None:
        return parts.header + text[cuts.head_cut:cuts.foot_cut] + parts.footer
    return parts.header + text[cuts.head_cut:]


def sync_document(parts: SourceParts, document: Document, tokens: SyncTokens) -> SyncResult:
    cuts = locate(document.text, tokens)
    new_text = splice(parts, document.text, cuts)
    if new_text is None:
        return SyncResult(path=document.path, status=SyncStatus.TOKEN_MISSING)
    return SyncResult(
        path=document.path,
        status=SyncStatus.SYNCHRONIZED,
        new_text=new_text,
        footer_synced=cuts.has_foot,
    )


def sync_documents(
    parts: SourceParts,
    documents: Iterable[Document],
    tokens: SyncTokens,
    source_path: Path | None = None,
    context: RunContext | None = None,
) -> Iterator[SyncResult]:
    """
    Synchronizuje kolejne dokumenty, po jednym, leniwie.

    Dokument o ścieżce źródła jest pomijany bez raportu (brak auto-synchronizacji).
    Ścieżki porównujemy wprost; rozwiązywanie linków należy do warstwy plików.
    Jeśli podano context, każdy wynik trafia do jego liczników.
    """
    for document in documents:
        if source_path is not None and document.path == source_path:
            continue
        result = sync_document(parts, document, tokens)
        if context is not None:
            context.record(result)
        yield result


def new_document_text(parts: SourceParts) -> str:
    """Treść nowego pliku: sam nagłówek i stopka, bez treści."""
    return parts.header + parts.footer
