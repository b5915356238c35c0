"""
splicer — rdzeń htmlsync: lokalizacja tokenów i sklejanie dokumentów.

Interfejs publiczny:
    locate(text, tokens)                      → CutPoints
    split_source(source, tokens)              → SourceParts
    splice(parts, text, cuts)                 → str | None
    sync_document(parts, document, tokens)    → SyncResult
    sync_documents(parts, documents, tokens, source_path, context)
    new_document_text(parts)                  → str
    SyncStatus, SyncResult, RunContext        — typy wyników
    SourceError, MissingHeadTokenError        — błędy krytyczne źródła

Typowe użycie:
    from data_model import Document, SyncTokens
    from splicer import RunContext, split_source, sync_documents

    tokens = SyncTokens()
    parts  = split_source(source_text, tokens)
    ctx    = RunContext()
    for result in sync_documents(parts, targets, tokens, source_path, ctx):
        if result.changed:
            save(result.path, result.new_text)
"""

from .types import (
    SyncStatus,
    SyncResult,
    RunContext,
    SourceError,
    MissingHeadTokenError,
)
from .locator import locate
from .engine import (
    split_source,
    splice,
    sync_document,
    sync_documents,
    new_document_text,
)

__all__ = [
    "SyncStatus",
    "SyncResult",
    "RunContext",
    "SourceError",
    "MissingHeadTokenError",
    "locate",
    "split_source",
    "splice",
    "sync_document",
    "sync_documents",
    "new_document_text",
]
