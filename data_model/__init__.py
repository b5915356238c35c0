"""
data_model — struktury danych htmlsync.

Użycie:
  from data_model import Document, CutPoints, SyncTokens, SourceParts

Moduły:
  documents — Document, CutPoints, SyncTokens, SourceParts,
              DEFAULT_HEAD_TOKEN, DEFAULT_FOOT_TOKEN
"""

from .documents import (
    DEFAULT_HEAD_TOKEN,
    DEFAULT_FOOT_TOKEN,
    SyncTokens,
    Document,
    CutPoints,
    SourceParts,
)

__all__ = [
    "DEFAULT_HEAD_TOKEN",
    "DEFAULT_FOOT_TOKEN",
    "SyncTokens",
    "Document",
    "CutPoints",
    "SourceParts",
]
