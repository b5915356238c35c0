"""
splicer/types.py — statusy, wyniki i kontekst przebiegu synchronizacji.

SyncStatus  — wynik dla pojedynczego dokumentu docelowego.
SyncResult  — para (ścieżka, nowy tekst) albo sygnał pominięcia.
RunContext  — liczniki i czas całego przebiegu; przekazywany jawnie,
              rdzeń nie trzyma żadnego stanu globalnego.
SourceError — błędy krytyczne dokumentu źródłowego (przerywają przebieg).
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class SyncStatus(StrEnum):
    """Wynik synchronizacji jednego pliku."""

    SYNCHRONIZED  = "synchronized"
    TOKEN_MISSING = "token-missing"


@dataclass(frozen=True, slots=True)
class SyncResult:
    """
    Wynik dla jednego dokumentu docelowego.

    - path:     ścieżka dokumentu (zapis wraca pod tę samą ścieżkę)
    - status:   SyncStatus
    - new_text: nowa pełna treść; None gdy status == TOKEN_MISSING
    - footer_synced: False gdy cel nie ma tokenu foot (stopka nie jest narzucana)
    """

    path: Path
    status: SyncStatus
    new_text: str | None = None
    footer_synced: bool = False

    @property
    def changed(self) -> bool:
        return self.status is SyncStatus.SYNCHRONIZED


@dataclass(slots=True)
class RunContext:
    """Stan jednego uruchomienia: liczniki wyników i zegar."""

    started: float = field(default_factory=time.perf_counter)
    results: list[SyncResult] = field(default_factory=list)

    def record(self, result: SyncResult) -> None:
        self.results.append(result)

    @property
    def synchronized(self) -> int:
        return sum(1 for r in self.results if r.status is SyncStatus.SYNCHRONIZED)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.status is SyncStatus.TOKEN_MISSING)

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.started) * 1000.0


class SourceError(Exception):
    """Dokument źródłowy nie nadaje się do synchronizacji."""


class MissingHeadTokenError(SourceError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Head token {token} missing")
        self.token = token
