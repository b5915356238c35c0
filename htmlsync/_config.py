"""Konfiguracja htmlsync — zmienne środowiskowe (opcjonalnie z pliku .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from data_model.documents import DEFAULT_FOOT_TOKEN, DEFAULT_HEAD_TOKEN, SyncTokens


@dataclass(frozen=True, slots=True)
class Settings:
    tokens: SyncTokens
    extension: str
    encoding: str


def load_settings(env_file: Path | None = None) -> Settings:
    """
    Czyta ustawienia ze środowiska. Plik .env (domyślnie w bieżącym katalogu)
    nie nadpisuje zmiennych już ustawionych w środowisku.
    """
    load_dotenv(env_file or Path.cwd() / ".env", override=False)

    head = os.getenv("HTMLSYNC_HEAD_TOKEN", DEFAULT_HEAD_TOKEN)
    foot = os.getenv("HTMLSYNC_FOOT_TOKEN", DEFAULT_FOOT_TOKEN)
    if not head or not foot:
        raise ValueError("Sync tokens must not be empty (HTMLSYNC_HEAD_TOKEN / HTMLSYNC_FOOT_TOKEN)")

    return Settings(
        tokens    = SyncTokens(head=head, foot=foot),
        extension = os.getenv("HTMLSYNC_EXTENSION", ".html"),
        encoding  = os.getenv("HTMLSYNC_ENCODING",  "utf-8"),
    )
