"""
htmlsync — synchronizacja nagłówka i stopki HTML do wszystkich plików katalogu.

Użycie:
  htmlsync [opcje] <źródło> [nowy-plik]

Plik źródłowy zawiera znacznik @SyncTokenHead (koniec wspólnego nagłówka)
i opcjonalnie @SyncTokenFoot (początek wspólnej stopki). Pozostałe pliki
.html z tego samego katalogu dostają nagłówek i stopkę źródła, zachowując
własną treść. Z drugim argumentem tworzony jest jeden nowy plik.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from htmlsync import __version__
from htmlsync.commands import sync as cmd_sync

_EPILOG = """
Usage: htmlsync [options] source [new-file]
  <source>     The ".html" file with the header and footer you would like to synchronize
  [new-file]   Optional. If present a single new file will be created from the source

Zmienne środowiskowe (lub plik .env):
  HTMLSYNC_HEAD_TOKEN   znacznik nagłówka (domyślnie: @SyncTokenHead)
  HTMLSYNC_FOOT_TOKEN   znacznik stopki   (domyślnie: @SyncTokenFoot)
  HTMLSYNC_EXTENSION    rozszerzenie plików (domyślnie: .html)
  HTMLSYNC_ENCODING     kodowanie plików   (domyślnie: utf-8)

Przykłady:
  htmlsync index.html
  htmlsync index.html --show
  htmlsync index.html about.html
  htmlsync --dir site index.html
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlsync",
        description="htmlsync - Synchronize the HTML header and footer to all your HTML files",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    cmd_sync.add_arguments(parser)
    return parser


def main(argv: list[str] | None = None) -> None:
    cmd_sync.console.print(f"htmlsync v{__version__}")
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
