"""Komenda: htmlsync <źródło> [nowy-plik] — synchronizacja nagłówka i stopki."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from data_model.documents import SourceParts
from htmlsync._config import Settings, load_settings
from htmlsync._files import create_document, list_candidates, read_document, write_document
from splicer import (
    RunContext,
    SourceError,
    SyncStatus,
    new_document_text,
    split_source,
    sync_documents,
)

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]> {escape(message)}[/red]")
    raise SystemExit(1)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(ctx: RunContext) -> None:
    if not ctx.results:
        console.print("[yellow]No files to synchronize.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("FILE",   no_wrap=True, style="bold cyan")
    table.add_column("STATUS", no_wrap=True)
    table.add_column("FOOTER", justify="center", no_wrap=True)

    for r in ctx.results:
        if r.status is SyncStatus.SYNCHRONIZED:
            status = "[green]synchronized[/green]"
            footer = "yes" if r.footer_synced else "-"
        else:
            status = "[yellow]token missing[/yellow]"
            footer = "-"
        table.add_row(escape(r.path.name), status, footer)

    console.print()
    console.print(table)
    console.print(
        f"  [dim]{ctx.synchronized} synchronized, {ctx.skipped} skipped[/dim]\n"
    )


# ---------------------------------------------------------------------------
# Tryby pracy
# ---------------------------------------------------------------------------

def _create_new_file(parts: SourceParts, new_path: Path, settings: Settings) -> None:
    try:
        create_document(new_path, new_document_text(parts), settings.encoding)
    except FileExistsError:
        _fail(f"New file already exists: {new_path}")
    except OSError as e:
        _fail(f"Cannot create new file {new_path}: {e}")
    console.print("> New HTML file created")


def _sync_directory(parts: SourceParts, source_path: Path, directory: Path, settings: Settings, ctx: RunContext) -> None:
    try:
        candidates = list_candidates(directory, settings.extension, source_path)
        documents = (read_document(p, settings.encoding) for p in candidates)
        for result in sync_documents(parts, documents, settings.tokens, source_path, ctx):
            name = escape(result.path.name)
            if result.changed:
                write_document(result.path, result.new_text, settings.encoding)
                console.print(f"> Synchronized file: {name}")
            else:
                console.print(f"> HTML file sync token missing: {name}")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"File error: {e}")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    if args.version:
        return  # baner z wersją wypisuje już main()

    try:
        settings = load_settings()
    except ValueError as e:
        _fail(str(e))

    if not args.source:
        _fail("Source file argument missing")

    directory = Path(args.dir)
    source_arg: str = args.source
    if not source_arg.endswith(settings.extension):
        _fail(f"Source file extension invalid: {source_arg}")

    source_path = directory / source_arg
    if not source_path.is_file():
        _fail(f"Source file not found: {source_arg}")

    console.print(f"> Source file: {escape(source_arg)}")

    new_path: Path | None = None
    if args.new_file:
        new_path = directory / args.new_file
        console.print(f"> Creating new HTML file: {escape(args.new_file)}")
        if new_path.exists():
            _fail(f"New file already exists: {args.new_file}")

    ctx = RunContext()

    try:
        source = read_document(source_path, settings.encoding)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read source file {source_arg}: {e}")

    try:
        parts = split_source(source.text, settings.tokens)
    except SourceError as e:
        _fail(str(e))

    if new_path is not None:
        _create_new_file(parts, new_path, settings)
    else:
        _sync_directory(parts, source_path, directory, settings, ctx)
        if args.show:
            _show_table(ctx)

    console.print(f"Run Time: {ctx.elapsed_ms():.0f}ms")


# ---------------------------------------------------------------------------
# Rejestracja argumentów
# ---------------------------------------------------------------------------

def add_arguments(parser: argparse.ArgumentParser) -> None:
    args = parser.add_argument_group("Arguments")
    args.add_argument(
        "source",
        nargs="?",
        metavar="source",
        help='Plik ".html" z nagłówkiem i stopką do synchronizacji.',
    )
    args.add_argument(
        "new_file",
        nargs="?",
        metavar="new-file",
        help="Opcjonalny. Jeśli podany, tworzony jest jeden nowy plik na bazie źródła.",
    )

    opts = parser.add_argument_group("Options")
    opts.add_argument(
        "-h", "--help",
        action="help",
        help="Wyświetl tę pomoc.",
    )
    opts.add_argument(
        "--version",
        action="store_true",
        help="Wyświetl wersję i zakończ.",
    )
    opts.add_argument(
        "--dir", "-d",
        metavar="KATALOG",
        default=".",
        help="Katalog z plikami HTML (domyślnie: bieżący).",
    )
    opts.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę wyników synchronizacji.",
    )
    parser.set_defaults(func=run)
