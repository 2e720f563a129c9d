"""CLI interface for Tariff Search."""

import json
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain import Document
from ....core.domain.exceptions import EmptyKeywordError, MissingSearchCriteriaError
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="tariff-search",
    help="Search indexed tariff documents and download them as PDFs",
    add_completion=False,
)

console = Console()

# DEBUG=true prints the whole error payload instead of a one-line summary
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"

SORT_HELP = "Sort order: relevance, filename or pagecount"


def handle_cli_error(exc: Exception) -> None:
    """Display an error with its code; the full JSON only in debug mode."""
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2),
                title=f"[bold red]{error_data['error']['code']}[/]",
                border_style="red",
            )
        )
        return

    error_code = error_data["error"].get("code", "UNKNOWN")
    console.print(f"\n[red]Error [{error_code}]:[/] {error_data['error']['message']}")
    console.print(f"[dim]Type: {error_data['error']['type']}[/]")
    console.print("[dim]Set DEBUG=true for full details[/]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Search indexed tariff documents and download them as PDFs."""
    if verbose or log_file:
        setup_logging(
            level="DEBUG" if verbose else settings.log_level,
            log_file=log_file,
            json_format=settings.log_json,
        )


def _print_results(documents: list[Document]) -> None:
    if not documents:
        console.print("[yellow]No matching documents.[/]")
        return

    table = Table(title=f"{len(documents)} document(s)")
    table.add_column("Id", style="dim")
    table.add_column("File name", style="bold")
    table.add_column("Author")
    table.add_column("Title")
    table.add_column("Pages", justify="right")

    for doc in documents:
        table.add_row(doc.id, doc.file_name, doc.author, doc.title, str(doc.page_count))

    console.print(table)


@app.command()
def search(
    filename: str | None = typer.Option(None, help="Fuzzy match on the file name"),
    author: str | None = typer.Option(None, help="Fuzzy match on author or creator"),
    content: str | None = typer.Option(None, help="Fuzzy match on text, title or subject"),
    sort_by: str = typer.Option("relevance", "--sort-by", help=SORT_HELP),
) -> None:
    """Search documents by specific fields."""
    from ..api.deps import get_search_service

    try:
        if not any(value and value.strip() for value in (filename, author, content)):
            raise MissingSearchCriteriaError("At least one search parameter is required.")

        with console.status("[bold green]Searching...[/]"):
            documents = get_search_service().search_documents(filename, author, content, sort_by)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    _print_results(documents)


@app.command("search-all")
def search_all(
    keyword: str = typer.Argument(..., help="Keyword matched against every searchable field"),
    sort_by: str = typer.Option("relevance", "--sort-by", help=SORT_HELP),
) -> None:
    """Search a keyword across all searchable fields."""
    from ..api.deps import get_search_service

    try:
        if not keyword.strip():
            raise EmptyKeywordError("Keyword is required.")

        with console.status("[bold green]Searching...[/]"):
            documents = get_search_service().search_all_fields(keyword, sort_by)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    _print_results(documents)


@app.command()
def download(
    document_id: str = typer.Argument(..., help="Id of the document to render"),
    output: Path = typer.Option(Path("."), "--output", "-o", help="Directory for the PDF"),
) -> None:
    """Render a document as a PDF and save it."""
    from ..api.deps import get_download_service

    try:
        rendered = get_download_service().render(document_id)
        output.mkdir(parents=True, exist_ok=True)
        target = output / rendered.filename
        target.write_bytes(rendered.content)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"[green]Saved[/] {target} ({len(rendered.content)} bytes)")


@app.command()
def status() -> None:
    """Show configuration and check the document store connection."""
    from ..api.deps import get_document_store

    console.print("[bold]Tariff Search Status[/]\n")
    console.print(f"  Database: {settings.mongo_database_name}")
    console.print(f"  Primary collection: {settings.mongo_collection_name}")
    console.print(f"  Searchable fields: {', '.join(settings.searchable_fields)}")

    try:
        reachable = get_document_store().ping()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if reachable:
        console.print("\n[green]Document store reachable[/]")
    else:
        console.print("\n[red]Document store unreachable[/]")
        raise typer.Exit(1)


@app.command()
def serve(
    host: str = typer.Option(settings.api_host, help="Interface to bind"),
    port: int = typer.Option(settings.api_port, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "tariff_search.adapters.inbound.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
