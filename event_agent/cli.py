#!/usr/bin/env python3
"""
CLI do agente de extração de eventos
"""

import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from event_agent.config import settings
from event_agent.errors import ExtractionError
from event_agent.extraction.models import ExtractionResult

app = typer.Typer(
    name="event-agent",
    help="🔎 Extrai eventos de marketing a partir de uma URL",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()


def setup_logging(log_level: str = "INFO") -> None:
    """Setup logging configuration with Rich handler"""
    logging.getLogger().handlers.clear()
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def show_result(result: ExtractionResult) -> None:
    data, meta = result.data, result.meta

    table = Table(title=f"📅 {data.title}", show_header=False)
    table.add_column("Campo", style="cyan")
    table.add_column("Valor", style="green")

    for name, value in data.model_dump(mode="json").items():
        if name == "description":
            value = (value[:120] + "...") if value and len(value) > 120 else value
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(name, "-" if value in (None, "") else str(value))

    console.print(table)

    colors = {"high": "green", "medium": "yellow", "low": "red"}
    color = colors[meta.confidence.value]
    console.print(Panel(
        f"Confiança: [bold {color}]{meta.confidence.value}[/bold {color}]\n"
        f"JSON-LD: {'✅' if meta.has_jsonld else '❌'}   "
        f"Open Graph: {'✅' if meta.has_og_tags else '❌'}\n"
        f"Fonte: {meta.source_url}",
        title="🎯 Meta",
        border_style=color,
    ))


@app.command()
def extract(
    url: str,
    as_json: bool = typer.Option(False, "--json", help="Imprime o resultado como JSON"),
    log_level: str = "INFO",
):
    """Extrai o evento de uma URL e mostra o registro validado"""
    from event_agent.extraction.pipeline import create_extraction_pipeline

    setup_logging(log_level)
    pipeline = create_extraction_pipeline(settings)
    try:
        result = pipeline.extract_sync(url)
    except ExtractionError as e:
        console.print(Panel(
            f"{e.message}\n\n[dim]Preencha o formulário manualmente.[/dim]",
            title=f"❌ {e.error_code}",
            border_style="bold red",
        ))
        raise typer.Exit(1)
    finally:
        pipeline.cleanup()

    if as_json:
        console.print_json(json.dumps(result.model_dump(mode="json"), ensure_ascii=False))
    else:
        show_result(result)


@app.command()
def serve(
    host: str = settings.HOST,
    port: int = settings.PORT,
    reload: bool = settings.RELOAD,
):
    """Sobe a API de extração com uvicorn"""
    import uvicorn

    uvicorn.run(
        "event_agent.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload
    )


if __name__ == "__main__":
    app()
