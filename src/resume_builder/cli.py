"""CLI interface using typer + rich."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from resume_builder.config import load_config
from resume_builder.pipeline.resume_generator import build_prompt, generate_resume
from resume_builder.templates.loader import ResourceNotFound, list_templates
from resume_builder.templates.renderer import find_placeholders

app = typer.Typer(
    name="resume-builder",
    help="Generate a structured resume from a short description using Gemini",
    no_args_is_help=True,
)
console = Console()


def _read_description(description: str | None, file: Path | None) -> str:
    if file is not None:
        if not file.exists():
            console.print(f"[red]Description file not found: {file}[/red]")
            raise typer.Exit(1)
        description = file.read_text(encoding="utf-8")
    if not description or not description.strip():
        console.print("[red]A description is required (argument or --file).[/red]")
        raise typer.Exit(1)
    return description.strip()


@app.command()
def generate(
    description: str = typer.Argument(None, help="Free-text description of your experience"),
    file: Path = typer.Option(None, "--file", "-f", help="Read the description from a text file"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the resume JSON to this path"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostic logging"),
) -> None:
    """Generate a resume and print it as JSON."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    text = _read_description(description, file)

    try:
        config = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(1)

    if verbose:
        console.print(f"[dim]Model: {config.gemini.model}[/dim]")
        console.print(f"[dim]Template: {config.prompt.template}[/dim]")
        console.print(f"[dim]Description: {len(text)} chars[/dim]")

    try:
        with console.status("Generating resume..."):
            result = generate_resume(text, config=config)
    except (ValueError, ResourceNotFound) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if not result.ok:
        console.print(Panel(Text(result.error), title="Resume generation failed", style="red"))
        raise typer.Exit(1)

    rendered = json.dumps(result.data, indent=2, ensure_ascii=False)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        console.print(f"[green]Resume saved: {output}[/green]")
    else:
        console.print(Syntax(rendered, "json"))


@app.command()
def prompt(
    description: str = typer.Argument(..., help="Free-text description of your experience"),
    template: str = typer.Option(None, "--template", "-t", help="Prompt template file name"),
) -> None:
    """Render the prompt that would be sent to Gemini, without calling it."""
    if template is None:
        try:
            template = load_config().prompt.template
        except ValueError as e:
            console.print(f"[red]Invalid configuration: {e}[/red]")
            raise typer.Exit(1)
    try:
        rendered = build_prompt(description, template)
    except ResourceNotFound as e:
        console.print(f"[red]{e}[/red]")
        console.print(f"[dim]Available: {', '.join(list_templates())}[/dim]")
        raise typer.Exit(1)

    leftover = find_placeholders(rendered)
    if leftover:
        console.print(f"[yellow]Unfilled placeholders: {', '.join(leftover)}[/yellow]")
    console.print(rendered, markup=False, highlight=False)


if __name__ == "__main__":
    app()
