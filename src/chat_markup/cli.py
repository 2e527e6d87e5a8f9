"""Command-line interface for Chat Markup."""

import logging
from pathlib import Path
from typing import Optional, Union

import typer
from rich.console import Console
from rich.logging import RichHandler

from chat_markup import __version__
from chat_markup.config import get_settings, load_settings
from chat_markup.core.renderer import INPUT_EXTENSIONS, MessageRenderer, RenderError
from chat_markup.core.transcript import FormattedTranscript
from chat_markup.formats import ConsoleRenderer, JSONHandler
from chat_markup.formatting.ir import RenderedDocument

app = typer.Typer(
    name="chat-markup",
    help="Format chat message markup (bold, italic, code, strikethrough) for display.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Chat Markup v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich on stderr."""
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def display(
    result: Union[RenderedDocument, FormattedTranscript],
    as_json: bool,
) -> None:
    """Show a formatted result on stdout."""
    if as_json:
        handler = JSONHandler()
        if isinstance(result, FormattedTranscript):
            typer.echo(handler.render_transcript(result))
        else:
            typer.echo(handler.render(result))
        return

    renderer = ConsoleRenderer()
    if isinstance(result, FormattedTranscript):
        renderer.print_transcript(console, result)
    else:
        renderer.print(console, result)


def process(
    renderer: MessageRenderer,
    path: Optional[Path],
    text: Optional[str],
    output: Optional[Path],
    as_json: bool,
    verbose: bool,
) -> bool:
    """Format one input and write or display it. Returns True on success."""
    try:
        if text is not None:
            result = renderer.render_text(text)
        elif path is not None:
            if verbose:
                console.print(f"[blue]Processing:[/blue] {path}")
            result = renderer.load(path)
        else:
            result = renderer.render_text(typer.get_text_stream("stdin").read())

        if output is not None:
            renderer.write(result, output)
            console.print(f"[green]Success:[/green] {output}")
        else:
            display(result, as_json)
        return True
    except RenderError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        if verbose:
            err_console.print_exception()
        return False


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help=f"Message or transcript file ({', '.join(INPUT_EXTENSIONS)})",
    ),
    text: Optional[str] = typer.Option(
        None,
        "--text",
        "-t",
        help="Format this message text instead of reading a file",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file; the extension picks the format (.html, .md, .txt, .json, .docx)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print structured JSON instead of styled terminal output",
    ),
    persona: Optional[str] = typer.Option(
        None,
        "--persona",
        "-p",
        help="Display name for the persona in transcripts",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Load settings from this .env file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Format chat message markup for display.

    Examples:

        chat-markup message.txt

        chat-markup --text "**Hi** there, *friend*"

        chat-markup conversation.json --output conversation.html

        chat-markup conversation.json --persona Selena --json

        echo "~~old~~ new" | chat-markup
    """
    if env_file is not None:
        load_settings(env_file)
    setup_logging(verbose)

    if path is not None and text is not None:
        err_console.print(
            "[yellow]Warning:[/yellow] --text given, ignoring input file"
        )

    renderer = MessageRenderer(persona_name=persona)
    success = process(renderer, path, text, output, as_json, verbose)
    raise typer.Exit(0 if success else 1)


if __name__ == "__main__":
    app()
