from __future__ import annotations

from pathlib import Path

import typer

from . import app as _app
from .config import Settings
from .plugin import UTTERANCES, PersonalPlugin
from .state.store import PersonalStore

app = typer.Typer(help="Personal information voice plugin")


def _settings(data_file: Path | None) -> Settings:
    overrides: dict[str, object] = {}
    if data_file is not None:
        overrides["data_file"] = data_file
    return Settings(**overrides)


@app.command()
def ask(
    text: str = typer.Argument(..., help="Utterance to answer"),
    bot_serial: str = typer.Option("cli", help="Caller id passed to the plugin"),
    guid: str = typer.Option("", help="Session id passed to the plugin"),
    target: str = typer.Option("console", help="Target passed to the plugin"),
    data_file: Path | None = typer.Option(None, help="Personal data JSON file"),
    verbose: bool = typer.Option(False, help="Print effective settings"),
) -> None:
    """Answer a single utterance."""
    settings = _settings(data_file)
    if verbose:
        typer.echo(settings.model_dump_json(indent=2))
    plugin = PersonalPlugin.from_settings(settings)
    intent, response = plugin.action(text, bot_serial, guid, target)
    typer.echo(f"[{intent}] {response}")


@app.command()
def show(
    data_file: Path | None = typer.Option(None, help="Personal data JSON file"),
) -> None:
    """Print the stored record."""
    store = PersonalStore(_settings(data_file).data_file)
    store.load()
    typer.echo(store.snapshot().to_json())


@app.command()
def utterances() -> None:
    """Print the example trigger utterances."""
    for utterance in UTTERANCES:
        typer.echo(utterance)


@app.command()
def chat(
    data_file: Path | None = typer.Option(None, help="Personal data JSON file"),
) -> None:
    """Answer utterances read from stdin until EOF or 'quit'."""
    _app.run(settings=_settings(data_file), echo=typer.echo)


if __name__ == "__main__":  # pragma: no cover
    app()
