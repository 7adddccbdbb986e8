"""Main CLI application wiring for memocalc.

  memocalc              interactive REPL (same as `memocalc repl`)
  memocalc repl         interactive REPL
  memocalc tui          full-screen Textual UI

--config works before or after the subcommand.
"""

import sys
from pathlib import Path
from typing import Optional

import typer

from memocalc.config import CalcConfig, ConfigError, configure_logging, load_config

app = typer.Typer(add_completion=False, help="memocalc: calculator with undo/redo")

CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to config.yml")


def _load(ctx: typer.Context, config: Optional[Path]) -> CalcConfig:
    try:
        cfg = load_config(config or ctx.obj)
    except ConfigError as e:
        print(str(e))
        sys.exit(1)
    configure_logging(cfg)
    return cfg


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context, config: Optional[Path] = CONFIG_OPTION):
    """memocalc CLI."""
    ctx.obj = config
    if ctx.invoked_subcommand is None:
        from memocalc.cli.repl import run_repl

        run_repl(_load(ctx, None))


@app.command()
def repl(ctx: typer.Context, config: Optional[Path] = CONFIG_OPTION):
    """Start the interactive calculator."""
    from memocalc.cli.repl import run_repl

    run_repl(_load(ctx, config))


@app.command()
def tui(ctx: typer.Context, config: Optional[Path] = CONFIG_OPTION):
    """Launch the memocalc TUI."""
    from memocalc.tui.app import CalcApp

    _load(ctx, config)
    CalcApp().run()
