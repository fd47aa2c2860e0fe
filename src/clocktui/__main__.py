"""CLI entry point for clocktui."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from clocktui import __version__
from clocktui.paths import get_config_path

if TYPE_CHECKING:
    from clocktui.config import ClockConfig


def _load_config(config_path: Path | None, **overrides: object) -> ClockConfig:
    from clocktui.config import ClockConfig, ConfigError

    try:
        return ClockConfig.load(config_path).with_overrides(**overrides)
    except ConfigError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Animated terminal clock."""
    if version:
        click.echo(f"clocktui {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@cli.command()
@click.option("--format", "-f", "format_spec", default=None, help="strftime-style format")
@click.option("--timing", type=int, default=None, help="Transition duration (ms)")
@click.option("--logic-interval", type=int, default=None, help="Clock sampling interval (ms)")
@click.option("--render-interval", type=int, default=None, help="Animation frame interval (ms)")
@click.option("--classic", is_flag=True, default=None, help="Six digit HH MM SS layout")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml",
)
def tui(
    format_spec: str | None,
    timing: int | None,
    logic_interval: int | None,
    render_interval: int | None,
    classic: bool | None,
    config_path: Path | None,
) -> None:
    """Run the clock (default command)."""
    config = _load_config(
        config_path,
        format_spec=format_spec,
        transition_timing=timing,
        logic_tick_interval=logic_interval,
        render_tick_interval=render_interval,
        classic=classic or None,
    )

    from clocktui.app import ClockApp

    app = ClockApp(config)
    app.run()
    sys.exit(app.return_code or 0)


@cli.command()
@click.option("--format", "-f", "format_spec", default=None, help="strftime-style format")
@click.option("--classic", is_flag=True, default=None, help="Six digit HH MM SS layout")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml",
)
def blocks(format_spec: str | None, classic: bool | None, config_path: Path | None) -> None:
    """Show how a format is split into animated blocks."""
    from clocktui.core.tokenizer import tokenize

    config = _load_config(config_path, format_spec=format_spec, classic=classic or None)
    spec = tokenize(config.effective_format, config.timing.transition_timing)

    click.secho(f"Format: {spec.format_spec!r}", bold=True)
    click.echo(f"Now:    {spec.current_text()!r}")
    click.echo()
    for fragment, layout in spec.partition():
        if not layout:
            click.echo(f"  {fragment!r:<12} " + click.style("(not renderable)", fg="yellow"))
            continue
        cells = " ".join(
            click.style(f"{'const' if constant else 'anim'}:{size}", dim=constant)
            for constant, size in layout
        )
        click.echo(f"  {fragment!r:<12} {cells}")


@cli.group()
def config() -> None:
    """Manage the config file."""


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml",
)
def config_init(force: bool, config_path: Path | None) -> None:
    """Write a config file with default values."""
    from clocktui.config import ClockConfig

    path = config_path or get_config_path()
    if path.exists() and not force:
        click.secho(f"Config already exists: {path}", fg="yellow")
        click.echo("Use --force to overwrite.")
        sys.exit(1)

    written = ClockConfig().save(path)
    click.secho(f"Wrote {written}", fg="green")


@config.command("show")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml",
)
def config_show(config_path: Path | None) -> None:
    """Print the effective configuration as TOML."""
    path = config_path or get_config_path()
    loaded = _load_config(path)
    source = str(path) if path.exists() else f"{path} (not found, using defaults)"
    click.secho(f"# {source}", dim=True)
    click.echo(loaded.to_toml(), nl=False)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
