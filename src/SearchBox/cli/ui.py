"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their runner.
"""

from __future__ import annotations

from pathlib import Path

import click

from SearchBox.cli.runner import CommandRunner
from SearchBox.config import load_config_with_defaults


@click.group(help="SearchBox: parse search box input into structured formulas.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    envvar="SEARCHBOX_CONFIG",
    help="YAML config file layered over config/default.yml (if present).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Optional YAML config file merged over the defaults file.
    """
    try:
        ctx.obj = load_config_with_defaults(config_path)
    except (TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid config: {e}") from e


@cli.command("parse")
@click.argument("text", nargs=-1)
@click.option("-k", "--keyword", "keywords", multiple=True, help="Recognized key (repeatable, replaces config).")
@click.option(
    "--format",
    "formats",
    multiple=True,
    type=click.Choice(["console", "json"], case_sensitive=False),
    help="Output format (repeatable, replaces config).",
)
@click.pass_context
def parse_cmd(ctx: click.Context, text: tuple[str, ...], keywords: tuple[str, ...], formats: tuple[str, ...]) -> None:
    """Parse TEXT, or every non-blank stdin line when TEXT is omitted.

    Args:
        ctx: Click context.
        text: Words of one query, joined with spaces.
        keywords: Keyword overrides.
        formats: Output format overrides.

    Raises:
        click.Abort: When parsing fails.
    """
    try:
        cfg = ctx.obj.with_overrides(keywords=keywords or None, formats=formats or None)
    except (TypeError, ValueError) as e:
        raise click.BadParameter(str(e)) from e

    if text:
        inputs = [" ".join(text)]
    else:
        inputs = [line.rstrip("\r\n") for line in click.get_text_stream("stdin") if line.strip()]

    CommandRunner(cfg).run_parse(inputs, action=ctx.command.name)
