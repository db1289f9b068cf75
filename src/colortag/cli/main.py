# topmark:header:start
#
#   project      : ColorTag
#   file         : main.py
#   file_relpath : src/colortag/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag Click CLI: a root group with shared state and thin subcommands.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- The colour policy is resolved once per invocation and handed to a
  `TagConsole`, which every subcommand uses for output.
- `ColortagGroup` reports CLI errors through that console and turns any other
  exception into `ColortagUnexpectedError` (exit code 70).
"""

from __future__ import annotations

from typing import Any

import click

from colortag.cli.commands.colors import colors_command
from colortag.cli.commands.policy import policy_command
from colortag.cli.commands.render import render_command
from colortag.cli.commands.say import say_command
from colortag.cli.commands.strip import strip_command
from colortag.cli.commands.version import version_command
from colortag.cli.console import TagConsole
from colortag.cli.errors import ColortagCliError, ColortagUnexpectedError
from colortag.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_cli_policy,
    resolve_verbosity,
)
from colortag.config.logging import get_logger, resolve_env_log_level, setup_logging
from colortag.rendering.policy import ColorMode

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    policy = resolve_cli_policy(color_mode, no_color)
    logger.debug("CLI colour policy: %s (source: %s)", policy.mode.value, policy.source)
    ctx.obj["policy"] = policy
    ctx.color = policy.enabled

    ctx.obj["console"] = TagConsole(policy=policy, verbosity_level=ctx.obj["verbosity_level"])


class ColortagGroup(click.Group):
    """Root group that routes errors to the invocation's `TagConsole`."""

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the group, attaching the console to CLI errors on the way out.

        Raises:
            ColortagCliError: Re-raised with ``console`` set when one exists.
            ColortagUnexpectedError: For any exception Click would not handle itself.
        """
        try:
            return super().invoke(ctx)
        except ColortagCliError as exc:
            exc.console = _console_of(ctx)
            raise
        except (
            click.exceptions.ClickException,
            click.exceptions.Exit,
            click.exceptions.Abort,
            EOFError,
        ):
            raise
        except Exception as exc:
            logger.debug("Unexpected error", exc_info=True)
            wrapped = ColortagUnexpectedError(f"Unexpected error: {exc!r}")
            wrapped.console = _console_of(ctx)
            raise wrapped from exc


def _console_of(ctx: click.Context) -> TagConsole | None:
    if isinstance(ctx.obj, dict):
        return ctx.obj.get("console")
    return None


@click.group(
    cls=ColortagGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ColorTag CLI: render #NAME# colour markup.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ColorTag CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: TagConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'colortag render TEXT' to render markup.")
        console.print()
        click.echo(ctx.get_help(), file=console.out)


cli.add_command(render_command)

cli.add_command(strip_command)

cli.add_command(say_command)

cli.add_command(colors_command)

cli.add_command(policy_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
