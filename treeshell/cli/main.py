"""Entry point for the treeshell demo shell."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from treeshell.cli.app import ShellApp
from treeshell.cli.arg_parser import parse_args
from treeshell.cli.logging_setup import configure_logging
from treeshell.cli.output import print_error
from treeshell.commands.builtins import LOG_LEVELS
from treeshell.commands.node import CommandNode
from treeshell.commands.protocol import CommandOutput, ExecutionContext
from treeshell.config.loader import load_config
from treeshell.config.schema import ShellConfig
from treeshell.core.constants import VERSION
from treeshell.core.errors import ConfigError, MissingArgumentError


def _demo_echo(ctx: ExecutionContext, args: list[str]) -> CommandOutput:
    if not args:
        raise MissingArgumentError()
    return CommandOutput.success(message=" ".join(args))


def _demo_count(
    ctx: ExecutionContext, args: list[str], counter: dict[str, int]
) -> CommandOutput:
    counter["calls"] += 1
    return CommandOutput.success(
        message=f"count called {counter['calls']} time(s)",
        data=dict(counter),
    )


def build_demo_app(config: ShellConfig | None = None) -> ShellApp:
    """Builtins plus a small `demo` namespace."""
    app = ShellApp("treeshell", version=VERSION, author="treeshell", config=config)
    app.add_command(CommandNode(name="demo", about="sample commands"))
    app.add_command_under(
        ["demo"],
        CommandNode(
            name="echo",
            aliases=("e",),
            about="prints its arguments",
            usage="demo echo <text...>",
            handler=_demo_echo,
        ),
    )
    app.add_command_under(
        ["demo"],
        CommandNode(
            name="count",
            about="counts its own invocations",
            usage="demo count",
            handler=_demo_count,
        ),
        user_data={"calls": 0},
    )
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the treeshell CLI."""
    args = parse_args(argv)

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as e:
        print_error(e.message)
        sys.exit(1)

    level = logging.DEBUG if args.verbose else LOG_LEVELS[config.log_level]
    log_file = args.log_file or config.log_file
    configure_logging(level, Path(log_file) if log_file else None)

    build_demo_app(config).run()


if __name__ == "__main__":
    main()
