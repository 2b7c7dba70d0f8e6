"""CLI entrypoint for change-scribe."""

import sys
from pathlib import Path

import click

from . import __version__
from .errors import ConfigError
from .log_setup import setup_logging


class ConfigurationError(click.ClickException):
    """Configuration problems exit with 2, distinct from lint failures (1)."""

    exit_code = 2

    def format_message(self) -> str:
        return f"Configuration error: {self.message}"


def _read_message(message: str, message_file: Path | None) -> str:
    if message_file is not None and message != "-":
        raise click.UsageError("Pass the message as MESSAGE or with --file, not both.")
    if message_file is not None:
        text = message_file.read_text(encoding="utf-8")
    elif message == "-":
        text = click.get_text_stream("stdin").read()
    else:
        return message
    # Files and pipes end with a newline that is not part of the message
    return text.rstrip("\n")


@click.group()
@click.version_option(__version__, prog_name="change-scribe")
@click.option("--verbose", is_flag=True, help="Enable debug logging on stderr")
def cli(verbose: bool) -> None:
    """change-scribe - Lint commit messages against the conventional commit format.

    The message is parsed as `type(scope)!: subject`, optional body and
    footers, and then checked against the policy in change-scribe.toml.
    """
    setup_logging(is_verbose=verbose)


@cli.command()
@click.argument("message", required=False, default="-")
@click.option(
    "--file",
    "-F",
    "message_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the message from a file instead of MESSAGE/stdin",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file merged over any discovered change-scribe.toml / .change-scribe.toml.",
)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output results as JSON",
)
@click.option(
    "--rule",
    "rule_ids",
    multiple=True,
    metavar="RULE_ID",
    help="Only run this rule. Repeatable.",
)
@click.option(
    "--explain",
    "explain_rule",
    type=str,
    default=None,
    metavar="RULE_ID",
    help="Explain a specific rule and exit (e.g., --explain scope-required)",
)
def lint(
    message: str,
    message_file: Path | None,
    config_path: Path | None,
    output_json: bool,
    rule_ids: tuple[str, ...],
    explain_rule: str | None,
) -> None:
    """Lint a commit message.

    MESSAGE is the commit message text; pass '-' (the default) to read it
    from stdin.

    Exits with 0 when the message is valid, 1 when it cannot be parsed or
    violates the policy, and 2 when the configuration is invalid.
    """
    from .commands.lint import run_explain, run_lint
    from .rules import get_rule_ids

    if explain_rule:
        sys.exit(run_explain(explain_rule))

    unknown = sorted(set(rule_ids) - set(get_rule_ids()))
    if unknown:
        raise click.BadParameter(f"Unknown rule(s): {', '.join(unknown)}", param_hint="--rule")

    text = _read_message(message, message_file)

    try:
        exit_code = run_lint(
            text,
            config_path=config_path,
            output_json=output_json,
            rule_ids=set(rule_ids) or None,
        )
    except ConfigError as e:
        raise ConfigurationError(str(e)) from e

    sys.exit(exit_code)


@cli.command("rules")
def list_rules() -> None:
    """List all lint rules."""
    from .commands.lint import run_list_rules

    sys.exit(run_list_rules())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
