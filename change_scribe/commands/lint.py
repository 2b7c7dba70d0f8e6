"""Lint command implementation."""

import json
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from ..config import load_policy
from ..engine import lint_message
from ..errors import ParseError
from ..rules import RULE_EXPLANATIONS, LintResult, get_rule_ids, parse_error_result
from .render import print_results


def run_lint(
    message: str,
    config_path: Path | None = None,
    output_json: bool = False,
    cwd: Path | None = None,
    rule_ids: set[str] | None = None,
) -> int:
    """Lint a single commit message.

    Args:
        message: Raw commit message text
        config_path: Explicit configuration file, merged over discovered ones
        output_json: Output results as JSON instead of human-readable
        cwd: Directory to discover configuration files in (defaults to CWD)
        rule_ids: Only run these rules (all rules when None)

    Returns:
        Exit code (0 = clean, 1 = parse failure or violations found)

    Raises:
        ConfigError: if the configuration cannot be loaded. This is left to
            the caller so it is never reported as a lint violation.
    """
    console = Console(stderr=True)
    policy = load_policy(config_path, cwd=cwd)

    try:
        outcome = lint_message(message, policy, allowed_rule_ids=rule_ids)
    except ParseError as e:
        result = parse_error_result(e)
        if output_json:
            _output_json(None, [result])
        else:
            print_results(console, [result])
            console.print("✗ Commit message could not be parsed", style="bold red")
        return 1

    if output_json:
        _output_json(outcome.commit.to_dict(), outcome.results)
    else:
        print_results(console, outcome.results)
        if outcome.clean:
            console.print("✓ Commit message is valid", style="bold green")
        else:
            console.print(f"✗ {len(outcome.results)} error(s)", style="bold red")

    return 0 if outcome.clean else 1


def _output_json(commit: dict | None, results: list[LintResult]) -> None:
    output = {
        "ok": not results,
        "commit": commit,
        "diagnostics": [r.to_dict() for r in results],
    }
    print(json.dumps(output, indent=2))


def run_explain(rule_id: str) -> int:
    """Explain a specific lint rule.

    Args:
        rule_id: Rule ID to explain

    Returns:
        Exit code (0 = success, 1 = rule not found)
    """
    console = Console()

    rule_id = rule_id.lower().strip()

    if rule_id not in RULE_EXPLANATIONS:
        console.print(f"Unknown rule: {rule_id}", style="bold red")
        console.print()
        console.print("Known rules:", style="bold")
        for rid in get_rule_ids():
            console.print(f"  - {rid}")
        return 1

    console.print(Markdown(f"# {rule_id}\n{RULE_EXPLANATIONS[rule_id]}"))
    return 0


def run_list_rules() -> int:
    """Print every rule ID with the first line of its explanation."""
    console = Console()

    table = Table(title="Lint Rules", show_header=True)
    table.add_column("Rule", style="cyan")
    table.add_column("Summary")

    for rule_id in get_rule_ids():
        summary = RULE_EXPLANATIONS[rule_id].strip().split("\n")[0].strip()
        table.add_row(rule_id, summary)

    console.print(table)
    return 0
