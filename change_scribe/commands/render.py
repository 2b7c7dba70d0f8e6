"""Terminal rendering of diagnostics against the commit message source."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from ..rules import LintResult


def locate(source: str, offset: int) -> tuple[int, int, str]:
    """Map a character offset to (1-based line, 0-based column, line text)."""
    offset = max(0, min(offset, len(source)))
    line_start = source.rfind("\n", 0, offset) + 1
    line_end = source.find("\n", offset)
    if line_end == -1:
        line_end = len(source)
    line_no = source.count("\n", 0, offset) + 1
    return line_no, offset - line_start, source[line_start:line_end]


def format_result(result: LintResult) -> Text:
    """Build the rich Text for one diagnostic.

    The offending line is echoed with a gutter, followed by a marker row that
    underlines the span (clipped to that line) and carries the label.
    """
    line_no, column, line_text = locate(result.source, result.span.offset)
    # Zero-length spans get a single caret
    width = max(1, min(result.span.length, len(line_text) - column))
    gutter = " " * len(str(line_no))

    text = Text()
    text.append(f"{result.level}[{result.rule}]", style="bold red" if result.level == "error" else "yellow")
    text.append(f": {result.message}\n", style="bold")
    text.append(f" {gutter} ╭─[{line_no}:{column + 1}]\n", style="dim")
    text.append(f" {line_no} │ ", style="dim")
    text.append(f"{line_text}\n")
    text.append(f" {gutter} · ", style="dim")
    text.append(" " * column)
    text.append("^" * width, style="bold magenta")
    text.append(f" {result.label}", style="magenta")
    if result.help:
        text.append("\n")
        text.append("  help: ", style="cyan")
        text.append(result.help)
    return text


def print_results(console: Console, results: list[LintResult]) -> None:
    for result in results:
        console.print(format_result(result), highlight=False)
        console.print()
