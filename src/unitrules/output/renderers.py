"""Rich and JSON rendering of check results.

``render_result`` draws a violation table for failed checks and lists
policy warnings; ``format_result`` picks between that and JSON.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from unitrules.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from unitrules.services.result import ServiceResult


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult as JSON or as a human-readable report."""
    if json_output:
        return result.model_dump_json(indent=2)
    return render_result(result)


def render_result(result: ServiceResult, *, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        console.print(Text.assemble(("OK", "rules.ok"), " ", (result.op, "rules.op")))
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            Text.assemble(("FAILED", "rules.error"), " ", (result.op, "rules.op"), f": {message}")
        )
        violations: list[dict[str, Any]] = result.data.get("violations", [])
        if violations:
            console.print(_violation_table(violations))

    _render_warnings(result.warnings, console)
    return get_output(console).rstrip("\n")


def _violation_table(violations: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold", expand=False)
    table.add_column("Kind")
    table.add_column("Section", style="rules.section")
    table.add_column("Directive", style="rules.directive")
    table.add_column("Message")
    for item in violations:
        kind = str(item.get("kind", ""))
        table.add_row(
            Text(kind, style=style_for_kind(kind)),
            str(item.get("section", "")),
            str(item.get("directive", "")),
            str(item.get("message", "")),
        )
    return table


def _render_warnings(warnings: list[str], console: Console) -> None:
    for warning in warnings:
        console.print(Text.assemble(("warning", "rules.warning"), f": {warning}"))
