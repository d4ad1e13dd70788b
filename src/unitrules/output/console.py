"""Rich Console factory and theme for check reports.

Consoles render to a StringIO buffer so renderers return plain strings
the embedding tool can log or print. In non-TTY environments (tests,
pipes) Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from unitrules.domain.types import ViolationKind

REPORT_THEME = Theme(
    {
        "rules.ok": "bold green",
        "rules.error": "bold red",
        "rules.warning": "bold yellow",
        "rules.op": "bold cyan",
        "rules.section": "bold blue",
        "rules.directive": "bold",
        "rules.kind.unknown": "yellow",
        "rules.kind.type": "magenta",
        "rules.kind.value": "red",
        "rules.kind.predicate": "red",
        "rules.kind.required": "bold red",
    }
)

_KIND_STYLES: dict[str, str] = {
    ViolationKind.UNKNOWN_DIRECTIVE: "rules.kind.unknown",
    ViolationKind.TYPE_MISMATCH: "rules.kind.type",
    ViolationKind.VALUE_NOT_ALLOWED: "rules.kind.value",
    ViolationKind.PREDICATE_FAILED: "rules.kind.predicate",
    ViolationKind.MISSING_REQUIRED: "rules.kind.required",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width for stable output.
    """
    return Console(
        file=StringIO(),
        theme=REPORT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Theme style for a violation kind; empty for unknown kinds."""
    return _KIND_STYLES.get(kind, "")
