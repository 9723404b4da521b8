"""Human-readable rendering of validation failures."""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.table import Table

from .constraints.schema import ConstraintViolation


def failures_to_string(violations: Iterable[ConstraintViolation]) -> str:
    lines = [f" - Variable `{v.variable}` failed constraint: {v.reason}" for v in violations]
    return "\n".join(lines)


def print_violations(
    violations: list[ConstraintViolation],
    console: Console | None = None,
    *,
    title: str = "Validation Summary",
) -> int:
    """Print violations and a summary table.

    Returns:
        Exit code (0 = no violations, 1 = violations found)
    """
    console = console or Console(stderr=True)

    for v in violations:
        console.print(f"ERROR: [{v.variable}] {v.reason}", style="bold red", markup=False)

    console.print()

    table = Table(title=title, show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Failing variables", str(len({v.variable for v in violations})))
    table.add_row("Violations", str(len(violations)))
    console.print(table)

    console.print()
    if violations:
        console.print(f"❌ {len(violations)} violation(s)", style="bold red")
        return 1
    console.print("✓ All constraints satisfied", style="bold green")
    return 0
