"""prefixcalc scorer — runs programs under every strategy and renders the comparison.

Each program is evaluated once per strategy. A Comparison agrees when all
strategies produced the same value or the same error classification.
"""

from __future__ import annotations

import json
from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from prefixcalc.models import ALL_STRATEGIES, Comparison, Err, EvalResult
from prefixcalc.parser import make_parser

_STRATEGY_STYLES = {
    "exceptions": "cyan",
    "results": "green",
}


def compare_program(program: str) -> Comparison:
    """Evaluate one program under every strategy."""
    results = {
        strategy.value: make_parser(strategy).evaluate(program)
        for strategy in ALL_STRATEGIES
    }
    return Comparison(program=program, results=results)


def compare_corpus(programs: Iterable[str]) -> list[Comparison]:
    """Compare every program, preserving input order."""
    return [compare_program(p) for p in programs]


def _fmt_result(r: EvalResult) -> str:
    if isinstance(r, Err):
        return f"[red]{r.kind.value}[/red]"
    return str(r.value)


def _fmt_program(program: str, width: int = 40) -> str:
    """Show whitespace escapes and cut long programs."""
    shown = repr(program)[1:-1]
    if len(shown) > width:
        shown = shown[: width - 3] + "..."
    return escape(shown)


def render_comparisons(comparisons: list[Comparison], console: Console) -> None:
    """Render a Rich table with one row per program and one column per strategy."""
    if not comparisons:
        console.print("[yellow]No programs to compare.[/yellow]")
        return

    table = Table(
        title="Strategy comparison",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Program", min_width=16)
    for strategy in ALL_STRATEGIES:
        table.add_column(
            strategy.value,
            style=_STRATEGY_STYLES.get(strategy.value, "white"),
            justify="right",
            min_width=12,
        )
    table.add_column("Agree", justify="center")

    for i, c in enumerate(comparisons, 1):
        cells = [_fmt_result(c.results[s.value]) for s in ALL_STRATEGIES]
        agree = "[green]yes[/green]" if c.agree else "[bold red]NO[/bold red]"
        table.add_row(str(i), _fmt_program(c.program), *cells, agree)

    console.print()
    console.print(table)

    mismatches = sum(1 for c in comparisons if not c.agree)
    if mismatches:
        console.print(f"[bold red]{mismatches}/{len(comparisons)} programs disagree[/bold red]")
    else:
        console.print(f"[green]All {len(comparisons)} programs agree.[/green]")
    console.print()


def comparisons_to_json(comparisons: list[Comparison]) -> str:
    """Serialize comparisons as an indented JSON array."""
    return json.dumps([c.to_dict() for c in comparisons], indent=2)
