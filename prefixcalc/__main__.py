"""CLI for the prefixcalc evaluator.

Usage:
    python -m prefixcalc eval "+ 3 4"                  # Print the value (errors print 0)
    python -m prefixcalc eval -f input.ok              # Program from a file's first line
    python -m prefixcalc check "(+ 1 2 x"              # Print ok <value> / error <kind>
    python -m prefixcalc compare "+ 3" "& 1 2"         # Both strategies side by side
    python -m prefixcalc compare -f corpus.txt --json  # Machine-readable comparison
    python -m prefixcalc repl                          # One program per line until EOF

Programs starting with '-' must follow a '--' separator:
    python -m prefixcalc eval -- "- 10 (/ 20 4)"
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from prefixcalc.corpus import load_corpus, load_program
from prefixcalc.environment import resolve_strategy
from prefixcalc.models import Err
from prefixcalc.parser import Parser, make_parser
from prefixcalc.scorer import compare_corpus, comparisons_to_json, render_comparisons

app = typer.Typer(
    name="prefixcalc",
    help="Prefix-notation integer calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)

_STRATEGY_HELP = "Error strategy: exceptions, results (default: $PREFIXCALC_STRATEGY or results)"


def _parser_for(strategy: Optional[str]) -> Parser:
    try:
        return make_parser(resolve_strategy(strategy))
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _read_program(program: Optional[str], file: Optional[Path]) -> str:
    """Exactly one of the PROGRAM argument or --file must be given."""
    if (program is None) == (file is None):
        console.print("[red]Give either a PROGRAM argument or --file, not both or neither.[/red]")
        raise typer.Exit(1)
    if file is None:
        return program
    try:
        return load_program(file)
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot read {file}: {e.strerror or e}")
        raise typer.Exit(1)


@app.command("eval")
def cmd_eval(
    program: Optional[str] = typer.Argument(None, help="Program text, e.g. '+ 3 4'"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the program from the first line of FILE"),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help=_STRATEGY_HELP),
) -> None:
    """Evaluate a program and print its value. Malformed programs print 0."""
    parser = _parser_for(strategy)
    text = _read_program(program, file)
    try:
        value = parser.execute(text)
    except ZeroDivisionError:
        console.print("[red]Error:[/red] division by zero")
        raise typer.Exit(1)
    typer.echo(value)


@app.command("check")
def cmd_check(
    program: Optional[str] = typer.Argument(None, help="Program text, e.g. '(+ 1 2 x'"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the program from the first line of FILE"),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help=_STRATEGY_HELP),
) -> None:
    """Print the classification: 'ok <value>' or 'error <kind>' (exit code 2)."""
    parser = _parser_for(strategy)
    text = _read_program(program, file)
    try:
        result = parser.evaluate(text)
    except ZeroDivisionError:
        console.print("[red]Error:[/red] division by zero")
        raise typer.Exit(1)
    if isinstance(result, Err):
        typer.echo(f"error {result.kind.value}")
        raise typer.Exit(2)
    typer.echo(f"ok {result.value}")


@app.command("compare")
def cmd_compare(
    programs: Optional[List[str]] = typer.Argument(None, help="Programs to compare"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Corpus file, one program per line"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON to stdout instead of a table"),
) -> None:
    """Run programs under every strategy and check they agree."""
    corpus = list(programs or [])
    if file is not None:
        try:
            corpus.extend(load_corpus(file))
        except OSError as e:
            console.print(f"[red]Error:[/red] cannot read {file}: {e.strerror or e}")
            raise typer.Exit(1)
    if not corpus:
        console.print("[red]Nothing to compare.[/red] Pass programs or --file.")
        raise typer.Exit(1)

    try:
        comparisons = compare_corpus(corpus)
    except ZeroDivisionError:
        console.print("[red]Error:[/red] division by zero in corpus")
        raise typer.Exit(1)

    if as_json:
        typer.echo(comparisons_to_json(comparisons))
    else:
        render_comparisons(comparisons, console)

    if not all(c.agree for c in comparisons):
        raise typer.Exit(1)


@app.command("repl")
def cmd_repl(
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help=_STRATEGY_HELP),
) -> None:
    """Read programs line by line and print each value. 'quit' or EOF exits."""
    parser = _parser_for(strategy)
    console.print(f"[dim]strategy: {parser.strategy.value}[/dim]")
    while True:
        try:
            line = console.input("[bold]prefix>[/bold] ")
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip() in ("quit", "exit"):
            break
        if not line.strip():
            continue
        try:
            typer.echo(parser.execute(line))
        except ZeroDivisionError:
            console.print("[red]Error:[/red] division by zero")


if __name__ == "__main__":
    app()
