import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from stackcalc.display import ERROR_MARKER, format_result
from stackcalc.errors import EvaluationError
from stackcalc.evaluator import Precedence, evaluate

app = typer.Typer(name="stackcalc", help="Interactive infix calculator", add_completion=False)
console = Console()


@app.command()
def repl(
    precedence: str = typer.Option("flat", "--precedence", "-p", help="Operator precedence: flat or conventional"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log evaluation details"),
) -> None:
    """Read expressions line by line and print their results."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    try:
        mode = Precedence[precedence.upper()]
    except KeyError:
        console.print(f"[red]Invalid precedence: {precedence}[/red]. Choose: flat, conventional")
        raise typer.Exit(1)

    while True:
        try:
            code = console.input("> ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not code.strip():
            continue

        result = evaluate(code, mode)
        if not isinstance(result, EvaluationError):
            result = format_result(result)
        if isinstance(result, EvaluationError):
            console.print(str(result), style="red", markup=False, highlight=False)
            console.print(ERROR_MARKER)
            continue

        console.print(result, markup=False, highlight=False)


if __name__ == "__main__":
    app()
