"""
Command-line interface for Calc Engine.

Provides commands for:
- Evaluating expressions
- Running single two-operand operations
- Inspecting tokens
- An interactive calculator shell
- Running the HTTP service
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calc_engine.calculator import calc
from calc_engine.config import settings, shell_config
from calc_engine.engine import ERROR_PREFIX, parse_expression
from calc_engine.errors import CalculatorError
from calc_engine.formatting import format_number
from calc_engine.log import configure_logging
from calc_engine.shell import CLEAR_COMMANDS, EXIT_COMMANDS, CalculatorSession
from calc_engine.tokenizer import tokenize

app = typer.Typer(
    name="calc",
    help="Calc Engine - keypad calculator expression engine",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Override CALC_LOG_LEVEL"),
):
    """Configure logging before any command runs."""
    configure_logging(log_level)


# =============================================================================
# Evaluation Commands
# =============================================================================

@app.command("eval")
def eval_expression(
    expression: str = typer.Argument(..., help="Expression, e.g. '2 + 3 * 4'"),
):
    """Evaluate an expression and print the Result/Error line."""
    output = parse_expression(expression)
    if output.startswith(ERROR_PREFIX):
        console.print(f"[red]{escape(output)}[/]", highlight=False)
        raise typer.Exit(1)
    console.print(escape(output), highlight=False)


@app.command("op")
def run_operation(
    a: float = typer.Argument(..., help="Left operand"),
    op: str = typer.Argument(..., help="Operator: + - * /"),
    b: float = typer.Argument(..., help="Right operand"),
):
    """Apply a single operator to two numbers."""
    try:
        result = calc(a, op, b)
    except CalculatorError as e:
        console.print(f"[red]✗[/] {e.kind.value}: {escape(e.message)}", highlight=False)
        raise typer.Exit(1)
    console.print(format_number(result), highlight=False)


@app.command()
def tokens(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
):
    """Show how an expression is split into tokens."""
    try:
        token_list = tokenize(expression)
    except CalculatorError as e:
        console.print(f"[red]✗[/] {escape(e.message)}", highlight=False)
        raise typer.Exit(1)

    table = Table(title="Tokens")
    table.add_column("Pos", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Value", style="green")

    for token in token_list:
        table.add_row(str(token.position), token.type.value, str(token))

    console.print(table)


# =============================================================================
# Interactive Shell
# =============================================================================

@app.command()
def shell(
    chain: bool = typer.Option(
        shell_config.chain_results, "--chain/--no-chain",
        help="Prepend the last result when a line starts with an operator",
    ),
):
    """Start an interactive calculator session."""
    session = CalculatorSession(chain_results=chain)
    console.print("[bold green]Calc Engine shell[/] - 'ans' recalls the last result, "
                  "'clear' forgets it, 'quit' exits")

    while True:
        try:
            line = console.input(shell_config.prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        command = line.strip().lower()
        if command in EXIT_COMMANDS:
            break
        if command in CLEAR_COMMANDS:
            session.clear()
            console.print("[dim]cleared[/]")
            continue

        output = session.submit(line)
        if output is None:
            continue
        style = "red" if output.startswith(ERROR_PREFIX) else "green"
        console.print(f"[{style}]{escape(output)}[/]", highlight=False)


# =============================================================================
# Server Commands
# =============================================================================

@app.command()
def serve(
    host: str = typer.Option(settings.host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
):
    """Start the Calc Engine HTTP service."""
    import uvicorn

    console.print(f"[bold green]Starting {settings.app_name} on {host}:{port}[/]")

    uvicorn.run(
        "calc_engine.api:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
