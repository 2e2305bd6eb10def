"""
exprcalc CLI - Entry point.

Commands:

- eval:   evaluate an expression and print ``Result: <value>``
- tokens: show the token stream for an expression
- ast:    show the parsed expression tree

Expressions may start with ``-``: ``exprcalc eval "-2^3"``.
"""

from __future__ import annotations

import logging
import math
import platform
import sys
import tomllib
from decimal import Decimal
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from exprcalc._version import __version__
from exprcalc.config import CalcConfig, load_config
from exprcalc.core.errors import ExprCalcError
from exprcalc.core.evaluator import evaluate
from exprcalc.core.lexer import TokenKind, tokenize
from exprcalc.core.nodes import Node, Number, children
from exprcalc.core.parser import parse_expr

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    help="exprcalc: evaluate arithmetic expressions (+ - * / ^ and parentheses)",
    no_args_is_help=True,
)

# Lets an expression such as "-2^3" through as the argument instead of
# being rejected as an unknown option
_EXPRESSION_ARG_SETTINGS = {"ignore_unknown_options": True}


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"exprcalc {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def format_result(value: float, precision: int | None = None) -> str:
    """Render a result the way it is printed on the command line.

    Values print in plain decimal notation using the shortest digits that
    round-trip (``0.0000001``, never ``1e-07``). Integral values drop the
    fractional part, NaN prints as ``NaN`` and infinities as ``inf``/``-inf``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if precision is not None:
        return f"{value:.{precision}f}"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _get_config(ctx: typer.Context) -> CalcConfig:
    config = (ctx.obj or {}).get("config")
    return config if config is not None else CalcConfig()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to exprcalc.toml (default: ./exprcalc.toml)"
    ),
) -> None:
    """exprcalc main callback for global options."""
    try:
        config = load_config(config_path)
    except FileNotFoundError as e:
        _fail(str(e))
    except tomllib.TOMLDecodeError as e:
        _fail(f"invalid configuration file: {e}")
    except ValidationError as e:
        _fail(f"invalid configuration: {e}")

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Using configuration %s", config.model_dump())
    ctx.obj = {"config": config}


@app.command("eval", context_settings=_EXPRESSION_ARG_SETTINGS)
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '1 + 2*3'"),
    precision: int | None = typer.Option(
        None, "--precision", "-p", min=0, help="Digits after the decimal point"
    ),
    strict: bool | None = typer.Option(
        None, "--strict/--lenient", help="Reject input left after the expression"
    ),
) -> None:
    """Evaluate an expression and print the result."""
    config = _get_config(ctx).with_overrides(precision=precision, strict=strict)
    try:
        result = evaluate(expression, strict=config.strict)
    except ExprCalcError as e:
        logger.debug("Evaluation of %r failed", expression, exc_info=True)
        _fail(str(e))

    typer.echo(f"{config.result_prefix}{format_result(result, config.precision)}")


@app.command("tokens", context_settings=_EXPRESSION_ARG_SETTINGS)
def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Show the tokens an expression is split into."""
    try:
        tokens = tokenize(expression)
    except ExprCalcError as e:
        _fail(str(e))

    table = Table(title="Tokens")
    table.add_column("Pos", justify="right")
    table.add_column("Kind")
    table.add_column("Value")
    for tok in tokens:
        value = format_result(tok.value) if tok.kind == TokenKind.NUMBER else ""
        table.add_row(str(tok.pos), str(tok.kind), value)
    console.print(table)


def _build_tree(node: Node, tree: Tree) -> None:
    for child in children(node):
        branch = tree.add(_node_label(child))
        _build_tree(child, branch)


def _node_label(node: Node) -> str:
    if isinstance(node, Number):
        return f"Number {node}"
    return type(node).__name__


@app.command("ast", context_settings=_EXPRESSION_ARG_SETTINGS)
def ast_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to parse"),
) -> None:
    """Show the parsed expression tree."""
    config = _get_config(ctx)
    try:
        node = parse_expr(expression, strict=config.strict)
    except ExprCalcError as e:
        _fail(str(e))

    tree = Tree(_node_label(node))
    _build_tree(node, tree)
    console.print(tree)
    typer.echo(str(node))


def main(argv: list[str] | None = None) -> None:
    app(args=argv if argv is not None else sys.argv[1:], standalone_mode=True)


if __name__ == "__main__":
    main()
