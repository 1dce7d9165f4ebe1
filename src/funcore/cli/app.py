"""Typer CLI entrypoints."""

from __future__ import annotations

import sys
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from funcore.config.settings import load_settings
from funcore.core.ast import Fn, Var
from funcore.core.checker import TypeChecker
from funcore.core.context import Context
from funcore.core.errors import TypeCheckError, UnificationError
from funcore.core.fresh import reset
from funcore.core.subst import Substitution, free_vars, substitute
from funcore.core.types import IntType
from funcore.core.unify import resolve, unify
from funcore.core.utypes import UArrow, UBool, UInt, UVar
from funcore.eval.errors import EvalError
from funcore.eval.machine import Evaluator
from funcore.logging_utils import configure_logging
from funcore.samples import SAMPLES, get_sample

app = typer.Typer(name="funcore", help="Type check and evaluate sample programs", add_completion=False)


@app.callback()
def _setup() -> None:
    settings = load_settings()
    configure_logging(profile="cli", log_filter=settings.log_filter)


@app.command("list")
def list_samples() -> None:
    """List the sample programs."""
    table = Table(title="Samples")
    table.add_column("name", style="bold")
    table.add_column("description")
    for sample in SAMPLES.values():
        table.add_row(sample.name, sample.description)
    Console().print(table)


@app.command()
def run(
    name: str = typer.Argument(..., help="Sample name"),
    no_eval: Annotated[bool, typer.Option("--no-eval", help="Only type check")] = False,
) -> None:
    """Type check a sample program, then evaluate it."""
    settings = load_settings()
    console = Console()
    try:
        sample = get_sample(name)
    except KeyError:
        console.print(f"[red]Unknown sample:[/red] {escape(name)}")
        raise typer.Exit(code=2) from None

    logger.info("run.start sample={} no_eval={}", name, no_eval)
    if settings.show_terms:
        console.print(f"[bold]term[/bold]  {escape(str(sample.term))}")

    try:
        ty = TypeChecker().infer(Context.empty(), sample.term)
    except TypeCheckError as e:
        console.print(f"[red]type error[/red] ({type(e).__name__}): {escape(str(e))}")
        raise typer.Exit(code=1) from e
    console.print(f"[bold]type[/bold]  {escape(str(ty))}")

    if no_eval:
        return

    previous_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous_limit, settings.recursion_limit))
    try:
        value = Evaluator().evaluate(sample.term)
    except EvalError as e:
        console.print(f"[red]runtime error[/red] ({type(e).__name__}): {escape(str(e))}")
        raise typer.Exit(code=1) from e
    except RecursionError as e:
        console.print("[red]evaluation diverged[/red]: recursion limit exceeded")
        raise typer.Exit(code=1) from e
    finally:
        sys.setrecursionlimit(previous_limit)
    console.print(f"[bold]value[/bold] {escape(str(value))}")
    logger.info("run.done sample={}", name)


@app.command("subst-demo")
def subst_demo() -> None:
    """Show a substitution that renames a binder to avoid capture."""
    console = Console()
    reset()
    s = Substitution(Var("z"), "x")
    term = Fn([("z", IntType())], Var("x"))
    result = substitute(s, term)
    console.print(f"{escape(str(s))} {escape(str(term))}")
    console.print(f"  = {escape(str(result))}")
    console.print(f"  free variables: {', '.join(sorted(free_vars(result)))}")


@app.command("unify-demo")
def unify_demo() -> None:
    """Unify two arrow types, then trip the occurs check."""
    console = Console()

    a, b = UVar(), UVar()
    left, right = UArrow(a, UInt()), UArrow(UBool(), b)
    console.print(f"unify {escape(str(left))} with {escape(str(right))}")
    try:
        unify(left, right)
    except UnificationError as e:
        console.print(f"  [red]failed[/red]: {escape(str(e))}")
    else:
        console.print(f"  ok: {escape(str(resolve(left)))}")

    c = UVar()
    cyclic = UArrow(c, UInt())
    console.print(f"unify {escape(str(c))} with {escape(str(cyclic))}")
    try:
        unify(c, cyclic)
    except UnificationError as e:
        console.print(f"  [red]failed[/red] ({type(e).__name__}): {escape(str(e))}")
    else:
        console.print(f"  ok: {escape(str(resolve(c)))}")
