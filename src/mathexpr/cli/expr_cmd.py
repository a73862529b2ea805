"""Expression CLI commands: eval, check, batch."""

from decimal import Decimal
from pathlib import Path

import click

from mathexpr.config import EngineConfig, load_yaml
from mathexpr.converter import coerce_result
from mathexpr.engine import ExpressionEngine
from mathexpr.expressions import MathExpressionError, parse, to_text

TARGET_TYPES = {
    "decimal": Decimal,
    "str": str,
    "int": int,
    "float": float,
}


def _build_config(precision: int | None) -> EngineConfig:
    try:
        if precision is not None:
            return EngineConfig(precision=precision)
        return EngineConfig.from_env()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="precision")


@click.command("eval", context_settings={"ignore_unknown_options": True})
@click.argument("expression")
@click.argument("args", nargs=-1)
@click.option(
    "--target", "-t",
    type=click.Choice(list(TARGET_TYPES)),
    default="decimal",
    help="Type to coerce the result into.",
)
@click.option(
    "--precision", "-p", type=int, default=None,
    help="Significant digits (default: MATHEXPR_PRECISION or 28).",
)
def evaluate(expression: str, args: tuple[str, ...], target: str, precision: int | None):
    """Evaluate EXPRESSION against ARGS.

    Arguments are referenced as x, y, z, t (or a, b, c, d) for the first
    four, or positionally as {0}, {1}, ...

        mathexpr eval "(x + y) / 2" 3 5
        mathexpr eval "{0} * -1" -- -4
    """
    engine = ExpressionEngine(_build_config(precision))

    try:
        result = engine.evaluate(expression, args)
    except MathExpressionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(coerce_result(result, TARGET_TYPES[target]))


@click.command()
@click.argument("expression")
def check(expression: str):
    """Parse EXPRESSION and print its fully parenthesized form."""
    try:
        tree = parse(expression)
    except MathExpressionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(to_text(tree))


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def batch(path: Path):
    """Evaluate every expression listed in a YAML file.

    The file holds an optional precision and a list of cases:

    \b
        precision: 10
        expressions:
          - name: half
            expression: x / 2
            args: [5]
    """
    try:
        data = load_yaml(path)
        config = EngineConfig.from_mapping(data)
    except ValueError as e:
        raise click.ClickException(str(e))

    cases = data.get("expressions") or []
    if not isinstance(cases, list):
        raise click.ClickException(f"{path}: 'expressions' must be a list")

    engine = ExpressionEngine(config)
    failures = 0

    for number, case in enumerate(cases, start=1):
        if not isinstance(case, dict) or "expression" not in case:
            raise click.ClickException(
                f"{path}: entry {number} must be a mapping with an 'expression' key"
            )
        name = case.get("name", f"#{number}")
        args = case.get("args")
        if args is None:
            args = []
        elif not isinstance(args, list):
            args = [args]
        try:
            result = engine.evaluate(str(case["expression"]), args)
        except MathExpressionError as e:
            failures += 1
            click.echo(f"{name}: error: {e}")
            continue
        click.echo(f"{name}: {result}")

    click.echo(
        f"\n{len(cases)} expression(s) evaluated, {failures} failed, "
        f"{len(engine.cache)} compiled."
    )
    if failures:
        raise SystemExit(1)
