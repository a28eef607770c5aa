"""Command line interface for the half-open binary search."""
from __future__ import annotations

from typing import Optional, Tuple

import click

from .algorithm_manager import AlgorithmManager
from .config import LOG_LEVELS, Settings, load_settings
from .demo import demo_lines
from .errors import ConfigError, SearchRangeError, UnknownAlgorithmError
from .logging_setup import get_logger, setup_logging
from .performance.benchmark import compare_variants, format_report


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="YAML settings file (defaults to $HALFSEARCH_CONFIG).")
@click.option("--log-level", default=None, type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Override the configured log level.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], log_level: Optional[str]) -> None:
    """Half-open interval binary search tools."""
    try:
        settings = load_settings(config_path)
    except ConfigError as err:
        raise click.ClickException(str(err)) from err
    if log_level:
        settings.logging.level = log_level.upper()
    setup_logging(settings.logging)
    ctx.obj = settings


@cli.command()
def demo() -> None:
    """Search the twelve-element sample for 30 and 12."""
    for line in demo_lines():
        click.echo(line)


@cli.command()
@click.argument("key", type=int)
@click.argument("values", nargs=-1, type=int)
@click.option("--lo", default=0, show_default=True, type=int, help="Inclusive lower index.")
@click.option("--hi", default=None, type=int, help="Exclusive upper index (defaults to length).")
@click.option("--strict/--lenient", default=None, help="Fail on an invalid range instead of printing -1.")
@click.option("--algorithm", default=None, help="Registered algorithm name.")
@click.pass_obj
def find(
    settings: Settings,
    key: int,
    values: Tuple[int, ...],
    lo: int,
    hi: Optional[int],
    strict: Optional[bool],
    algorithm: Optional[str],
) -> None:
    """Print the index of KEY among sorted VALUES, or -1."""
    if any(a >= b for a, b in zip(values, values[1:])):
        raise click.BadParameter("values must be strictly ascending", param_hint="VALUES")

    config = settings.search
    if strict is not None:
        config = config.model_copy(update={"strict": strict})
    manager = AlgorithmManager(config)
    log = get_logger(__name__).bind(key=key, size=len(values))
    try:
        index = manager.execute_algorithm(algorithm, list(values), key, lo, hi)
    except UnknownAlgorithmError as err:
        raise click.BadParameter(f"unknown algorithm {err.args[0]!r}", param_hint="--algorithm") from err
    except SearchRangeError as err:
        raise click.ClickException(str(err)) from err
    log.debug("search finished", index=index)
    click.echo(index)


@cli.command()
@click.option("--size", "sizes", multiple=True, type=click.IntRange(min=1),
              default=(16, 256, 4096), show_default=True, help="Input size; repeatable.")
@click.option("--trials", default=200, show_default=True, type=click.IntRange(min=1))
@click.option("--hit-ratio", default=0.5, show_default=True, type=click.FloatRange(0.0, 1.0))
@click.option("--seed", default=0, show_default=True, type=int)
def compare(sizes: Tuple[int, ...], trials: int, hit_ratio: float, seed: int) -> None:
    """Compare element reads of the bounded and classic variants."""
    stats = compare_variants(sizes, trials=trials, hit_ratio=hit_ratio, seed=seed)
    click.echo(format_report(stats))


def main() -> None:
    cli(prog_name="halfsearch")


if __name__ == "__main__":
    main()
