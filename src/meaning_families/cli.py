"""Command-line entry point for smallmerge.

Usage:
    meaning-families merge data/families.txt data/merged.txt
    meaning-families merge data/families.csv data/merged.parquet --ratio 0.6 --pithy 5
    meaning-families summary data/merged.txt

Settings not given on the command line come from the environment (and a
.env file): SMALLMERGE_RATIO, PITHY_FILTER, SMALLMERGE_DEBUG_SUBSETS,
SMALLMERGE_DEBUG_MERGES.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import pandas as pd
import typer
from dotenv import load_dotenv

from meaning_families.contract import FamilyContractError
from meaning_families.merger import MergeConfig, small_merge
from meaning_families.storage import load_families, save_families

logger = logging.getLogger(__name__)

app = typer.Typer(help="Merge overlapping meaning families")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("meaning_families").setLevel(level)


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def merge(
    input_path: Path = typer.Argument(..., help="Family file (.txt, .jsonl, .csv, .parquet)"),
    output_path: Path = typer.Argument(..., help="Where to write surviving families"),
    ratio: float | None = typer.Option(
        None, "--ratio", help="Similarity threshold (default: SMALLMERGE_RATIO or 0.5)"
    ),
    pithy: int | None = typer.Option(
        None, "--pithy", help="Drop families with this many words or fewer (default: PITHY_FILTER or 10)"
    ),
    trace: bool = typer.Option(
        False, "--trace", help="Log every subset elimination and merge (implies --verbose)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging"),
):
    """Run smallmerge over a family file and save the result."""
    load_dotenv()

    try:
        config = MergeConfig.from_env()
        overrides = {}
        if ratio is not None:
            overrides["similarity_threshold"] = ratio
        if pithy is not None:
            overrides["minimum_output_size"] = pithy
        if trace:
            overrides["trace_subsets"] = True
            overrides["trace_merges"] = True
        config = replace(config, **overrides)
    except ValueError as exc:
        _fail(str(exc))

    _setup_logging(verbose or config.trace_subsets or config.trace_merges)

    try:
        families = load_families(input_path)
    except FileNotFoundError:
        _fail(f"input file not found: {input_path}")
    except ValueError as exc:
        _fail(str(exc))

    try:
        result = small_merge(families, config)
    except FamilyContractError as exc:
        _fail(str(exc))

    try:
        save_families(result.families, output_path)
    except ValueError as exc:
        _fail(str(exc))

    stats = result.stats
    typer.echo(
        f"input={stats.input_families} output={stats.output_families} "
        f"subsets={stats.subsets_eliminated} merges={stats.merges_performed}"
    )
    logger.info(f"Saved {stats.output_families} families to {output_path}")


@app.command()
def summary(
    input_path: Path = typer.Argument(..., help="Family file (.txt, .jsonl, .csv, .parquet)"),
):
    """Print family count and size distribution."""
    try:
        families = load_families(input_path)
    except FileNotFoundError:
        _fail(f"input file not found: {input_path}")
    except ValueError as exc:
        _fail(str(exc))

    sizes = pd.Series([len(family) for family in families], dtype="int64", name="size")
    typer.echo(f"families: {len(families)}")
    typer.echo(f"non-empty: {int((sizes > 0).sum())}")
    if not sizes.empty:
        typer.echo(sizes.describe().to_string())


if __name__ == "__main__":
    app()
