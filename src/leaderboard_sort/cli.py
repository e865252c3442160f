from __future__ import annotations

import logging
import pathlib
import time
from typing import List, Optional

import typer

from .core.models import Record
from .core.repositioner import update_score
from .core.sample import sample_records
from .core.sorter import merge_sort
from .errors import LeaderboardError, RecordNotFoundError
from .load.records import parse_record_arg, records_from_markdown
from .logging_setup import setup_logging
from .render.table import banner, render, rule, section


logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Sort a score leaderboard and apply live score updates")

# (name, new score, phase title, scenario, expectation) for the walkthrough in `demo`
DEMO_UPDATES = [
    ("Ayesha", 95, "DYNAMIC UPDATE - Mark Improvement",
     "Ayesha's marks are updated from 75 to 95.", "Ayesha should move from Rank 6 to Rank 1."),
    ("Sahan", 60, "DYNAMIC UPDATE - Mark Correction",
     "Sahan's marks are corrected from 90 to 60.", "Sahan should drop from Rank 3 to Rank 8."),
    ("Nimasha", 80, "DYNAMIC UPDATE - Minor Adjustment",
     "Nimasha's marks improved from 68 to 80.", "Nimasha should move up by several ranks."),
    ("Rashmi", 82, "STABILITY TEST - Equal Marks",
     "Rashmi's marks updated to 82 (same as Thilina).", "Original order preserved for equal marks."),
]


def _check_out(out: str) -> str:
    out = out.lower().strip()
    if out not in {"txt", "md"}:
        typer.echo("--out must be 'txt' or 'md'", err=True)
        raise typer.Exit(2)
    return out


def _micros(start: int, end: int) -> float:
    return (end - start) / 1000.0


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", envvar="LEADERBOARD_LOG_LEVEL", help="DEBUG|INFO|WARNING|ERROR"),
):
    setup_logging(log_level)


@app.command("demo")
def demo(
    out: str = typer.Option("txt", "--out", help="txt|md"),
):
    """Walk through sorting the sample class list and four live updates."""
    out = _check_out(out)
    typer.echo(banner(["STUDENT LEADERBOARD MANAGEMENT SYSTEM", "Sorting with Dynamic Updates"]))

    records = sample_records()
    typer.echo("\n" + section("PHASE 1: INITIAL DATA (Unsorted)"))
    typer.echo(render(records, out))

    typer.echo("\n" + section("PHASE 2: APPLYING MERGE SORT (Descending Order)"))
    typer.echo("Algorithm: Stable Merge Sort")
    typer.echo("Time Complexity: O(N log N)")
    typer.echo("Space Complexity: O(N)")
    start = time.perf_counter_ns()
    records = merge_sort(records)
    end = time.perf_counter_ns()
    typer.echo(f"Execution Time: {_micros(start, end)} microseconds\n")
    typer.echo(render(records, out))

    for phase, (name, score, title, scenario, expected) in enumerate(DEMO_UPDATES, start=3):
        typer.echo("\n" + section(f"PHASE {phase}: {title}"))
        typer.echo(f"Scenario: {scenario}")
        typer.echo(f"Expected: {expected}")
        start = time.perf_counter_ns()
        result = update_score(records, name, score)
        end = time.perf_counter_ns()
        typer.echo(f"[UPDATE] {name}: {result.old_score} -> {result.new_score}")
        typer.echo(f"Update Time: {_micros(start, end)} microseconds")
        typer.echo(render(records, out))

    typer.echo("\n" + section("EXECUTION SUMMARY"))
    typer.echo("Stable Merge Sort: O(N log N) complexity achieved")
    typer.echo("Adaptive Updates: O(N) complexity for mark changes")
    typer.echo("Stability Guarantee: Preserved relative order for equal marks")
    typer.echo(rule("#"))


def _load(records: List[str], file: Optional[pathlib.Path]) -> List[Record]:
    loaded: List[Record] = []
    if file is not None:
        loaded.extend(records_from_markdown(file.read_text(encoding="utf-8")))
    loaded.extend(parse_record_arg(r) for r in records)
    return loaded


@app.command("rank")
def rank(
    records: List[str] = typer.Argument(None, help="records as NAME=SCORE"),
    file: Optional[pathlib.Path] = typer.Option(None, "--file", exists=True, dir_okay=False, help="Markdown file with a Name/Score table"),
    updates: List[str] = typer.Option([], "--set", help="NAME=SCORE update applied after sorting (repeatable)"),
    out: str = typer.Option("txt", "--out", help="txt|md"),
    strict: bool = typer.Option(False, "--strict", help="fail when an update names an unknown record"),
):
    """Sort the given records, apply updates in order, and print the leaderboard."""
    out = _check_out(out)
    try:
        board = merge_sort(_load(records or [], file))
        logger.debug("Ranked %d records, applying %d updates", len(board), len(updates))
        for u in updates:
            change = parse_record_arg(u)
            result = update_score(board, change.name, change.score)
            if result:
                continue
            if strict:
                raise RecordNotFoundError(change.name)
            typer.echo(f"Error: '{change.name}' not found.", err=True)
    except LeaderboardError as exc:
        typer.echo(exc.user_message, err=True)
        raise typer.Exit(1)

    typer.echo(render(board, out))


if __name__ == "__main__":
    app()
