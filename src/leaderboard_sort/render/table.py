from __future__ import annotations

from typing import List, Sequence

from ..core.models import Record


WIDTH = 60

MEDALS = {
    1: "🥇 1st Place (Gold Medal)",
    2: "🥈 2nd Place (Silver Medal)",
    3: "🥉 3rd Place (Bronze Medal)",
}


def ordinal_suffix(number: int) -> str:
    if 11 <= number % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def position_badge(rank: int) -> str:
    if rank in MEDALS:
        return MEDALS[rank]
    return f"{rank}{ordinal_suffix(rank)} Place"


def center_text(text: str, width: int) -> str:
    padding = max((width - len(text)) // 2, 0)
    return " " * padding + text + " " * max(width - len(text) - padding, 0)


def rule(char: str = "-", width: int = WIDTH) -> str:
    return char * width


def banner(lines: Sequence[str], width: int = WIDTH) -> str:
    """Box of '#' with each line centred; empty strings give blank rows."""
    inner = width - 2
    out = [rule("#", width), "#" + " " * inner + "#"]
    for line in lines:
        out.append("#" + center_text(line, inner) + "#")
    out.append("#" + " " * inner + "#")
    out.append(rule("#", width))
    return "\n".join(out)


def section(title: str, width: int = WIDTH) -> str:
    return "\n".join([rule("=", width), title, rule("=", width)])


def render_txt(records: Sequence[Record]) -> str:
    lines: List[str] = [
        rule(),
        "| Rank |      Name       | Marks |          Position          |",
        rule(),
    ]
    for i, r in enumerate(records, start=1):
        lines.append(f"| {i:<4d} | {r.name:<15} | {r.score:5d} | {position_badge(i):<26} |")
    lines.append(rule())
    return "\n".join(lines)


def render_md(records: Sequence[Record]) -> str:
    lines: List[str] = [
        "| Rank | Name | Marks | Position |",
        "| ---: | --- | ---: | --- |",
    ]
    for i, r in enumerate(records, start=1):
        lines.append(f"| {i} | {r.name} | {r.score} | {position_badge(i)} |")
    return "\n".join(lines)


def render(records: Sequence[Record], out: str = "txt") -> str:
    if out == "md":
        return render_md(records)
    return render_txt(records)
