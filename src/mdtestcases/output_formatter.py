"""Format collected test cases as a summary and heading tree."""

from __future__ import annotations

import json
from typing import Any, Iterable

from mdtestcases.schemas import TestCase


def format_test_cases(test_cases: list[TestCase[Any]]) -> str:
    """Create a summary line followed by one tree entry per test case."""
    lines = [f"Test cases: {len(test_cases)}"]
    lines.extend(_render_tree(test_cases))
    return "\n".join(lines)


def dump_test_cases_json(test_cases: Iterable[TestCase[Any]], *, indent: int | None = 2) -> str:
    """Serialize test cases to a JSON array."""
    return json.dumps([case.model_dump(mode="json") for case in test_cases], indent=indent)


def _render_tree(test_cases: Iterable[TestCase[Any]]) -> list[str]:
    lines: list[str] = []
    printed: tuple[str, ...] = ()
    for case in test_cases:
        parents = case.headings[:-1]
        shared = _common_prefix_length(printed, parents)
        for depth in range(shared, len(parents)):
            lines.append(" " * (depth * 4) + parents[depth])
        printed = parents
        arg_label = "arg" if len(case.args) == 1 else "args"
        lines.append(
            " " * (len(parents) * 4)
            + f"{case.name} (line {case.line_number}, {len(case.args)} {arg_label})"
        )
    return lines


def _common_prefix_length(left: tuple[str, ...], right: tuple[str, ...]) -> int:
    length = 0
    for a, b in zip(left, right):
        if a != b:
            break
        length += 1
    return length
