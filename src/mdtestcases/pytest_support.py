"""Helpers for feeding collected test cases to pytest."""

from __future__ import annotations

from typing import Any, Iterable

try:
    import pytest
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "pytest is required for pytest integration (pip install mdtestcases[pytest])."
    ) from exc

from mdtestcases.schemas import TestCase


def param_id(test_case: TestCase[Any], *, separator: str = " / ") -> str:
    return separator.join(test_case.headings) or test_case.name


def as_pytest_params(
    test_cases: Iterable[TestCase[Any]], *, id_separator: str = " / "
) -> list[Any]:
    """Wrap test cases as ``pytest.param`` values for ``parametrize``.

    Example:
        CASES = load_test_cases("tests/fixtures/cases.md", {}, merge=merge_toml_table)

        @pytest.mark.parametrize("case", as_pytest_params(CASES))
        def test_formatter(case): ...
    """
    return [
        pytest.param(case, id=param_id(case, separator=id_separator))
        for case in test_cases
    ]
