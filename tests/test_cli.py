"""Tests for the command line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mdtestcases.__main__ import main


@pytest.fixture
def document(tmp_path: Path) -> Path:
    path = tmp_path / "cases.md"
    path.write_text(
        "# Group\n\n## Case\n\n```options\nbar = true\n```\n\n```\ninput\n```\n",
        encoding="utf-8",
    )
    return path


class TestMain:
    """Tests for main."""

    def test_prints_tree(self, document: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main([str(document)])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == [
            "Test cases: 1",
            "Group",
            "    Case (line 3, 1 arg)",
        ]

    def test_prints_json_with_root_options(
        self, document: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(document), "--json", "--options", "foo = 2"])

        assert exit_code == 0
        (case,) = json.loads(capsys.readouterr().out)
        assert case["options"] == {"foo": 2, "bar": True}
        assert case["args"] == ["input"]

    def test_reports_collection_errors(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "orphan.md"
        path.write_text("```\nx\n```\n", encoding="utf-8")

        exit_code = main([str(path)])

        assert exit_code == 1
        assert "line 1" in capsys.readouterr().err

    def test_reports_missing_document(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(tmp_path / "missing.md")])

        assert exit_code == 1
        assert "not found" in capsys.readouterr().err

    def test_rejects_invalid_root_options(
        self, document: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(document), "--options", "foo ="])

        assert exit_code == 2
        assert "invalid --options" in capsys.readouterr().err
