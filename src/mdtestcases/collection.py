"""Collect test cases from a Markdown fixture document."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from markdown_it import MarkdownIt

from mdtestcases.events import CodeBlock, Heading, iter_block_events
from mdtestcases.exceptions import OrphanArgumentError
from mdtestcases.options import MergeFn, apply_options_block, resolve_merge
from mdtestcases.schemas import TestCase
from mdtestcases.sections import SectionStack

OptionsT = TypeVar("OptionsT")

logger = logging.getLogger(__name__)


class TestCaseCollector(Generic[OptionsT]):
    """Consume block events one at a time and accumulate test cases.

    A heading's test case is emitted as soon as the heading stops being the
    innermost open heading, whether a sibling closes it or a child opens
    beneath it. This keeps the output in document order of the defining
    headings even when a heading with arguments also has sub-headings.
    """

    __test__ = False

    def __init__(self, root_options: OptionsT, merge: MergeFn[OptionsT]) -> None:
        self._stack: SectionStack[OptionsT] = SectionStack(root_options)
        self._merge = merge
        self.test_cases: list[TestCase[OptionsT]] = []

    def feed(self, event: Heading | CodeBlock) -> None:
        if isinstance(event, Heading):
            self._on_heading(event)
        elif event.is_options:
            self._on_options(event)
        else:
            self._on_argument(event)

    def finish(self) -> list[TestCase[OptionsT]]:
        self._supersede_top()
        return self.test_cases

    def _on_heading(self, heading: Heading) -> None:
        # Emission must happen before the stack shrinks, even for deeper headings.
        self._supersede_top()
        self._stack.push_heading(level=heading.level, title=heading.text, line=heading.line)

    def _on_options(self, block: CodeBlock) -> None:
        options = apply_options_block(
            self._merge, self._stack.get_options(), block.content, line=block.line
        )
        self._stack.set_options(options)

    def _on_argument(self, block: CodeBlock) -> None:
        if not self._stack.has_open_heading:
            raise OrphanArgumentError(line=block.line)
        self._stack.top.args.append(block.content)

    def _supersede_top(self) -> None:
        frame = self._stack.top
        if frame.spent or frame.is_root:
            return
        frame.spent = True
        if not frame.args:
            return
        test_case = TestCase(
            name=frame.title or "",
            headings=self._stack.get_headings(),
            line_number=frame.line,
            options=frame.options,
            args=frame.args,
        )
        logger.debug(
            "Collected test case %r (line %d, %d args)",
            test_case.name,
            test_case.line_number,
            len(test_case.args),
        )
        self.test_cases.append(test_case)


def get_test_cases(
    content: str,
    root_options: OptionsT,
    *,
    merge: MergeFn[OptionsT] | None = None,
    parser: MarkdownIt | None = None,
) -> list[TestCase[OptionsT]]:
    """Collect the test cases defined by a Markdown document.

    Args:
        content: Markdown source.
        root_options: Options inherited by every top-level heading.
        merge: Callable ``(current, source) -> options`` applied to each
            ``options`` code block. Defaults to ``root_options.merge_serialized``.
        parser: markdown-it parser to tokenize with. Defaults to the configured
            preset.

    Returns:
        Test cases in document order of their defining headings.

    Raises:
        MergeError: If an options block is rejected by the merge capability.
        OrphanArgumentError: If a positional code block precedes every heading.
        TypeError: If no merge capability is available for ``root_options``.
    """
    collector = TestCaseCollector(root_options, resolve_merge(root_options, merge))
    for event in iter_block_events(content, parser):
        collector.feed(event)
    return collector.finish()
