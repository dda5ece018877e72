"""Stack of open headings and the options each one inherits."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

OptionsT = TypeVar("OptionsT")

logger = logging.getLogger(__name__)


@dataclass
class HeadingFrame(Generic[OptionsT]):
    """Live state of one open heading.

    The virtual root frame has level 0 and no title.
    """

    level: int
    title: str | None
    line: int
    options: OptionsT
    args: list[str] = field(default_factory=list)
    spent: bool = False

    @property
    def is_root(self) -> bool:
        return self.level == 0


class SectionStack(Generic[OptionsT]):
    """Chain of open headings above a virtual root frame."""

    def __init__(self, root_options: OptionsT) -> None:
        self._frames: list[HeadingFrame[OptionsT]] = [
            HeadingFrame(level=0, title=None, line=0, options=root_options)
        ]

    @property
    def top(self) -> HeadingFrame[OptionsT]:
        return self._frames[-1]

    @property
    def has_open_heading(self) -> bool:
        return len(self._frames) > 1

    def close_to(self, level: int) -> None:
        """Pop every frame at ``level`` or deeper."""
        while self.has_open_heading and self.top.level >= level:
            frame = self._frames.pop()
            logger.debug("Closed heading %r (line %d)", frame.title, frame.line)

    def push_heading(self, *, level: int, title: str, line: int) -> HeadingFrame[OptionsT]:
        """Close frames at ``level`` or deeper and open one with a copy of the parent options."""
        self.close_to(level)
        frame = HeadingFrame(
            level=level, title=title, line=line, options=copy.deepcopy(self.top.options)
        )
        self._frames.append(frame)
        logger.debug("Opened heading %r (level %d, line %d)", title, level, line)
        return frame

    def set_options(self, options: OptionsT) -> None:
        self.top.options = options

    def get_options(self) -> OptionsT:
        return self.top.options

    def get_headings(self) -> list[str]:
        """Titles of the open headings, root to leaf."""
        return [frame.title for frame in self._frames if frame.title is not None]
