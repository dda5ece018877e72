"""Merge capabilities that fold options blocks into an options snapshot."""

from __future__ import annotations

import logging
import tomllib
from typing import Any, Callable, Mapping, Protocol, Self, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict

from mdtestcases.exceptions import MergeError

OptionsT = TypeVar("OptionsT")

MergeFn = Callable[[OptionsT, str], OptionsT]

logger = logging.getLogger(__name__)


@runtime_checkable
class MergeSerialized(Protocol):
    """Options value that knows how to merge serialized overrides into itself.

    Implementations return a new value and leave ``self`` untouched. Rejected
    input is signalled by raising ``ValueError``.
    """

    def merge_serialized(self, source: str) -> Self: ...


def merge_via_protocol(current: MergeSerialized, source: str) -> MergeSerialized:
    return current.merge_serialized(source)


def resolve_merge(root_options: OptionsT, merge: MergeFn[OptionsT] | None) -> MergeFn[OptionsT]:
    """Pick the merge capability for a collection run.

    Raises:
        TypeError: If no callable is given and the options do not implement
            ``MergeSerialized``.
    """
    if merge is not None:
        return merge
    if isinstance(root_options, MergeSerialized):
        return merge_via_protocol  # type: ignore[return-value]
    raise TypeError(
        f"{type(root_options).__name__} does not implement merge_serialized(); "
        "pass merge= to choose how options blocks are applied"
    )


def apply_options_block(
    merge: MergeFn[OptionsT], current: OptionsT, source: str, *, line: int
) -> OptionsT:
    """Merge one options block, converting a rejection into ``MergeError``."""
    try:
        merged = merge(current, source)
    except ValueError as exc:
        raise MergeError(line=line, source=source, reason=str(exc)) from exc
    logger.debug("Merged options block at line %d", line)
    return merged


def merge_toml_table(current: Mapping[str, Any], source: str) -> dict[str, Any]:
    """Overlay the top-level keys of a TOML document onto ``current``.

    Nested tables replace the inherited value as a whole.
    """
    table = tomllib.loads(source)
    return {**current, **table}


class TomlOptions(BaseModel):
    """Base class for options models configured through TOML blocks.

    Keys present in a block override the inherited field values; everything
    else is carried over. Unknown keys and invalid values are rejected.

    Example:
        >>> class Options(TomlOptions):
        ...     foo: int = 0
        ...     bar: bool = False
        >>> Options().merge_serialized("foo = 5")
        Options(foo=5, bar=False)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    def merge_serialized(self, source: str) -> Self:
        table = tomllib.loads(source)
        return self.model_validate({**self.model_dump(), **table})
