"""mdtestcases: collect test fixtures from Markdown documents."""

from mdtestcases.collection import TestCaseCollector, get_test_cases
from mdtestcases.events import CodeBlock, Heading, iter_block_events
from mdtestcases.exceptions import (
    CollectionError,
    DocumentNotFoundError,
    LoadError,
    MdTestCasesError,
    MergeError,
    OrphanArgumentError,
)
from mdtestcases.loader import load_document, load_test_cases
from mdtestcases.options import MergeSerialized, TomlOptions, merge_toml_table
from mdtestcases.schemas import TestCase

__all__ = [
    "CodeBlock",
    "CollectionError",
    "DocumentNotFoundError",
    "Heading",
    "LoadError",
    "MdTestCasesError",
    "MergeError",
    "MergeSerialized",
    "OrphanArgumentError",
    "TestCase",
    "TestCaseCollector",
    "TomlOptions",
    "get_test_cases",
    "iter_block_events",
    "load_document",
    "load_test_cases",
    "merge_toml_table",
]
