"""Shared schemas for mdtestcases."""

from mdtestcases.schemas.test_case import TestCase

__all__ = ["TestCase"]
