"""Shell integration test macros."""

from .matrix import TestMatrixExpansion, apple_multi_shell_test, expand
from .sharding import resolve_shard_count
from .shell_test import REQUIRED_DATA, REQUIRED_TAGS, TEST_RUNNER, apple_shell_test

__all__ = [
    "REQUIRED_DATA",
    "REQUIRED_TAGS",
    "TEST_RUNNER",
    "TestMatrixExpansion",
    "apple_multi_shell_test",
    "apple_shell_test",
    "expand",
    "resolve_shard_count",
]
