"""Protocol for the build engine that receives rule declarations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from applerules.models import ActionDecl, TestSuiteDecl, TestTargetDecl


class ExecutionDelegate(Protocol):
    name: str

    def declare_action(self, action: ActionDecl) -> None:
        """Register one action with explicit inputs, outputs and argv."""

    def declare_test(self, test: TestTargetDecl) -> None:
        """Register one shell test target."""

    def declare_test_suite(self, suite: TestSuiteDecl) -> None:
        """Register a suite aggregating previously declared tests."""

    def declare_test_group(
        self,
        tests: Sequence[TestTargetDecl],
        suite: TestSuiteDecl,
    ) -> None:
        """Register *tests* and the *suite* over them, or none of them."""
