"""In-process delegate that records declarations instead of executing them.

Useful for:
- Unit tests that inspect what a rule declared
- Exporting a stable declaration graph for review or diffing
- Checking a generator run's produced files against the declared outputs
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from applerules.errors import ConsistencyError
from applerules.graph import BuildGraph
from applerules.models import ActionDecl, TestSuiteDecl, TestTargetDecl


@dataclass(slots=True)
class RecordingDelegate:
    """Delegate that keeps every declaration in memory, in declaration order."""

    name: str = "recording"
    actions: list[ActionDecl] = field(default_factory=list)
    tests: list[TestTargetDecl] = field(default_factory=list)
    suites: list[TestSuiteDecl] = field(default_factory=list)

    def declare_action(self, action: ActionDecl) -> None:
        claimed = {artifact.path for existing in self.actions for artifact in existing.outputs}
        clashes = sorted(artifact.path for artifact in action.outputs if artifact.path in claimed)
        if clashes:
            raise ConsistencyError(
                "Output is already declared by another action.",
                rule=action.mnemonic,
                hint="Give each framework a distinct name.",
                context={"outputs": ",".join(clashes)},
            )
        self.actions.append(action)

    def declare_test(self, test: TestTargetDecl) -> None:
        self._check_unclaimed([test.name])
        self.tests.append(test)

    def declare_test_suite(self, suite: TestSuiteDecl) -> None:
        self._check_unclaimed([suite.name])
        self._check_members(suite, known=[test.name for test in self.tests])
        self.suites.append(suite)

    def declare_test_group(
        self,
        tests: Sequence[TestTargetDecl],
        suite: TestSuiteDecl,
    ) -> None:
        """Record *tests* and *suite* together; a rejection records none of them."""
        names = [test.name for test in tests]
        self._check_unclaimed([*names, suite.name])
        self._check_members(suite, known=[*(test.name for test in self.tests), *names])
        self.tests.extend(tests)
        self.suites.append(suite)

    def graph(self) -> BuildGraph:
        return BuildGraph(
            actions=tuple(self.actions),
            tests=tuple(self.tests),
            suites=tuple(self.suites),
        )

    def test_named(self, name: str) -> TestTargetDecl | None:
        for test in self.tests:
            if test.name == name:
                return test
        return None

    def verify_outputs(self, action: ActionDecl, produced: Iterable[str]) -> None:
        """Fail when the files an action produced differ from what it declared."""
        declared = {artifact.path for artifact in action.outputs}
        recorded = set(produced)
        missing = sorted(declared - recorded)
        undeclared = sorted(recorded - declared)
        if missing or undeclared:
            raise ConsistencyError(
                "Action outputs do not match its declared outputs.",
                rule=action.mnemonic,
                hint="Declare every file the generator writes.",
                context={
                    "missing": ",".join(missing),
                    "undeclared": ",".join(undeclared),
                },
            )

    def _check_unclaimed(self, names: Sequence[str]) -> None:
        taken = {test.name for test in self.tests} | {suite.name for suite in self.suites}
        for name in names:
            if name in taken:
                raise ConsistencyError(
                    "Target is declared more than once.",
                    target=name,
                    context={"target": name},
                )
            taken.add(name)

    def _check_members(self, suite: TestSuiteDecl, *, known: Iterable[str]) -> None:
        labels = {f":{name}" for name in known}
        missing = [label for label in suite.tests if label not in labels]
        if missing:
            raise ConsistencyError(
                "Test suite references undeclared tests.",
                target=suite.name,
                context={"suite": suite.name, "missing": ",".join(missing)},
            )
