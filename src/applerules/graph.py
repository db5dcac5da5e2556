"""Stable export of recorded declarations."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from pathlib import Path

import cbor2

from applerules.models import ActionDecl, TestSuiteDecl, TestTargetDecl


@dataclass(frozen=True, slots=True)
class BuildGraph:
    actions: tuple[ActionDecl, ...] = ()
    tests: tuple[TestTargetDecl, ...] = ()
    suites: tuple[TestSuiteDecl, ...] = ()
    schema_version: int = 1

    @property
    def target_names(self) -> tuple[str, ...]:
        return tuple(test.name for test in self.tests) + tuple(suite.name for suite in self.suites)

    def to_json(self, path: str | Path | None = None) -> str:
        encoded = json.dumps(self._payload(), indent=2, sort_keys=True) + "\n"
        if path is not None:
            Path(path).write_text(encoded, encoding="utf-8")
        return encoded

    def to_cbor(self, path: str | Path | None = None) -> bytes:
        encoded = cbor2.dumps(self._payload(), canonical=True)
        if path is not None:
            Path(path).write_bytes(encoded)
        return encoded

    def digest(self) -> str:
        canonical = json.dumps(self._payload(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    def _payload(self) -> dict[str, object]:
        # List order is part of the payload: argv and suite membership are ordered.
        return {
            "schema_version": self.schema_version,
            "actions": [
                {
                    "mnemonic": action.mnemonic,
                    "executable": action.executable.path,
                    "inputs": [artifact.path for artifact in action.inputs],
                    "outputs": [artifact.path for artifact in action.outputs],
                    "arguments": list(action.arguments),
                }
                for action in self.actions
            ],
            "tests": [
                {
                    "name": test.name,
                    "srcs": list(test.srcs),
                    "args": list(test.args),
                    "data": list(test.data),
                    "deps": list(test.deps),
                    "tags": list(test.tags),
                    "shard_count": test.shard_count,
                    "attributes": {
                        key: _plain(value) for key, value in sorted(test.attributes.items())
                    },
                }
                for test in self.tests
            ],
            "suites": [{"name": suite.name, "tests": list(suite.tests)} for suite in self.suites],
        }


def _plain(value: object) -> object:
    if isinstance(value, str | int | float | bool) or value is None:
        return value
    if isinstance(value, list | tuple):
        return [_plain(item) for item in value]
    return str(value)
