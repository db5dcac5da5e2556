"""Declaration log for rule expansion.

Every rule entrypoint accepts an optional :class:`StructuredLogger`. Each
record names the rule and the target label it was expanding, so the log of a
whole package can be filtered down to one BUILD declaration.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from applerules.errors import AppleRulesError

Level = Literal["info", "warning", "error"]


@dataclass(slots=True)
class StructuredLogger:
    records: list[dict[str, Any]] = field(default_factory=list)

    def log(
        self,
        *,
        operation: str,
        rule: str,
        target: str | None,
        message: str,
        level: Level = "info",
        extra: dict[str, Any] | None = None,
    ) -> None:
        record: dict[str, Any] = {
            "seq": len(self.records),
            "level": level,
            "operation": operation,
            "label": f"{rule}({target})" if target else rule,
            "rule": rule,
            "target": target,
            "message": message,
        }
        if extra is not None:
            record["extra"] = extra
        self.records.append(record)

    def log_error(self, *, rule: str, target: str | None, error: AppleRulesError) -> None:
        """Record a rejected declaration with the error's code and context."""
        self.log(
            operation="reject_declaration",
            rule=rule,
            target=target,
            message=error.message,
            level="error",
            extra=error.to_dict(),
        )

    def records_for_target(self, target: str) -> list[dict[str, Any]]:
        return [record for record in self.records if record.get("target") == target]

    def records_for_rule(self, rule: str) -> list[dict[str, Any]]:
        return [record for record in self.records if record.get("rule") == rule]

    def errors(self) -> list[dict[str, Any]]:
        return [record for record in self.records if record["level"] == "error"]

    def to_json_lines(self, path: str | Path) -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        lines = [json.dumps(record, sort_keys=True) for record in self.records]
        output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return output_path
