"""Typed rule error model with stable, machine-readable error codes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error identifiers used across rule surfaces."""

    CONFIGURATION = "E_CONFIGURATION"
    CONSISTENCY = "E_CONSISTENCY"


class AppleRulesError(Exception):
    """Base error naming the rule and target label a declaration failed for.

    Rendered as ``<rule>(<target>): <message>`` followed by the hint and any
    non-empty context entries, so a configuration-time abort points straight
    at the offending BUILD declaration.
    """

    code: str
    rule: str | None
    target: str | None
    hint: str | None
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        rule: str | None = None,
        target: str | None = None,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code.value
        self.rule = rule
        self.target = target
        self.hint = hint
        self.context = dict(context or {})

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    @property
    def label(self) -> str | None:
        if self.rule is None:
            return self.target
        if self.target is None:
            return self.rule
        return f"{self.rule}({self.target})"

    def __str__(self) -> str:
        label = self.label
        parts = [f"{label}: {self.message}" if label else self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        parts.extend(f"  {key}: {value}" for key, value in self.context.items() if value)
        return "\n".join(parts)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": self.message,
            "rule": self.rule,
            "target": self.target,
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class ConfigurationError(AppleRulesError):
    """A caller-supplied precondition was violated before anything was declared."""

    def __init__(
        self,
        message: str,
        *,
        rule: str | None = None,
        target: str | None = None,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            message,
            code=ErrorCode.CONFIGURATION,
            rule=rule,
            target=target,
            hint=hint,
            context=context,
        )


class ConsistencyError(AppleRulesError):
    """The execution delegate saw declarations that contradict each other."""

    def __init__(
        self,
        message: str,
        *,
        rule: str | None = None,
        target: str | None = None,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            message,
            code=ErrorCode.CONSISTENCY,
            rule=rule,
            target=target,
            hint=hint,
            context=context,
        )


__all__ = [
    "AppleRulesError",
    "ConfigurationError",
    "ConsistencyError",
    "ErrorCode",
]
