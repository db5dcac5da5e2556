"""Configuration-time switches and the policy object that carries them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from applerules.errors import ConfigurationError

HeaderCollisionPolicy = Literal["error", "warn", "allow"]

SHARDING_DEFINE = "bazel_rules_apple.apple_shell_test.enable_sharding"


class ShardingSwitch(StrEnum):
    """Tri-state selector resolved once at configuration time."""

    DEFAULT = "default"
    ENABLE = "enable"
    DISABLE = "disable"


@dataclass(frozen=True, slots=True)
class Policy:
    sharding: ShardingSwitch = ShardingSwitch.DEFAULT
    header_collisions: HeaderCollisionPolicy = "error"

    @classmethod
    def from_defines(
        cls,
        defines: Mapping[str, str] | Iterable[str],
        *,
        header_collisions: HeaderCollisionPolicy = "error",
    ) -> Policy:
        """Build a policy from ``--define key=value`` pairs.

        Unrelated keys are ignored. The sharding define accepts ``1`` to enable
        and ``0`` to disable; anything else is rejected.
        """
        values = parse_defines(defines)
        return cls(
            sharding=sharding_switch_from(values.get(SHARDING_DEFINE)),
            header_collisions=header_collisions,
        )


def parse_defines(defines: Mapping[str, str] | Iterable[str]) -> dict[str, str]:
    if isinstance(defines, Mapping):
        return dict(defines)
    parsed: dict[str, str] = {}
    for item in defines:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ConfigurationError(
                "Malformed --define value.",
                hint="Use the form key=value.",
                context={"define": item},
            )
        parsed[key] = value
    return parsed


def sharding_switch_from(value: str | None) -> ShardingSwitch:
    if value is None:
        return ShardingSwitch.DEFAULT
    if value == "1":
        return ShardingSwitch.ENABLE
    if value == "0":
        return ShardingSwitch.DISABLE
    raise ConfigurationError(
        "Unsupported value for the shell test sharding define.",
        hint="Use --define bazel_rules_apple.apple_shell_test.enable_sharding=1 or =0.",
        context={"define": SHARDING_DEFINE, "value": value},
    )


__all__ = [
    "HeaderCollisionPolicy",
    "Policy",
    "SHARDING_DEFINE",
    "ShardingSwitch",
    "parse_defines",
    "sharding_switch_from",
]
