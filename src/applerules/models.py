"""Core typed dataclasses for rule descriptors and emitted declarations."""

from __future__ import annotations

import posixpath
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from applerules.errors import ConfigurationError

LibType = Literal["dynamic", "static"]

LIBTYPES: tuple[LibType, ...] = ("dynamic", "static")

DEFAULT_SOURCE = "test/testdata/frameworks/objc_source.m"
DEFAULT_HEADERS: tuple[str, ...] = ("test/testdata/frameworks/objc_headers.h",)
DEFAULT_GENERATOR = "test/testdata/frameworks/generate_framework"

GENERATOR_MNEMONIC = "GenerateImportedAppleFramework"

# Keyword names apple_shell_test binds itself; pass-through attributes may not reuse them.
RESERVED_TEST_ATTRIBUTES: tuple[str, ...] = (
    "name",
    "src",
    "args",
    "data",
    "deps",
    "tags",
    "shard_count",
    "policy",
)


@dataclass(frozen=True, slots=True, order=True)
class Artifact:
    """A declared file, addressed by a POSIX path relative to the output root."""

    path: str

    @property
    def basename(self) -> str:
        return posixpath.basename(self.path)

    @property
    def dirname(self) -> str:
        return posixpath.dirname(self.path)

    def __str__(self) -> str:
        return self.path


def as_artifact(value: str | Artifact) -> Artifact:
    if isinstance(value, Artifact):
        return value
    return Artifact(value)


def string_list(
    value: object,
    *,
    attribute: str,
    rule: str,
    target: str | None = None,
) -> tuple[str, ...]:
    """Return *value* as a tuple of strings, rejecting a bare string or non-string items."""
    if isinstance(value, str) or not isinstance(value, list | tuple):
        raise ConfigurationError(
            f"`{attribute}` must be a list of strings.",
            rule=rule,
            target=target,
            hint=f"Wrap a single value in a list, for example [{value!r}].",
            context={"attribute": attribute, "type": type(value).__name__},
        )
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError(
                f"`{attribute}` must only contain strings.",
                rule=rule,
                target=target,
                context={"attribute": attribute, "item": repr(item)},
            )
    return tuple(value)


def _artifact_list(value: object, *, target: str) -> tuple[Artifact, ...]:
    if isinstance(value, str | Artifact) or not isinstance(value, list | tuple):
        raise ConfigurationError(
            "`hdrs` must be a list of header files.",
            rule="generate_import_framework",
            target=target,
            hint="Wrap a single header in a list.",
            context={"attribute": "hdrs", "type": type(value).__name__},
        )
    return tuple(as_artifact(item) for item in value)


@dataclass(frozen=True, slots=True)
class FrameworkDescriptor:
    """Immutable description of one framework bundle to generate.

    ``src`` and ``hdrs`` default to the checked-in Objective-C test sources when
    left as ``None``; use :meth:`resolved` to get a descriptor whose inputs are
    concrete. An explicit empty ``hdrs`` tuple means the bundle has no headers.
    """

    name: str
    sdk: str
    minimum_os_version: str
    libtype: str
    archs: tuple[str, ...]
    src: Artifact | None = None
    hdrs: tuple[Artifact, ...] | None = None
    generator: Artifact = Artifact(DEFAULT_GENERATOR)

    @classmethod
    def create(
        cls,
        name: str,
        *,
        sdk: str,
        minimum_os_version: str,
        libtype: str,
        archs: tuple[str, ...] | list[str],
        src: str | Artifact | None = None,
        hdrs: tuple[str | Artifact, ...] | list[str | Artifact] | None = None,
    ) -> FrameworkDescriptor:
        return cls(
            name=name,
            sdk=sdk,
            minimum_os_version=minimum_os_version,
            libtype=libtype,
            archs=string_list(
                archs,
                attribute="archs",
                rule="generate_import_framework",
                target=name,
            ),
            src=None if src is None else as_artifact(src),
            hdrs=None if hdrs is None else _artifact_list(hdrs, target=name),
        )

    def resolved(self) -> FrameworkDescriptor:
        return FrameworkDescriptor(
            name=self.name,
            sdk=self.sdk,
            minimum_os_version=self.minimum_os_version,
            libtype=self.libtype,
            archs=self.archs,
            src=self.src if self.src is not None else Artifact(DEFAULT_SOURCE),
            hdrs=(
                self.hdrs
                if self.hdrs is not None
                else tuple(Artifact(path) for path in DEFAULT_HEADERS)
            ),
            generator=self.generator,
        )


@dataclass(frozen=True, slots=True)
class BundleLayout:
    bundle_directory: str
    binary: Artifact
    headers: tuple[Artifact, ...]
    umbrella_header: Artifact
    info_plist: Artifact
    module_map: Artifact

    @property
    def generated(self) -> tuple[Artifact, ...]:
        """Outputs the generator always writes, independent of input headers."""
        return (self.umbrella_header, self.info_plist, self.module_map)

    @property
    def outputs(self) -> tuple[Artifact, ...]:
        return (self.binary, *self.headers, *self.generated)


@dataclass(frozen=True, slots=True)
class ActionDecl:
    inputs: tuple[Artifact, ...]
    outputs: tuple[Artifact, ...]
    executable: Artifact
    arguments: tuple[str, ...]
    mnemonic: str


@dataclass(frozen=True, slots=True)
class FrameworkInfo:
    """Result of declaring a framework: the files it provides downstream."""

    name: str
    layout: BundleLayout
    files: tuple[Artifact, ...]


@dataclass(frozen=True, slots=True)
class TestMatrixSpec:
    __test__ = False

    name: str
    src: str
    configurations: Mapping[str, Sequence[str]] = field(hash=False)
    args: Sequence[str] = ()
    data: Sequence[str] = ()
    deps: Sequence[str] = ()
    tags: Sequence[str] = ()
    shard_count: int = 0
    attributes: Mapping[str, object] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Copies keep the spec independent of later edits to the caller's dicts.
        # List values become tuples; anything else is left for validation to reject.
        if isinstance(self.configurations, Mapping):
            configurations = {
                key: tuple(value) if isinstance(value, list) else value
                for key, value in self.configurations.items()
            }
            object.__setattr__(self, "configurations", MappingProxyType(configurations))
        for attribute in ("args", "data", "deps", "tags"):
            value = getattr(self, attribute)
            if isinstance(value, list):
                object.__setattr__(self, attribute, tuple(value))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


@dataclass(frozen=True, slots=True)
class TestTargetDecl:
    __test__ = False

    name: str
    srcs: tuple[str, ...]
    args: tuple[str, ...]
    data: tuple[str, ...]
    deps: tuple[str, ...]
    tags: tuple[str, ...]
    shard_count: int
    attributes: Mapping[str, object] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


@dataclass(frozen=True, slots=True)
class TestSuiteDecl:
    __test__ = False

    name: str
    tests: tuple[str, ...]


__all__ = [
    "ActionDecl",
    "Artifact",
    "BundleLayout",
    "DEFAULT_GENERATOR",
    "DEFAULT_HEADERS",
    "DEFAULT_SOURCE",
    "FrameworkDescriptor",
    "FrameworkInfo",
    "GENERATOR_MNEMONIC",
    "LIBTYPES",
    "LibType",
    "RESERVED_TEST_ATTRIBUTES",
    "TestMatrixSpec",
    "TestSuiteDecl",
    "TestTargetDecl",
    "as_artifact",
    "string_list",
]
