"""Eager precondition checks run before anything is declared."""

from __future__ import annotations

import warnings
from collections.abc import Mapping

from applerules.errors import ConfigurationError
from applerules.models import (
    LIBTYPES,
    RESERVED_TEST_ATTRIBUTES,
    FrameworkDescriptor,
    TestMatrixSpec,
    string_list,
)
from applerules.policy import HeaderCollisionPolicy

FRAMEWORK_RULE = "generate_import_framework"
MATRIX_RULE = "apple_multi_shell_test"


def validate_framework_descriptor(
    descriptor: FrameworkDescriptor,
    *,
    header_collisions: HeaderCollisionPolicy = "error",
) -> None:
    """Validate a resolved descriptor; raise before any output is declared."""
    name = descriptor.name
    if not name:
        raise ConfigurationError("Framework name must be non-empty.", rule=FRAMEWORK_RULE)
    archs = string_list(descriptor.archs, attribute="archs", rule=FRAMEWORK_RULE, target=name)
    if not archs:
        raise ConfigurationError(
            "At least one architecture is required.",
            rule=FRAMEWORK_RULE,
            target=name,
            hint="Set archs to a non-empty list such as ['arm64'].",
        )
    if not all(archs):
        raise ConfigurationError(
            "Architecture identifiers must be non-empty.",
            rule=FRAMEWORK_RULE,
            target=name,
            context={"archs": ",".join(archs)},
        )
    if descriptor.libtype not in LIBTYPES:
        raise ConfigurationError(
            "Unsupported framework library type.",
            rule=FRAMEWORK_RULE,
            target=name,
            hint="Possible values are `dynamic` or `static`.",
            context={"libtype": str(descriptor.libtype)},
        )
    if descriptor.src is None:
        raise ConfigurationError(
            "Framework descriptor must resolve to exactly one source file.",
            rule=FRAMEWORK_RULE,
            target=name,
            hint="Call resolved() on the descriptor before validating it.",
        )
    if not descriptor.src.path:
        raise ConfigurationError(
            "Source file path must be non-empty.",
            rule=FRAMEWORK_RULE,
            target=name,
            hint="Leave src unset to use the default Objective-C source.",
        )
    for header in descriptor.hdrs or ():
        if not header.path:
            raise ConfigurationError(
                "Header file paths must be non-empty.",
                rule=FRAMEWORK_RULE,
                target=name,
            )
    _check_header_basenames(descriptor, policy=header_collisions)


def validate_test_matrix(spec: TestMatrixSpec) -> None:
    name = spec.name
    if not name:
        raise ConfigurationError("Test name must be non-empty.", rule=MATRIX_RULE)
    if not spec.src:
        raise ConfigurationError(
            "A test script is required.",
            rule=MATRIX_RULE,
            target=name,
        )
    if not isinstance(spec.configurations, Mapping):
        raise ConfigurationError(
            "`configurations` must map configuration names to argument lists.",
            rule=MATRIX_RULE,
            target=name,
            context={"type": type(spec.configurations).__name__},
        )
    if not spec.configurations:
        raise ConfigurationError(
            "At least one configuration required.",
            rule=MATRIX_RULE,
            target=name,
            hint="You must specify at least one configuration in the 'configurations' attribute.",
        )
    for config_name, config_args in spec.configurations.items():
        if not isinstance(config_name, str) or not config_name:
            raise ConfigurationError(
                "Configuration names must be non-empty strings.",
                rule=MATRIX_RULE,
                target=name,
                context={"configuration": repr(config_name)},
            )
        string_list(
            config_args,
            attribute=f"configurations[{config_name!r}]",
            rule=MATRIX_RULE,
            target=name,
        )
    for attribute in ("args", "data", "deps", "tags"):
        string_list(getattr(spec, attribute), attribute=attribute, rule=MATRIX_RULE, target=name)
    reserved = sorted(key for key in spec.attributes if key in RESERVED_TEST_ATTRIBUTES)
    if reserved:
        raise ConfigurationError(
            "Pass-through attributes reuse names the test macro sets itself.",
            rule=MATRIX_RULE,
            target=name,
            hint="Use the dedicated TestMatrixSpec fields for these values.",
            context={"attributes": ",".join(reserved)},
        )


def _check_header_basenames(
    descriptor: FrameworkDescriptor,
    *,
    policy: HeaderCollisionPolicy,
) -> None:
    if policy == "allow":
        return
    seen: dict[str, str] = {}
    for header in descriptor.hdrs or ():
        previous = seen.get(header.basename)
        if previous is not None:
            context = {
                "basename": header.basename,
                "headers": f"{previous},{header.path}",
            }
            if policy == "error":
                raise ConfigurationError(
                    "Header files share a basename inside the framework Headers directory.",
                    rule=FRAMEWORK_RULE,
                    target=descriptor.name,
                    hint="Rename one of the headers or set header_collisions='warn'.",
                    context=context,
                )
            warnings.warn(
                f"Header {header.path} overwrites {previous} in "
                f"{descriptor.name}.framework/Headers.",
                RuntimeWarning,
                stacklevel=3,
            )
        seen[header.basename] = header.path
