"""Framework bundle layout derivation and generator argument assembly.

The generator writes every file of ``<name>.framework``; this module declares
all of them up front so the execution delegate can check the action's
recorded outputs against the declared set. Three files are written without a
matching input (umbrella header, Info.plist, module map) and must always be
declared.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import cast

from applerules.models import Artifact, BundleLayout, FrameworkDescriptor
from applerules.policy import Policy
from applerules.validate import validate_framework_descriptor


@dataclass(frozen=True, slots=True)
class FrameworkDerivation:
    descriptor: FrameworkDescriptor
    layout: BundleLayout
    inputs: tuple[Artifact, ...]
    outputs: tuple[Artifact, ...]
    arguments: tuple[str, ...]


def bundle_layout(descriptor: FrameworkDescriptor) -> BundleLayout:
    """Return the declared file layout for a resolved descriptor."""
    bundle = f"{descriptor.name}.framework"
    return BundleLayout(
        bundle_directory=bundle,
        binary=Artifact(posixpath.join(bundle, descriptor.name)),
        headers=tuple(
            Artifact(posixpath.join(bundle, "Headers", header.basename))
            for header in descriptor.hdrs or ()
        ),
        umbrella_header=Artifact(posixpath.join(bundle, "Headers", f"{descriptor.name}.h")),
        info_plist=Artifact(posixpath.join(bundle, "Info.plist")),
        module_map=Artifact(posixpath.join(bundle, "Modules", "module.modulemap")),
    )


def derive(descriptor: FrameworkDescriptor, *, policy: Policy | None = None) -> FrameworkDerivation:
    """Resolve defaults, validate, and compute inputs, outputs and arguments.

    Raises :class:`~applerules.errors.ConfigurationError` before anything is
    computed when the descriptor violates a precondition.
    """
    active_policy = policy or Policy()
    resolved = descriptor.resolved()
    validate_framework_descriptor(resolved, header_collisions=active_policy.header_collisions)
    layout = bundle_layout(resolved)
    source = cast(Artifact, resolved.src)
    headers = resolved.hdrs or ()

    arguments: list[str] = [
        "--name",
        resolved.name,
        "--sdk",
        resolved.sdk,
        "--minimum_os_version",
        resolved.minimum_os_version,
        "--libtype",
        resolved.libtype,
    ]
    for arch in resolved.archs:
        arguments.extend(("--arch", arch))
    arguments.extend(("--framework_path", layout.binary.dirname))

    inputs: list[Artifact] = []
    outputs: list[Artifact] = [layout.binary]

    arguments.extend(("--source_file", source.path))
    inputs.append(source)

    for header, header_output in zip(headers, layout.headers, strict=True):
        arguments.extend(("--header_file", header.path))
        inputs.append(header)
        outputs.append(header_output)

    outputs.extend(layout.generated)

    return FrameworkDerivation(
        descriptor=resolved,
        layout=layout,
        inputs=tuple(inputs),
        outputs=tuple(outputs),
        arguments=tuple(arguments),
    )
