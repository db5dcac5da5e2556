"""Rule entrypoint that declares an import-ready framework for tests."""

from __future__ import annotations

from applerules.delegate.base import ExecutionDelegate
from applerules.errors import AppleRulesError
from applerules.frameworks.layout import derive
from applerules.models import GENERATOR_MNEMONIC, ActionDecl, FrameworkDescriptor, FrameworkInfo
from applerules.observability import StructuredLogger
from applerules.policy import Policy

RULE = "generate_import_framework"


def generate_import_framework(
    descriptor: FrameworkDescriptor,
    *,
    delegate: ExecutionDelegate,
    policy: Policy | None = None,
    logger: StructuredLogger | None = None,
) -> FrameworkInfo:
    """Declare the generator action for *descriptor* and return its files.

    The delegate is called exactly once. Nothing is declared when the
    descriptor fails validation. When headers collide under a permissive
    policy the argv keeps every ``--header_file`` while ``files`` lists each
    bundle path once.
    """
    try:
        derivation = derive(descriptor, policy=policy)
    except AppleRulesError as error:
        if logger is not None:
            logger.log_error(rule=RULE, target=descriptor.name, error=error)
        raise
    if logger is not None:
        logger.log(
            operation="derive_framework_layout",
            rule=RULE,
            target=derivation.descriptor.name,
            message="Derived framework bundle layout.",
            extra={
                "outputs": [artifact.path for artifact in derivation.outputs],
                "archs": list(derivation.descriptor.archs),
            },
        )

    action = ActionDecl(
        inputs=derivation.inputs,
        outputs=derivation.outputs,
        executable=derivation.descriptor.generator,
        arguments=derivation.arguments,
        mnemonic=GENERATOR_MNEMONIC,
    )
    try:
        delegate.declare_action(action)
    except AppleRulesError as error:
        if logger is not None:
            logger.log_error(rule=RULE, target=derivation.descriptor.name, error=error)
        raise
    if logger is not None:
        logger.log(
            operation="declare_generator_action",
            rule=RULE,
            target=derivation.descriptor.name,
            message="Declared framework generator action.",
            extra={"delegate": delegate.name, "mnemonic": action.mnemonic},
        )

    return FrameworkInfo(
        name=derivation.descriptor.name,
        layout=derivation.layout,
        files=tuple(dict.fromkeys(derivation.outputs)),
    )
