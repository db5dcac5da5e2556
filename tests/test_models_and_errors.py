import pytest

from applerules.errors import ConfigurationError, ConsistencyError, ErrorCode
from applerules.models import Artifact, FrameworkDescriptor, TestTargetDecl


def test_artifact_path_helpers() -> None:
    artifact = Artifact("Foo.framework/Headers/Foo.h")
    assert artifact.basename == "Foo.h"
    assert artifact.dirname == "Foo.framework/Headers"
    assert str(artifact) == "Foo.framework/Headers/Foo.h"


def test_descriptor_resolution_keeps_explicit_inputs() -> None:
    descriptor = FrameworkDescriptor.create(
        "Foo",
        sdk="iphoneos",
        minimum_os_version="12.0",
        libtype="dynamic",
        archs=("arm64",),
        src=Artifact("a.m"),
        hdrs=("a.h",),
    )
    resolved = descriptor.resolved()
    assert resolved.src == Artifact("a.m")
    assert resolved.hdrs == (Artifact("a.h"),)
    assert resolved == descriptor


def test_error_codes_are_stable_and_machine_readable() -> None:
    errors = [
        ConfigurationError("bad input"),
        ConsistencyError("outputs differ"),
    ]
    assert [error.code for error in errors] == [
        ErrorCode.CONFIGURATION.value,
        ErrorCode.CONSISTENCY.value,
    ]


def test_error_rendering_includes_hint_and_context() -> None:
    error = ConfigurationError(
        "At least one architecture is required.",
        hint="Set archs.",
        context={"name": "Foo", "empty": ""},
    )
    rendered = str(error)
    assert rendered.splitlines() == [
        "At least one architecture is required.",
        "Hint: Set archs.",
        "  name: Foo",
    ]
    payload = error.to_dict()
    assert payload["code"] == "E_CONFIGURATION"
    assert payload["hint"] == "Set archs."
    assert payload["context"] == {"name": "Foo", "empty": ""}


def test_error_names_the_rule_and_target_it_failed_for() -> None:
    error = ConsistencyError(
        "Target is declared more than once.",
        rule="apple_multi_shell_test",
        target="t.sim",
    )
    assert error.label == "apple_multi_shell_test(t.sim)"
    assert str(error) == "apple_multi_shell_test(t.sim): Target is declared more than once."
    payload = error.to_dict()
    assert payload["message"] == "Target is declared more than once."
    assert payload["rule"] == "apple_multi_shell_test"
    assert payload["target"] == "t.sim"
    assert "hint" not in payload


@pytest.mark.parametrize("archs", ["arm64", "x86_64"])
def test_string_archs_are_rejected_instead_of_split(archs: str) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        FrameworkDescriptor.create(
            "Foo",
            sdk="iphoneos",
            minimum_os_version="12.0",
            libtype="dynamic",
            archs=archs,  # type: ignore[arg-type]
        )
    assert excinfo.value.target == "Foo"
    assert excinfo.value.context["attribute"] == "archs"


def test_string_headers_are_rejected_instead_of_split() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        FrameworkDescriptor.create(
            "Foo",
            sdk="iphoneos",
            minimum_os_version="12.0",
            libtype="dynamic",
            archs=["arm64"],
            hdrs="a.h",  # type: ignore[arg-type]
        )
    assert excinfo.value.context["attribute"] == "hdrs"


def test_test_declarations_are_hashable_and_read_only() -> None:
    attributes: dict[str, object] = {"size": "large"}
    target = TestTargetDecl(
        name="t.sim",
        srcs=("bazel_testrunner.sh",),
        args=("t.sh",),
        data=("t.sh",),
        deps=(),
        tags=("requires-darwin",),
        shard_count=0,
        attributes=attributes,
    )
    attributes["size"] = "small"

    assert target.attributes["size"] == "large"
    assert isinstance(hash(target), int)
    with pytest.raises(TypeError):
        target.attributes["size"] = "small"  # type: ignore[index]
