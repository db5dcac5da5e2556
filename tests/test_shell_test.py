import pytest

from applerules.errors import ConfigurationError
from applerules.policy import Policy, ShardingSwitch
from applerules.testing import REQUIRED_DATA, TEST_RUNNER, apple_shell_test


def test_shell_test_declares_runner_and_fixed_data() -> None:
    target = apple_shell_test("ios_test", "ios_test.sh", args=["--flag"])

    assert target.name == "ios_test"
    assert target.srcs == (TEST_RUNNER,)
    assert target.args == ("ios_test.sh", "--flag")
    assert target.data == ("ios_test.sh", *REQUIRED_DATA)
    assert target.deps == ()
    assert target.tags == ("requires-darwin",)
    assert target.shard_count == 0


def test_requested_shards_only_apply_when_enabled() -> None:
    enabled = Policy(sharding=ShardingSwitch.ENABLE)
    assert apple_shell_test("a", "a.sh", shard_count=3, policy=enabled).shard_count == 3
    assert apple_shell_test("a", "a.sh", shard_count=3).shard_count == 0


def test_negative_shard_count_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        apple_shell_test("a", "a.sh", shard_count=-1)


def test_missing_script_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        apple_shell_test("a", "")


def test_string_args_are_rejected_instead_of_split() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        apple_shell_test("a", "a.sh", args="--flag")  # type: ignore[arg-type]
    assert excinfo.value.label == "apple_shell_test(a)"
    assert excinfo.value.context == {"attribute": "args", "type": "str"}


def test_non_string_items_are_rejected() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        apple_shell_test("a", "a.sh", tags=["manual", 3])  # type: ignore[list-item]
    assert excinfo.value.context["item"] == "3"
