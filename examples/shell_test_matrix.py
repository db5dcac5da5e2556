"""Expand an integration test script across simulator and device configurations."""

import sys

from applerules import Policy, RecordingDelegate, apple_multi_shell_test


def declare_tests(defines: list[str]) -> None:
    delegate = RecordingDelegate()
    apple_multi_shell_test(
        "ios_application_test",
        "ios_application_test.sh",
        {
            "simulator": ["--ios_multi_cpus=x86_64"],
            "device": ["--ios_multi_cpus=arm64,armv7"],
        },
        delegate=delegate,
        shard_count=4,
        policy=Policy.from_defines(defines),
        size="large",
    )
    for test in delegate.tests:
        print(f"{test.name}: shards={test.shard_count} args={' '.join(test.args)}")
    print(f"{delegate.suites[0].name}: {', '.join(delegate.suites[0].tests)}")


if __name__ == "__main__":
    declare_tests(sys.argv[1:])
