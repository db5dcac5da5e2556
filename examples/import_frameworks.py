"""Declare a dynamic and a static test framework and export the declarations."""

from applerules import FrameworkDescriptor, RecordingDelegate, StructuredLogger
from applerules.frameworks import generate_import_framework


def declare_frameworks() -> None:
    delegate = RecordingDelegate()
    logger = StructuredLogger()
    generate_import_framework(
        FrameworkDescriptor.create(
            "iOSImportedDynamicFramework",
            sdk="iphonesimulator",
            minimum_os_version="11.0",
            libtype="dynamic",
            archs=["x86_64", "arm64"],
        ),
        delegate=delegate,
        logger=logger,
    )
    generate_import_framework(
        FrameworkDescriptor.create(
            "iOSImportedStaticFramework",
            sdk="iphoneos",
            minimum_os_version="11.0",
            libtype="static",
            archs=["arm64"],
        ),
        delegate=delegate,
        logger=logger,
    )
    print(delegate.graph().to_json())


if __name__ == "__main__":
    declare_frameworks()
