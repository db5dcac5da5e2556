"""Shared test fixtures."""

from __future__ import annotations

import pytest

from applerules.delegate import RecordingDelegate
from applerules.models import FrameworkDescriptor
from applerules.observability import StructuredLogger


@pytest.fixture
def delegate() -> RecordingDelegate:
    """Provide a recording delegate for tests that declare targets."""
    return RecordingDelegate()


@pytest.fixture
def logger() -> StructuredLogger:
    return StructuredLogger()


@pytest.fixture
def foo_descriptor() -> FrameworkDescriptor:
    return FrameworkDescriptor.create(
        "Foo",
        sdk="iphoneos",
        minimum_os_version="12.0",
        libtype="dynamic",
        archs=["arm64"],
        src="a.m",
        hdrs=["a.h"],
    )
