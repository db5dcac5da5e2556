"""Public package entrypoint for the Apple build rule helpers."""

from .delegate import ExecutionDelegate, RecordingDelegate
from .errors import AppleRulesError, ConfigurationError, ConsistencyError, ErrorCode
from .frameworks import derive, generate_import_framework
from .graph import BuildGraph
from .models import (
    ActionDecl,
    Artifact,
    BundleLayout,
    FrameworkDescriptor,
    FrameworkInfo,
    TestMatrixSpec,
    TestSuiteDecl,
    TestTargetDecl,
)
from .observability import StructuredLogger
from .policy import Policy, ShardingSwitch
from .testing import apple_multi_shell_test, apple_shell_test, expand

__all__ = [
    "ActionDecl",
    "AppleRulesError",
    "Artifact",
    "BuildGraph",
    "BundleLayout",
    "ConfigurationError",
    "ConsistencyError",
    "ErrorCode",
    "ExecutionDelegate",
    "FrameworkDescriptor",
    "FrameworkInfo",
    "Policy",
    "RecordingDelegate",
    "ShardingSwitch",
    "StructuredLogger",
    "TestMatrixSpec",
    "TestSuiteDecl",
    "TestTargetDecl",
    "apple_multi_shell_test",
    "apple_shell_test",
    "derive",
    "expand",
    "generate_import_framework",
]
