"""Import-ready framework generation for tests."""

from .layout import FrameworkDerivation, bundle_layout, derive
from .rule import generate_import_framework

__all__ = [
    "FrameworkDerivation",
    "bundle_layout",
    "derive",
    "generate_import_framework",
]
