import importlib

CORE_MODULES = [
    "applerules.errors",
    "applerules.models",
    "applerules.policy",
    "applerules.validate",
    "applerules.frameworks",
    "applerules.testing",
    "applerules.delegate",
    "applerules.graph",
    "applerules.observability",
]


def test_core_package_layout_modules_importable() -> None:
    for module_name in CORE_MODULES:
        module = importlib.import_module(module_name)
        assert module is not None
