"""Smoke tests for re-export surfaces.

Facade modules carry no logic of their own; these tests make sure every name
they advertise in ``__all__`` actually resolves.
"""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "exec_context",
        "exec_context.base",
        "exec_context.base.keys",
        "exec_context.base.cancellation",
        "exec_context.base.errors",
        "exec_context.base.errors_parts",
        "exec_context.base.log_support",
        "exec_context.config",
    ],
)
def test_all_exports_resolve(module_name: str) -> None:
    module = importlib.import_module(module_name)
    if not hasattr(module, "__all__"):
        raise AssertionError(f"{module_name} must define __all__")
    missing = [name for name in module.__all__ if not hasattr(module, name)]
    if missing:
        raise AssertionError(f"Missing re-exports in {module_name}: {missing}")


def test_version_is_exposed():
    import exec_context

    assert exec_context.__version__ == "0.1.0"
